"""
Environment configuration management for the fact-check project.
Resolves the runtime environment and loads matching .env files.
"""

import os
import sys
from typing import Optional
from pathlib import Path

import dotenv

VALID_ENVIRONMENTS = {'development', 'testing', 'production'}
ENV_VAR = 'FACTCHECK_ENV'


class Config:
    """Centralized environment configuration."""

    _environment: Optional[str] = None
    _env_loaded: bool = False

    @classmethod
    def _load_env_file(cls) -> None:
        """Load environment-specific .env file if it exists."""
        if cls._env_loaded:
            return

        env = cls._get_environment_no_load()
        env_file = cls.get_project_root() / f'.env.{env}'

        if env_file.exists():
            dotenv.load_dotenv(env_file, override=True)
        else:
            # Only load default .env if no environment-specific file exists
            default_env_file = cls.get_project_root() / '.env'
            if default_env_file.exists():
                dotenv.load_dotenv(default_env_file, override=False)

        cls._env_loaded = True

    @classmethod
    def _get_environment_no_load(cls) -> str:
        """Get environment without loading .env files (to avoid recursion)."""
        env = os.environ.get(ENV_VAR, '').strip().lower()

        # Auto-detect testing environment
        if not env:
            argv0 = sys.argv[0] if sys.argv else ''
            if os.environ.get('PYTEST_CURRENT_TEST') or 'pytest' in argv0:
                env = 'testing'

        if not env:
            env = 'development'

        return env

    @classmethod
    def get_environment(cls) -> str:
        """Get the current environment with proper priority order."""
        if cls._environment is not None:
            return cls._environment

        cls._load_env_file()

        env = cls._get_environment_no_load()
        if env not in VALID_ENVIRONMENTS:
            raise ValueError(f"Invalid environment '{env}'. Must be one of: {VALID_ENVIRONMENTS}")

        cls._environment = env
        return env

    @classmethod
    def set_environment(cls, env: str) -> None:
        """Override the environment (useful for testing)."""
        if env not in VALID_ENVIRONMENTS:
            raise ValueError(f"Invalid environment '{env}'. Must be one of: {VALID_ENVIRONMENTS}")
        cls._environment = env

    @classmethod
    def reset(cls) -> None:
        """Forget the cached environment and loaded .env state."""
        cls._environment = None
        cls._env_loaded = False

    @classmethod
    def is_development(cls) -> bool:
        return cls.get_environment() == 'development'

    @classmethod
    def is_testing(cls) -> bool:
        return cls.get_environment() == 'testing'

    @classmethod
    def is_production(cls) -> bool:
        return cls.get_environment() == 'production'

    @classmethod
    def get_env_var(cls, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get environment variable with automatic .env file loading."""
        cls._load_env_file()
        return os.environ.get(key, default)

    @classmethod
    def get_int(cls, key: str, default: int) -> int:
        """Get an integer environment variable, falling back to ``default``."""
        raw = cls.get_env_var(key)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Environment variable {key} must be an integer, got '{raw}'")

    @classmethod
    def get_project_root(cls) -> Path:
        """Get project root directory."""
        return Path(__file__).resolve().parent.parent


# Global instance for easy access
config = Config()
