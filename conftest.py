"""
Global pytest configuration for the fact-check project.
Pins the testing environment for every test.
"""

import pytest
import os

from utils.config import Config, ENV_VAR


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment for all tests."""
    original_env = os.environ.get(ENV_VAR)
    os.environ[ENV_VAR] = 'testing'
    Config.reset()

    yield

    # Restore original environment
    if original_env:
        os.environ[ENV_VAR] = original_env
    else:
        os.environ.pop(ENV_VAR, None)
    Config.reset()
