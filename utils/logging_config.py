"""
Logging configuration for the fact-check pipeline.

Provides centralized logging setup with appropriate levels and formatting
for the components under the ``factcheck`` package.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = 'factcheck'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up logging configuration for the factcheck package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        console: Whether to enable console logging

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance for the specified name.

    Args:
        name: Logger name (prefixed with 'factcheck.' unless already qualified)

    Returns:
        Logger instance
    """
    if name == LOGGER_NAME or name.startswith(f'{LOGGER_NAME}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
