"""
Logging configuration utility.
"""

import logging
import os
import sys
from typing import Any, Dict, Optional


DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = 'INFO',
    format_str: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_str: Log message format
        log_file: Optional file to write logs to

    Returns:
        Configured root logger
    """
    if format_str is None:
        format_str = DEFAULT_FORMAT

    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    formatter = logging.Formatter(format_str)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Replace whatever an earlier call installed
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def setup_logging_from_settings(
    settings: Dict[str, Any],
    level_override: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging from the ``logging`` section of settings.yaml.

    Args:
        settings: Parsed settings dictionary
        level_override: Level that wins over the configured one (e.g. from --verbose)

    Returns:
        Configured root logger
    """
    log_settings = settings.get('logging') or {}
    return setup_logging(
        level=level_override or log_settings.get('level', 'INFO'),
        format_str=log_settings.get('format'),
        log_file=log_settings.get('file'),
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
