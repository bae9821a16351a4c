"""
Utility functions for report extraction pipeline.
"""

import os
import logging
from typing import Optional


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Setup logger with consistent formatting.

    Args:
        name: Logger name
        level: Logging level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def set_package_log_level(level: int):
    """Apply a logging level to every logger of this package."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("report_extractor") and isinstance(logger, logging.Logger):
            logger.setLevel(level)


def ensure_dir(path: str) -> str:
    """
    Create directory if it doesn't exist.

    Args:
        path: Directory path

    Returns:
        Absolute path to directory
    """
    os.makedirs(path, exist_ok=True)
    return os.path.abspath(path)


def parse_number(value: str) -> Optional[float]:
    """
    Parse a cell value as a base-10 float.

    Args:
        value: Cell text

    Returns:
        Float value, or None when the text is not a finite decimal number
    """
    text = value.strip()
    if not text or not text.isascii():
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    # float() also accepts "nan", "inf" and "1_000"
    if number != number or number in (float("inf"), float("-inf")) or "_" in text:
        return None
    return number
