"""
Logging Setup

Installs console and file handlers on the package logger.
"""

import logging
import sys

from .config import config


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = True,
    logger_name: str = "file_utils",
) -> logging.Logger:
    """Set up logging for the package."""
    level = getattr(logging, log_level.upper())
    
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger
    
    logger.setLevel(level)
    
    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)
    
    if log_to_file:
        # Ensure log directory exists
        config.log.log_directory.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(
            config.log.log_file_path,
            mode='a',
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(config.log.log_format))
        logger.addHandler(file_handler)
    
    return logger
