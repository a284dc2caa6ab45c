"""
Logging configuration for the movie record helpers.

The helpers report rejected input through loggers named after their
modules (see get_logger); this module decides where those diagnostics
end up: stderr, a rotating log file, or both.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from movie_records import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_handlers(
    log_file: Optional[str],
    log_dir: str,
    max_bytes: int,
    backup_count: int
) -> List[logging.Handler]:
    # stderr keeps diagnostics apart from program output
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        ))

    return handlers


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Route all diagnostics to stderr and, optionally, a rotating file.
    
    Replaces any handlers already installed on the root logger.
    
    Args:
        log_file: Name of log file (default: None, stderr only)
        level: Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_dir: Directory for log files (default: 'logs')
        max_bytes: Size at which the log file rotates (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)
    """
    log_level = logging.getLevelName(level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    for handler in _build_handlers(log_file, log_dir, max_bytes, backup_count):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        if isinstance(handler, RotatingFileHandler):
            root_logger.info("Logging to file: %s", handler.baseFilename)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get the logger a movie record module reports through.
    
    Args:
        name: Module name (typically __name__)
        level: Optional level name overriding the inherited level
        
    Returns:
        logging.Logger for that module
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(logging.getLevelName(level.upper()))
    return logger


def configure_logging(debug: bool = False):
    """
    Configure logging from the MOVIE_RECORDS_* environment variables.
    
    Args:
        debug: Force debug logging regardless of the environment (default: False)
    """
    setup_logging(
        log_file=config.get_log_file(),
        level="DEBUG" if debug else config.get_log_level(),
        log_dir=config.get_log_dir()
    )
