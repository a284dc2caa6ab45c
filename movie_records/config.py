"""
Package configuration loaded from environment or defaults.
"""

import os
from typing import Optional


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("MOVIE_RECORDS_LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name from env (None logs to console only)."""
    return os.getenv("MOVIE_RECORDS_LOG_FILE") or None


def get_log_dir() -> str:
    """Get directory for log files."""
    return os.getenv("MOVIE_RECORDS_LOG_DIR", "logs")
