"""
Shared utilities package.

This package contains logging configuration used by the scripts and
by applications embedding the movie record helpers.
"""

from movie_records.utils.logging_config import setup_logging, get_logger, configure_logging

__all__ = ['setup_logging', 'get_logger', 'configure_logging']
