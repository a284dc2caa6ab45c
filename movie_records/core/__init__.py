"""
Core record operations package.

This package provides the shared record checks, the mutation helpers,
and the type-checked accessors.
"""

from movie_records.core import checks, manipulation, validation

__all__ = ['checks', 'manipulation', 'validation']
