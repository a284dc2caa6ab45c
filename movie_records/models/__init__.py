"""
Pydantic models for reporting the outcome of record operations.
"""

from movie_records.models.result import ReasonCode, ValidationFailure, MutationResult

__all__ = [
    "ReasonCode",
    "ValidationFailure",
    "MutationResult",
]
