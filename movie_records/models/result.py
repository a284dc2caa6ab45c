"""
Pydantic schemas for mutation outcomes.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class ReasonCode(str, Enum):
    """Why a record operation was rejected."""

    INVALID_RECORD = "invalid_record"
    INVALID_TYPE = "invalid_type"
    OUT_OF_RANGE = "out_of_range"
    NOT_ALLOWED = "not_allowed"
    MISSING_PROPERTY = "missing_property"
    NOT_COPYABLE = "not_copyable"


class ValidationFailure(BaseModel):
    """A rejected input, with the offending field when there is one."""

    reason: ReasonCode
    field: str | None = None
    message: str


class MutationResult(BaseModel):
    """Outcome of a mutation.

    ``record`` is the caller's object itself (or the invalid input as
    given); it is stored without validation so identity is preserved.
    """

    record: Any = None
    failure: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
