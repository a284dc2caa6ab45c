"""
Mutation helpers for movie records.

Each helper validates its input, then changes the record in place and
returns the same object. Rejected input leaves the record untouched and
is logged, never raised. With ``in_place=False`` a deep copy is changed
instead; a record that cannot be copied is rejected. The ``try_*``
variants return a MutationResult so callers can inspect why an update
was rejected.
"""

import copy
from typing import Any, List, Optional, Tuple

from movie_records.core.checks import has_own_key, is_mutable_record, is_number
from movie_records.models.result import MutationResult, ReasonCode, ValidationFailure
from movie_records.utils.logging_config import get_logger

logger = get_logger(__name__)

ALLOWED_GENRES = ("Animation", "Family", "Action", "Comedy", "Drama", "Sci-Fi")

MIN_RATING = 0
MAX_RATING = 10


def get_allowed_genres() -> List[str]:
    """Return a copy of the allowed genres, in their canonical order."""
    return list(ALLOWED_GENRES)


def _reject(record: Any, reason: ReasonCode, message: str, field: Optional[str] = None) -> MutationResult:
    logger.error(message)
    return MutationResult(
        record=record,
        failure=ValidationFailure(reason=reason, field=field, message=message),
    )


def _target(record: Any, in_place: bool, operation: str) -> Tuple[Any, Optional[MutationResult]]:
    """Pick the record to change: the caller's own, or a deep copy of it."""
    if in_place:
        return record, None
    try:
        return copy.deepcopy(record), None
    except (TypeError, copy.Error) as e:
        return None, _reject(
            record, ReasonCode.NOT_COPYABLE, f"{operation}: cannot copy movie: {e}"
        )


# ==================== RATING ====================

def try_set_movie_rating(movie: Any, rating: Any, in_place: bool = True) -> MutationResult:
    """
    Set the movie rating if it is a number between 0 and 10 inclusive.
    
    Args:
        movie: Movie record (a mutable mapping)
        rating: New rating value
        in_place: Update movie itself (default) or a deep copy of it
        
    Returns:
        MutationResult holding the updated record, or the untouched
        input and the reason it was rejected
    """
    if not is_mutable_record(movie):
        return _reject(movie, ReasonCode.INVALID_RECORD, "set_movie_rating: movie is not a mutable mapping")
    if not is_number(rating):
        return _reject(movie, ReasonCode.INVALID_TYPE, "set_movie_rating: rating must be a number", "rating")
    # NaN fails both comparisons
    if not (MIN_RATING <= rating <= MAX_RATING):
        return _reject(
            movie, ReasonCode.OUT_OF_RANGE,
            f"set_movie_rating: rating {rating!r} outside {MIN_RATING}-{MAX_RATING}", "rating"
        )

    target, rejected = _target(movie, in_place, "set_movie_rating")
    if rejected is not None:
        return rejected
    target["rating"] = rating
    return MutationResult(record=target)


def set_movie_rating(movie: Any, rating: Any, in_place: bool = True) -> Any:
    """Set the movie rating; returns the movie (or the invalid input unchanged)."""
    return try_set_movie_rating(movie, rating, in_place=in_place).record


# ==================== GENRE ====================

def try_add_movie_genre(movie: Any, genre: Any, in_place: bool = True) -> MutationResult:
    """
    Set the movie genre if it is one of ALLOWED_GENRES.
    
    The genre is a single value: an existing genre is replaced, not
    extended. Matching is exact and case-sensitive.
    
    Args:
        movie: Movie record (a mutable mapping)
        genre: Genre name
        in_place: Update movie itself (default) or a deep copy of it
        
    Returns:
        MutationResult holding the updated record, or the untouched
        input and the reason it was rejected
    """
    if not is_mutable_record(movie):
        return _reject(movie, ReasonCode.INVALID_RECORD, "add_movie_genre: movie is not a mutable mapping")
    if not isinstance(genre, str):
        return _reject(movie, ReasonCode.INVALID_TYPE, "add_movie_genre: genre must be a string", "genre")
    if genre not in ALLOWED_GENRES:
        return _reject(movie, ReasonCode.NOT_ALLOWED, f"add_movie_genre: genre {genre!r} is not allowed", "genre")

    target, rejected = _target(movie, in_place, "add_movie_genre")
    if rejected is not None:
        return rejected
    target["genre"] = genre
    return MutationResult(record=target)


def add_movie_genre(movie: Any, genre: Any, in_place: bool = True) -> Any:
    """Set the movie genre; returns the movie (or the invalid input unchanged)."""
    return try_add_movie_genre(movie, genre, in_place=in_place).record


# ==================== DIRECTOR ====================

def try_remove_director_property(movie: Any, in_place: bool = True) -> MutationResult:
    """
    Remove the director from the movie record.
    
    Args:
        movie: Movie record (a mutable mapping)
        in_place: Update movie itself (default) or a deep copy of it
        
    Returns:
        MutationResult holding the updated record, or the untouched
        input and the reason it was rejected (including a director
        that is already absent)
    """
    if not is_mutable_record(movie):
        return _reject(
            movie, ReasonCode.INVALID_RECORD,
            "remove_director_property: movie is not a mutable mapping"
        )
    if not has_own_key(movie, "director"):
        return _reject(
            movie, ReasonCode.MISSING_PROPERTY,
            "remove_director_property: no director to remove", "director"
        )

    target, rejected = _target(movie, in_place, "remove_director_property")
    if rejected is not None:
        return rejected
    del target["director"]
    return MutationResult(record=target)


def remove_director_property(movie: Any, in_place: bool = True) -> Any:
    """Remove the director; returns the movie (or the invalid input unchanged)."""
    return try_remove_director_property(movie, in_place=in_place).record


# ==================== CAST ====================

def try_add_cast_member(movie: Any, new_member: Any, in_place: bool = True) -> MutationResult:
    """
    Append a member to the movie's cast list.
    
    The cast must already be a list; a missing cast is not created.
    
    Args:
        movie: Movie record (a mutable mapping with a "cast" list)
        new_member: Cast member name
        in_place: Update movie itself (default) or a deep copy of it
        
    Returns:
        MutationResult holding the updated record, or the untouched
        input and the reason it was rejected
    """
    if not is_mutable_record(movie):
        return _reject(
            movie, ReasonCode.INVALID_RECORD,
            "add_cast_member: movie is not a mutable mapping"
        )
    if not has_own_key(movie, "cast"):
        return _reject(
            movie, ReasonCode.MISSING_PROPERTY,
            "add_cast_member: movie has no cast list", "cast"
        )
    if not isinstance(movie["cast"], list):
        return _reject(
            movie, ReasonCode.INVALID_TYPE,
            "add_cast_member: cast is not a list", "cast"
        )
    if not isinstance(new_member, str):
        return _reject(
            movie, ReasonCode.INVALID_TYPE,
            "add_cast_member: new member must be a string", "new_member"
        )

    target, rejected = _target(movie, in_place, "add_cast_member")
    if rejected is not None:
        return rejected
    target["cast"].append(new_member)
    return MutationResult(record=target)


def add_cast_member(movie: Any, new_member: Any, in_place: bool = True) -> Any:
    """Append a cast member; returns the movie (or the invalid input unchanged)."""
    return try_add_cast_member(movie, new_member, in_place=in_place).record
