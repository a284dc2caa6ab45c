"""
Movie record utilities package.

This package contains helpers that mutate and read plain movie-record
mappings: rating, genre and cast updates, director removal, and
type-checked property accessors.
"""

from movie_records.core.checks import TypeTag, has_property_of_type, is_movie_record
from movie_records.core.manipulation import (
    ALLOWED_GENRES,
    add_cast_member,
    add_movie_genre,
    get_allowed_genres,
    remove_director_property,
    set_movie_rating,
    try_add_cast_member,
    try_add_movie_genre,
    try_remove_director_property,
    try_set_movie_rating,
)
from movie_records.core.validation import (
    get_movie_keys,
    get_movie_properties_count,
    get_movie_title,
    get_movie_year,
    get_movie_year_or_zero,
    is_movie_classic,
)
from movie_records.models import MutationResult, ReasonCode, ValidationFailure

__version__ = "1.0.0"

__all__ = [
    # Checks
    'TypeTag',
    'has_property_of_type',
    'is_movie_record',
    # Mutations
    'ALLOWED_GENRES',
    'set_movie_rating',
    'add_movie_genre',
    'remove_director_property',
    'add_cast_member',
    'get_allowed_genres',
    'try_set_movie_rating',
    'try_add_movie_genre',
    'try_remove_director_property',
    'try_add_cast_member',
    # Accessors
    'get_movie_title',
    'get_movie_year',
    'get_movie_year_or_zero',
    'is_movie_classic',
    'get_movie_keys',
    'get_movie_properties_count',
    # Results
    'MutationResult',
    'ReasonCode',
    'ValidationFailure',
]
