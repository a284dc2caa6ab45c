"""
Type-checked accessors for movie records.

Accessors never raise on bad input: they log a warning and fall back to
an empty value ("" for title, None for year, False, [] or 0).
"""

from typing import Any, List, Optional, Union

from movie_records.core.checks import TypeTag, has_property_of_type, is_movie_record, own_keys
from movie_records.utils.logging_config import get_logger

logger = get_logger(__name__)

CLASSIC_CUTOFF_YEAR = 2000


def get_movie_title(movie: Any) -> str:
    """
    Get the movie title.
    
    Args:
        movie: Movie record
        
    Returns:
        The title, or an empty string if the record is invalid or the
        title is missing or not a string
    """
    if not has_property_of_type(movie, "title", TypeTag.STRING):
        logger.warning("get_movie_title: invalid movie or missing title")
        return ""
    return movie["title"]


def get_movie_year(movie: Any) -> Optional[Union[int, float]]:
    """
    Get the movie release year.
    
    Args:
        movie: Movie record
        
    Returns:
        The year, or None if the record is invalid or the year is missing
        or not a number. A stored year of 0 is returned as 0.
    """
    if not has_property_of_type(movie, "year", TypeTag.NUMBER):
        logger.warning("get_movie_year: invalid movie or missing year")
        return None
    return movie["year"]


def get_movie_year_or_zero(movie: Any) -> Union[int, float]:
    """Get the movie year, with 0 standing in for a missing or invalid year."""
    year = get_movie_year(movie)
    return 0 if year is None else year


def is_movie_classic(movie: Any) -> bool:
    """
    Check whether the movie was released before 2000.
    
    Args:
        movie: Movie record
        
    Returns:
        True if the year is known and earlier than 2000
    """
    year = get_movie_year(movie)
    if year is None:
        logger.warning("is_movie_classic: invalid movie or missing year")
        return False
    return year < CLASSIC_CUTOFF_YEAR


def get_movie_keys(movie: Any) -> List[str]:
    """Return the record's own keys in insertion order ([] for non-records)."""
    if not is_movie_record(movie):
        logger.warning("get_movie_keys: input is not a movie record")
        return []
    return own_keys(movie)


def get_movie_properties_count(movie: Any) -> int:
    """Return the number of properties in the record (0 for non-records)."""
    if not is_movie_record(movie):
        logger.warning("get_movie_properties_count: input is not a movie record")
        return 0
    return len(get_movie_keys(movie))


__all__ = [
    'has_property_of_type',
    'get_movie_title',
    'get_movie_year',
    'get_movie_year_or_zero',
    'is_movie_classic',
    'get_movie_keys',
    'get_movie_properties_count',
]
