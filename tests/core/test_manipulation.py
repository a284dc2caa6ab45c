"""
Unit tests for the movie record mutation helpers.

Diagnostics are checked for presence only; their text is not part of
the interface.
"""

import math
import threading
from collections import ChainMap

import pytest

from movie_records.core import manipulation
from movie_records.core.manipulation import (
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
from movie_records.models import ReasonCode

LOGGER_NAME = manipulation.__name__


@pytest.fixture
def movie():
    """Sample movie record."""
    return {
        "id": 1,
        "title": "Toy Story",
        "director": "John Lasseter",
        "year": 1995,
        "genre": "Animation",
        "rating": 8.3,
        "cast": ["Tom Hanks", "Tim Allen", "Don Rickles"],
    }


def diagnostics(caplog):
    return [r for r in caplog.records if r.name == LOGGER_NAME]


class TestSetMovieRating:
    """Tests for set_movie_rating."""

    @pytest.mark.parametrize("rating", [0, 9.1, 10, 5])
    def test_valid_rating(self, movie, rating, caplog):
        result = set_movie_rating(movie, rating)
        assert result is movie
        assert movie["rating"] == rating
        assert diagnostics(caplog) == []

    @pytest.mark.parametrize("rating", [-0.1, 10.5, 11, "9", None, True, math.nan, math.inf])
    def test_invalid_rating_leaves_record(self, movie, rating, caplog):
        result = set_movie_rating(movie, rating)
        assert result is movie
        assert movie["rating"] == 8.3
        assert len(diagnostics(caplog)) == 1

    def test_none_passthrough(self, caplog):
        assert set_movie_rating(None, 8.5) is None
        assert len(diagnostics(caplog)) == 1

    def test_empty_record_is_valid(self):
        assert set_movie_rating({}, 7) == {"rating": 7}

    def test_reason_codes(self, movie):
        assert try_set_movie_rating(None, 5).failure.reason == ReasonCode.INVALID_RECORD
        assert try_set_movie_rating(movie, "5").failure.reason == ReasonCode.INVALID_TYPE
        assert try_set_movie_rating(movie, 42).failure.reason == ReasonCode.OUT_OF_RANGE

    def test_copy_variant(self, movie):
        result = set_movie_rating(movie, 2, in_place=False)
        assert result is not movie
        assert result["rating"] == 2
        assert movie["rating"] == 8.3


class TestAddMovieGenre:
    """Tests for add_movie_genre."""

    @pytest.mark.parametrize("genre", ["Animation", "Family", "Action", "Comedy", "Drama", "Sci-Fi"])
    def test_allowed_genre(self, movie, genre):
        assert add_movie_genre(movie, genre)["genre"] == genre

    def test_replaces_existing_genre(self, movie):
        add_movie_genre(movie, "Family")
        add_movie_genre(movie, "Comedy")
        assert movie["genre"] == "Comedy"

    @pytest.mark.parametrize("genre", ["Horror", "family", "", 123, None, ["Family"]])
    def test_rejected_genre(self, movie, genre, caplog):
        result = add_movie_genre(movie, genre)
        assert result is movie
        assert movie["genre"] == "Animation"
        assert len(diagnostics(caplog)) == 1

    def test_copy_variant(self, movie):
        result = add_movie_genre(movie, "Drama", in_place=False)
        assert result is not movie
        assert result["genre"] == "Drama"
        assert movie["genre"] == "Animation"

    def test_reason_codes(self):
        assert try_add_movie_genre({}, 123).failure.reason == ReasonCode.INVALID_TYPE
        result = try_add_movie_genre({}, "Horror")
        assert result.failure.reason == ReasonCode.NOT_ALLOWED
        assert result.failure.field == "genre"
        assert try_add_movie_genre("movie", "Drama").failure.reason == ReasonCode.INVALID_RECORD


class TestRemoveDirectorProperty:
    """Tests for remove_director_property."""

    def test_removes_director(self, movie, caplog):
        result = remove_director_property(movie)
        assert result is movie
        assert "director" not in movie
        assert diagnostics(caplog) == []

    def test_absent_director_is_reported(self, movie, caplog):
        remove_director_property(movie)
        snapshot = dict(movie)

        result = try_remove_director_property(movie)
        assert not result.ok
        assert result.failure.reason == ReasonCode.MISSING_PROPERTY
        assert movie == snapshot
        assert len(diagnostics(caplog)) == 1

    def test_none_passthrough(self):
        assert remove_director_property(None) is None

    def test_copy_variant(self, movie):
        result = remove_director_property(movie, in_place=False)
        assert "director" not in result
        assert movie["director"] == "John Lasseter"

    def test_inherited_director_is_not_removed(self, caplog):
        """A director found only in a parent map is not the record's own."""
        defaults = {"director": "Pete Docter"}
        movie = ChainMap({"title": "Up"}, defaults)

        result = try_remove_director_property(movie)
        assert result.record is movie
        assert result.failure.reason == ReasonCode.MISSING_PROPERTY
        assert defaults == {"director": "Pete Docter"}
        assert len(diagnostics(caplog)) == 1

    def test_own_director_in_chain_map(self):
        defaults = {"director": "Pete Docter"}
        movie = ChainMap({"director": "Bob Peterson"}, defaults)

        remove_director_property(movie)
        assert movie.maps[0] == {}
        assert defaults == {"director": "Pete Docter"}


class TestAddCastMember:
    """Tests for add_cast_member."""

    def test_appends_member(self, movie, caplog):
        result = add_cast_member(movie, "Joan Cusack")
        assert result is movie
        assert movie["cast"] == ["Tom Hanks", "Tim Allen", "Don Rickles", "Joan Cusack"]
        assert diagnostics(caplog) == []

    def test_none_passthrough(self, caplog):
        assert add_cast_member(None, "Joan Cusack") is None
        assert len(diagnostics(caplog)) == 1

    def test_inherited_cast_is_not_extended(self):
        shared_cast = ["Tom Hanks"]
        movie = ChainMap({"title": "Toy Story"}, {"cast": shared_cast})

        result = try_add_cast_member(movie, "Tim Allen")
        assert result.failure.reason == ReasonCode.MISSING_PROPERTY
        assert shared_cast == ["Tom Hanks"]

    def test_non_string_member(self, movie):
        result = try_add_cast_member(movie, 42)
        assert result.failure.reason == ReasonCode.INVALID_TYPE
        assert len(movie["cast"]) == 3

    def test_missing_cast_is_not_created(self, caplog):
        record = {"title": "Up"}
        result = try_add_cast_member(record, "Ed Asner")
        assert result.failure.reason == ReasonCode.MISSING_PROPERTY
        assert "cast" not in record
        assert len(diagnostics(caplog)) == 1

    def test_cast_must_be_a_list(self):
        record = {"cast": "Tom Hanks"}
        assert try_add_cast_member(record, "Tim Allen").failure.reason == ReasonCode.INVALID_TYPE
        assert record["cast"] == "Tom Hanks"

    def test_copy_variant_keeps_original_cast(self, movie):
        result = add_cast_member(movie, "Joan Cusack", in_place=False)
        assert result["cast"][-1] == "Joan Cusack"
        assert len(movie["cast"]) == 3


class TestAllowedGenres:
    """Tests for get_allowed_genres."""

    def test_contents(self):
        assert get_allowed_genres() == ["Animation", "Family", "Action", "Comedy", "Drama", "Sci-Fi"]

    def test_returns_copy(self):
        genres = get_allowed_genres()
        genres.append("Horror")
        genres.clear()
        assert get_allowed_genres() == ["Animation", "Family", "Action", "Comedy", "Drama", "Sci-Fi"]
        assert add_movie_genre({}, "Drama") == {"genre": "Drama"}


class TestCopyVariant:
    """Tests for in_place=False on records that cannot be copied."""

    def test_uncopyable_record_is_rejected(self, caplog):
        lock = threading.Lock()
        movie = {"title": "Up", "lock": lock}

        result = try_set_movie_rating(movie, 8, in_place=False)
        assert not result.ok
        assert result.failure.reason == ReasonCode.NOT_COPYABLE
        assert result.record is movie
        assert "rating" not in movie
        assert len(diagnostics(caplog)) == 1

    def test_uncopyable_record_in_place_still_updates(self):
        movie = {"title": "Up", "lock": threading.Lock()}
        assert set_movie_rating(movie, 8)["rating"] == 8
