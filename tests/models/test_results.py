"""
Unit tests for the mutation result models.
"""

from movie_records.core.manipulation import try_set_movie_rating
from movie_records.models import MutationResult, ReasonCode, ValidationFailure


class TestMutationResult:
    """Tests for MutationResult and ValidationFailure."""

    def test_ok_result_keeps_record_identity(self):
        movie = {"title": "Up", "cast": ["Ed Asner"]}
        result = MutationResult(record=movie)
        assert result.ok
        assert result.record is movie
        assert result.record["cast"] is movie["cast"]

    def test_failure_result(self):
        failure = ValidationFailure(
            reason=ReasonCode.OUT_OF_RANGE, field="rating", message="too high"
        )
        result = MutationResult(record=None, failure=failure)
        assert not result.ok
        assert result.failure.reason == "out_of_range"

    def test_failure_from_mutation(self):
        movie = {"rating": 3}
        result = try_set_movie_rating(movie, 12)
        assert result.record is movie
        assert result.failure.field == "rating"
        assert result.model_dump()["failure"]["reason"] == ReasonCode.OUT_OF_RANGE
