"""Tests for per-set ranking of log odds."""

from __future__ import annotations

import polars as pl
import pytest

from wlo_python.exceptions import ColumnNotFoundError
from wlo_python.log_odds.bind import compute_weighted_log_odds
from wlo_python.log_odds.ranking import top_log_odds


@pytest.fixture
def scored(word_counts: pl.DataFrame) -> pl.DataFrame:
    return compute_weighted_log_odds(word_counts, "document", "word", "frequency", unweighted=True)


class TestTopLogOdds:
    """Highest-scoring rows per set."""

    def test_top_two(self, scored: pl.DataFrame):
        top = top_log_odds(scored, "document", n=2)

        assert top.get_column("document").to_list() == [1, 1, 2, 2]
        # quick and fox tie; the earlier row wins
        assert top.get_column("word").to_list() == ["jumped", "quick", "dog", "over"]

    def test_n_larger_than_set(self, scored: pl.DataFrame):
        top = top_log_odds(scored, "document", n=100)

        assert top.height == scored.height

    def test_sorted_within_set(self, scored: pl.DataFrame):
        top = top_log_odds(scored, "document", n=5)

        for _, group in top.group_by("document"):
            assert group.get_column("log_odds_weighted").is_sorted(descending=True)

    def test_rank_by_unweighted(self, scored: pl.DataFrame):
        top = top_log_odds(scored, "document", n=1, column="log_odds")

        assert top.get_column("word").to_list() == ["jumped", "dog"]

    def test_missing_score_column(self, word_counts: pl.DataFrame):
        with pytest.raises(ColumnNotFoundError, match="compute the log odds first"):
            top_log_odds(word_counts, "document")

    def test_invalid_n(self, scored: pl.DataFrame):
        with pytest.raises(ValueError, match="at least 1"):
            top_log_odds(scored, "document", n=0)
