"""Pytest fixtures for log-odds tests."""

from __future__ import annotations

import polars as pl
import pytest


@pytest.fixture
def sparse_counts() -> pl.DataFrame:
    """Three sets over a vocabulary with a long tail of rare features."""
    return pl.DataFrame({
        "set": ["a"] * 5 + ["b"] * 4 + ["c"] * 3,
        "feature": [
            "common", "mid", "rare_a", "tail_1", "tail_2",
            "common", "mid", "rare_b", "tail_1",
            "common", "mid", "rare_c",
        ],
        "n": [40, 10, 1, 2, 1, 35, 12, 1, 1, 50, 8, 1],
    })


@pytest.fixture
def tokens() -> pl.DataFrame:
    """One row per token occurrence, matching the word_counts fixture."""
    docs = [1] * 6 + [2] * 6
    words = [
        "the", "quick", "brown", "fox", "jumped", "jumped",
        "over", "the", "lazy", "brown", "dog", "dog",
    ]
    return pl.DataFrame({"document": docs, "word": words})
