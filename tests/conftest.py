"""Shared test fixtures for wlo-python tests."""

import sys

import polars as pl
import pytest
from loguru import logger


@pytest.fixture
def word_counts() -> pl.DataFrame:
    """Two documents, ten document-word counts.

    Words unique to one document: quick, fox, jumped (doc 1) and
    over, lazy, dog (doc 2). Shared with equal counts: the, brown.
    """
    return pl.DataFrame({
        "document": [1, 1, 1, 1, 1, 2, 2, 2, 2, 2],
        "word": [
            "the", "quick", "brown", "fox", "jumped",
            "over", "the", "lazy", "brown", "dog",
        ],
        "frequency": [1, 1, 1, 1, 2, 1, 1, 1, 1, 2],
    })


@pytest.fixture
def numeric_id_counts() -> pl.DataFrame:
    """Sets identified by numbers, one shared feature ("text")."""
    return pl.DataFrame({
        "id": [2, 2, 2, 3, 3, 3],
        "word": ["an", "interesting", "text", "a", "boring", "text"],
        "n": [1, 1, 3, 1, 2, 1],
    })


@pytest.fixture
def restore_logger():
    """Reset loguru to its default stderr sink after a test adds sinks."""
    yield logger
    logger.remove()
    logger.add(sys.stderr)
