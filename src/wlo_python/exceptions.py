"""Error taxonomy for weighted log-odds computation.

Every error is raised eagerly by input validation, before any aggregation
runs. All of them subclass ValueError so callers that already guard bad
input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class LogOddsError(ValueError):
    """Base class for invalid log-odds input."""


class EmptyInputError(LogOddsError):
    """The count table has zero rows."""


class ColumnNotFoundError(LogOddsError):
    """A column key does not resolve to a column of the table."""


class InvalidCountError(LogOddsError):
    """The count column is non-numeric or holds null/NaN/inf/negative values."""


class DuplicateRowError(LogOddsError):
    """More than one row shares a (set, feature) pair."""


class DegenerateInputError(LogOddsError):
    """The closed-form odds are undefined for this table.

    Raised when the table has fewer than two distinct features, when a set
    holds a single feature, or (empirical-Bayes prior only) when a feature's
    total count is zero.
    """
