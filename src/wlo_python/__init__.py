"""wlo-python - Weighted log-odds ratios with a Dirichlet prior.

Ranks features (e.g. words) by how characteristic they are of each set
(e.g. document), using the weighted log-odds z-score of Monroe, Colaresi
and Quinn (2008).

Example:
    >>> import polars as pl
    >>> from wlo_python import compute_weighted_log_odds
    >>> counts = pl.DataFrame({"doc": [1, 1, 2, 2], "word": ["a", "b", "a", "c"], "n": [3, 1, 1, 2]})
    >>> compute_weighted_log_odds(counts, "doc", "word", "n").width
    4
"""

__version__ = "0.1.0"

# Errors
from wlo_python.exceptions import (
    ColumnNotFoundError,
    DegenerateInputError,
    DuplicateRowError,
    EmptyInputError,
    InvalidCountError,
    LogOddsError,
)

# Core computation
from wlo_python.log_odds import (
    GroupedFrame,
    bind_log_odds,
    compute_weighted_log_odds,
    count_pairs,
    estimate_prior,
    group_by,
    top_log_odds,
    ungroup,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "LogOddsError",
    "EmptyInputError",
    "ColumnNotFoundError",
    "InvalidCountError",
    "DuplicateRowError",
    "DegenerateInputError",
    # Core computation
    "compute_weighted_log_odds",
    "bind_log_odds",
    "estimate_prior",
    # Grouping
    "GroupedFrame",
    "group_by",
    "ungroup",
    # Helpers
    "count_pairs",
    "top_log_odds",
]
