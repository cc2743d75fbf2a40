"""Top-scoring features per set."""

from __future__ import annotations

import polars as pl

from wlo_python.exceptions import ColumnNotFoundError
from wlo_python.log_odds._utils import LOG_ODDS_WEIGHTED, ColumnKey, resolve_column


def top_log_odds(
    df: pl.DataFrame,
    set_key: ColumnKey,
    n: int = 10,
    column: str = LOG_ODDS_WEIGHTED,
) -> pl.DataFrame:
    """Keep the ``n`` highest-scoring rows of each set.

    Ties keep the earlier row. The result is sorted by set, then by score
    descending.

    Args:
        df: Output of ``compute_weighted_log_odds``
        set_key: Set column name or position
        n: Rows to keep per set
        column: Score column to rank by

    Returns:
        Filtered and sorted DataFrame

    Raises:
        ColumnNotFoundError: If ``column`` is absent
        ValueError: If ``n`` < 1
    """
    if n < 1:
        msg = f"n must be at least 1, got {n}"
        raise ValueError(msg)
    if column not in df.columns:
        msg = f"Score column '{column}' not found; compute the log odds first"
        raise ColumnNotFoundError(msg)

    set_col = resolve_column(df, set_key)
    position = pl.int_range(pl.len()).over(set_col)

    return (
        df.sort([set_col, column], descending=[False, True], maintain_order=True)
        .filter(position < n)
    )
