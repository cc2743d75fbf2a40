"""Build count tables from raw observations."""

from __future__ import annotations

import polars as pl

from wlo_python.log_odds._utils import ColumnKey, resolve_column


def count_pairs(
    df: pl.DataFrame,
    set_key: ColumnKey,
    feature_key: ColumnKey,
    wt: ColumnKey | None = None,
    name: str = "n",
    sort: bool = False,
) -> pl.DataFrame:
    """Count observations per (set, feature) pair.

    The result has exactly one row per pair, which is the shape
    ``compute_weighted_log_odds`` expects.

    Args:
        df: One row per observation (e.g. one token per row)
        set_key: Set column name or position
        feature_key: Feature column name or position
        wt: Optional weight column; counts become sums of the weights
        name: Name of the count column
        sort: Order by count, largest first (pairs otherwise keep
            first-appearance order)

    Returns:
        DataFrame with columns (set, feature, name)
    """
    set_col = resolve_column(df, set_key)
    feature_col = resolve_column(df, feature_key)

    if wt is None:
        count = pl.len().cast(pl.Int64)
    else:
        count = pl.col(resolve_column(df, wt)).sum()

    counts = df.group_by([set_col, feature_col], maintain_order=True).agg(count.alias(name))

    if sort:
        counts = counts.sort(name, descending=True, maintain_order=True)
    return counts
