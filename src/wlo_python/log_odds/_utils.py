"""Column binding and internal column names for the log-odds pipeline.

Callers refer to columns by name or by position. Keys are resolved to names
once, up front; everything downstream works on resolved names only.
"""

from __future__ import annotations

from typing import NamedTuple

import polars as pl

from wlo_python.exceptions import ColumnNotFoundError

# Private column names used on the internal three-column view
SET_COL = "__wlo_set"
FEATURE_COL = "__wlo_feature"
COUNT_COL = "__wlo_n"

ALPHA_COL = "__wlo_alpha"
Y_WI_COL = "__wlo_y_wi"
Y_W_COL = "__wlo_y_w"
N_I_COL = "__wlo_n_i"
Y_TOTAL_COL = "__wlo_y_total"

OMEGA_WI_COL = "__wlo_omega_wi"
OMEGA_W_COL = "__wlo_omega_w"
DELTA_COL = "__wlo_delta"
SIGMA2_COL = "__wlo_sigma2"
ZETA_COL = "__wlo_zeta"

# Canonical output names
LOG_ODDS = "log_odds"
LOG_ODDS_WEIGHTED = "log_odds_weighted"

ColumnKey = str | int


class BoundColumns(NamedTuple):
    """Resolved column names for one computation."""

    set_col: str
    feature_col: str
    count_col: str


def resolve_column(df: pl.DataFrame, key: ColumnKey) -> str:
    """Resolve a column key to a column name.

    Args:
        df: Table the key refers to
        key: Column name, or integer position (negative counts from the end)

    Returns:
        Column name

    Raises:
        ColumnNotFoundError: If the name is absent or the position is out of range
    """
    columns = df.columns
    if isinstance(key, bool):
        msg = f"Column key must be a name or position, got {key!r}"
        raise ColumnNotFoundError(msg)
    if isinstance(key, int):
        if -len(columns) <= key < len(columns):
            return columns[key]
        msg = f"Column position {key} out of range for table with {len(columns)} columns"
        raise ColumnNotFoundError(msg)
    if key not in columns:
        msg = f"Column '{key}' not found in table (columns: {columns})"
        raise ColumnNotFoundError(msg)
    return key


def bind_columns(
    df: pl.DataFrame,
    set_key: ColumnKey,
    feature_key: ColumnKey,
    count_key: ColumnKey,
) -> BoundColumns:
    """Resolve the set, feature and count keys against a table.

    Raises:
        ColumnNotFoundError: If a key does not resolve, or set and feature
            bind the same column
    """
    bound = BoundColumns(
        set_col=resolve_column(df, set_key),
        feature_col=resolve_column(df, feature_key),
        count_col=resolve_column(df, count_key),
    )
    if bound.set_col == bound.feature_col:
        msg = f"Set and feature keys both bind column '{bound.set_col}'"
        raise ColumnNotFoundError(msg)
    return bound


def internal_view(df: pl.DataFrame, columns: BoundColumns) -> pl.DataFrame:
    """Project the table onto the private (set, feature, n) schema.

    The count column is cast to Float64 so every later step is floating point.
    """
    return df.select(
        pl.col(columns.set_col).alias(SET_COL),
        pl.col(columns.feature_col).alias(FEATURE_COL),
        pl.col(columns.count_col).cast(pl.Float64).alias(COUNT_COL),
    )
