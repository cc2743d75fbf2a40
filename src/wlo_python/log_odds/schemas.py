"""Input contract for count tables.

A count table has exactly one row per (set, feature) pair and a numeric,
non-negative count column. Uses pandera[polars] for the count column checks
(Polars-native, no pandas).
"""

from __future__ import annotations

import pandera.polars as pa
import polars as pl
from pandera.errors import SchemaError

from wlo_python.exceptions import (
    DegenerateInputError,
    DuplicateRowError,
    EmptyInputError,
    InvalidCountError,
)
from wlo_python.log_odds._utils import BoundColumns

# Number of offending pairs quoted in a DuplicateRowError message
MAX_REPORTED_DUPLICATES = 5


def count_column_schema(count_col: str) -> pa.DataFrameSchema:
    """Build the pandera schema for a bound count column."""
    return pa.DataFrameSchema(
        {
            count_col: pa.Column(
                checks=pa.Check.ge(0),
                nullable=False,
            ),
        },
        strict=False,
    )


def _check_counts(df: pl.DataFrame, count_col: str) -> None:
    dtype = df.schema[count_col]
    if not dtype.is_numeric():
        msg = f"Count column '{count_col}' must be numeric, got {dtype}"
        raise InvalidCountError(msg)

    counts = df.get_column(count_col)
    if dtype.is_float():
        # Polars orders NaN above every number, so ge(0) alone would pass it
        n_bad = counts.is_nan().sum() + counts.is_infinite().sum()
        if n_bad:
            msg = f"Count column '{count_col}' contains {n_bad} NaN or infinite values"
            raise InvalidCountError(msg)

    try:
        count_column_schema(count_col).validate(df.select(count_col))
    except SchemaError as e:
        msg = f"Count column '{count_col}' must be non-null and non-negative: {e}"
        raise InvalidCountError(msg) from e


def find_duplicate_pairs(df: pl.DataFrame, set_col: str, feature_col: str) -> pl.DataFrame:
    """Return the (set, feature) pairs that occur more than once, with their row counts."""
    return (
        df.group_by([set_col, feature_col], maintain_order=True)
        .agg(pl.len().alias("n_rows"))
        .filter(pl.col("n_rows") > 1)
    )


def _check_unique_pairs(df: pl.DataFrame, set_col: str, feature_col: str) -> None:
    duplicates = find_duplicate_pairs(df, set_col, feature_col)
    if duplicates.height == 0:
        return

    shown = [
        f"({set_col}={row[set_col]!r}, {feature_col}={row[feature_col]!r}) x{row['n_rows']}"
        for row in duplicates.head(MAX_REPORTED_DUPLICATES).iter_rows(named=True)
    ]
    msg = (
        f"Expected one row per set-feature pair, found {duplicates.height} duplicated "
        f"pair(s): {', '.join(shown)}"
    )
    raise DuplicateRowError(msg)


def _check_not_degenerate(
    df: pl.DataFrame,
    set_col: str,
    feature_col: str,
    count_col: str,
    uninformative: bool,
) -> None:
    n_features = df.get_column(feature_col).n_unique()
    if n_features < 2:
        msg = f"Need at least two distinct features in '{feature_col}', found {n_features}"
        raise DegenerateInputError(msg)

    singletons = (
        df.group_by(set_col, maintain_order=True)
        .agg(pl.len().alias("n_rows"))
        .filter(pl.col("n_rows") < 2)
    )
    if singletons.height > 0:
        sets = singletons.get_column(set_col).head(MAX_REPORTED_DUPLICATES).to_list()
        msg = f"Every set needs at least two features; single-feature set(s) in '{set_col}': {sets}"
        raise DegenerateInputError(msg)

    if not uninformative:
        zero_total = (
            df.group_by(feature_col, maintain_order=True)
            .agg(pl.col(count_col).sum().alias("total"))
            .filter(pl.col("total") == 0)
        )
        if zero_total.height > 0:
            features = zero_total.get_column(feature_col).head(MAX_REPORTED_DUPLICATES).to_list()
            msg = (
                f"Feature(s) with zero total count cannot anchor an empirical-Bayes prior: "
                f"{features} (use uninformative=True or drop them)"
            )
            raise DegenerateInputError(msg)


def check_count_table(
    df: pl.DataFrame,
    columns: BoundColumns,
    uninformative: bool = False,
) -> None:
    """Validate a count table before any aggregation.

    Checks run in order: non-empty, numeric count column, non-null and
    non-negative counts, unique (set, feature) pairs, non-degenerate shape.

    Args:
        df: Count table (ungrouped)
        columns: Resolved set/feature/count column names
        uninformative: Prior mode; zero-total features are only degenerate
            under the empirical-Bayes prior

    Raises:
        EmptyInputError: Table has zero rows
        InvalidCountError: Count column non-numeric or out of domain
        DuplicateRowError: A (set, feature) pair repeats
        DegenerateInputError: Odds are undefined for this table
    """
    if df.height == 0:
        msg = "Count table has zero rows; nothing to compare"
        raise EmptyInputError(msg)

    _check_counts(df, columns.count_col)
    _check_unique_pairs(df, columns.set_col, columns.feature_col)
    _check_not_degenerate(
        df,
        columns.set_col,
        columns.feature_col,
        columns.count_col,
        uninformative,
    )
