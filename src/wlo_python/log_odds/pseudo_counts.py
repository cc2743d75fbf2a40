"""Pseudo-count aggregation.

Adds the prior to each observed count and broadcasts the per-feature,
per-set and corpus-wide sums back onto every row. Window sums (``.over()``)
fuse the group-by-sum and the equi-join on the key into one expression and
keep the input row order.
"""

from __future__ import annotations

import polars as pl

from wlo_python.log_odds._utils import (
    ALPHA_COL,
    COUNT_COL,
    FEATURE_COL,
    N_I_COL,
    SET_COL,
    Y_TOTAL_COL,
    Y_W_COL,
    Y_WI_COL,
)
from wlo_python.log_odds.prior import prior_expr


def annotate_pseudo_counts(view: pl.DataFrame, uninformative: bool = False) -> pl.DataFrame:
    """Annotate each row with alpha, y_wi, y_w, n_i and the grand total Y.

    Args:
        view: Internal (set, feature, n) view of a validated count table
        uninformative: Use alpha = 1 instead of the empirical-Bayes prior

    Returns:
        The view with ALPHA_COL, Y_WI_COL, Y_W_COL, N_I_COL and Y_TOTAL_COL added
    """
    return (
        view.with_columns(prior_expr(FEATURE_COL, COUNT_COL, uninformative).alias(ALPHA_COL))
        .with_columns((pl.col(COUNT_COL) + pl.col(ALPHA_COL)).alias(Y_WI_COL))
        .with_columns(
            pl.col(Y_WI_COL).sum().over(FEATURE_COL).alias(Y_W_COL),
            pl.col(Y_WI_COL).sum().over(SET_COL).alias(N_I_COL),
            pl.col(Y_WI_COL).sum().alias(Y_TOTAL_COL),
        )
    )
