"""Closed-form weighted log-odds (Monroe, Colaresi & Quinn 2008).

For every row, with Y the total pseudo-count mass of the table:

    omega_wi  = y_wi / (n_i - y_wi)      odds of the feature within its set
    omega_w   = y_w  / (Y - y_w)         odds of the feature in the whole corpus
    delta_wi  = ln(omega_wi) - ln(omega_w)
    sigma2_wi = 1/y_wi + 1/y_w           asymptotic variance of delta_wi
    zeta_wi   = delta_wi / sqrt(sigma2_wi)

zeta_wi is the z-score reported as ``log_odds_weighted``; delta_wi is the
unweighted ``log_odds``. Each set is compared against the corpus-wide
baseline, then standardized so that features seen only a handful of times do
not dominate a ranking through noise alone.

Reference: https://doi.org/10.1093/pan/mpn018
"""

from __future__ import annotations

import polars as pl

from wlo_python.log_odds._utils import (
    DELTA_COL,
    N_I_COL,
    OMEGA_W_COL,
    OMEGA_WI_COL,
    SIGMA2_COL,
    Y_TOTAL_COL,
    Y_W_COL,
    Y_WI_COL,
    ZETA_COL,
)


def estimate_log_odds(annotated: pl.DataFrame) -> pl.DataFrame:
    """Compute odds, log-odds ratio, variance and z-score per row.

    Args:
        annotated: Output of ``annotate_pseudo_counts``

    Returns:
        The annotated frame with OMEGA_WI_COL, OMEGA_W_COL, DELTA_COL,
        SIGMA2_COL and ZETA_COL added
    """
    y_wi = pl.col(Y_WI_COL)
    y_w = pl.col(Y_W_COL)

    return (
        annotated.with_columns(
            (y_wi / (pl.col(N_I_COL) - y_wi)).alias(OMEGA_WI_COL),
            (y_w / (pl.col(Y_TOTAL_COL) - y_w)).alias(OMEGA_W_COL),
            (1.0 / y_wi + 1.0 / y_w).alias(SIGMA2_COL),
        )
        .with_columns((pl.col(OMEGA_WI_COL).log() - pl.col(OMEGA_W_COL).log()).alias(DELTA_COL))
        .with_columns((pl.col(DELTA_COL) / pl.col(SIGMA2_COL).sqrt()).alias(ZETA_COL))
    )
