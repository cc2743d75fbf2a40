"""Attach computed statistics back onto the caller's rows."""

from __future__ import annotations

import polars as pl

from wlo_python.log_odds._utils import DELTA_COL, LOG_ODDS, LOG_ODDS_WEIGHTED, ZETA_COL


def assemble_result(
    original: pl.DataFrame,
    estimates: pl.DataFrame,
    unweighted: bool = False,
) -> pl.DataFrame:
    """Add ``log_odds`` (optional) and ``log_odds_weighted`` to the original rows.

    ``estimates`` is row-aligned with ``original``; every original column is
    kept verbatim and columns already named like the outputs are overwritten.

    Args:
        original: Caller's ungrouped table
        estimates: Output of ``estimate_log_odds`` for the same rows
        unweighted: Also emit the unweighted log-odds ratio

    Returns:
        Original table plus the output columns
    """
    outputs = []
    if unweighted:
        outputs.append(estimates.get_column(DELTA_COL).alias(LOG_ODDS))
    outputs.append(estimates.get_column(ZETA_COL).alias(LOG_ODDS_WEIGHTED))

    # Drop first so overwritten outputs land at the end, in a fixed order
    existing = [s.name for s in outputs if s.name in original.columns]
    return original.drop(existing).with_columns(outputs)
