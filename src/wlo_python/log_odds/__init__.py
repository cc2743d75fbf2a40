"""Weighted log-odds ratio for features across sets.

Pipeline (one call in, one table out, no state across calls):
    1. Input contract (schemas): one row per set-feature pair, valid counts
    2. Prior (prior): alpha per feature, empirical Bayes or uninformative
    3. Pseudo-counts (pseudo_counts): y_wi, y_w, n_i, Y
    4. Odds & variance (estimate): log-odds ratio and its z-score
    5. Assembly (assemble): output columns on the original rows

Library Stack:
    - Polars: All data manipulation (NO pandas)
    - pandera[polars]: Count column validation
    - loguru: Structured logging
"""

from wlo_python.log_odds._utils import (
    LOG_ODDS,
    LOG_ODDS_WEIGHTED,
    BoundColumns,
    bind_columns,
    resolve_column,
)
from wlo_python.log_odds.assemble import assemble_result
from wlo_python.log_odds.bind import bind_log_odds, compute_weighted_log_odds
from wlo_python.log_odds.counting import count_pairs
from wlo_python.log_odds.estimate import estimate_log_odds
from wlo_python.log_odds.grouping import GroupedFrame, group_by, ungroup
from wlo_python.log_odds.prior import estimate_prior, prior_expr
from wlo_python.log_odds.pseudo_counts import annotate_pseudo_counts
from wlo_python.log_odds.ranking import top_log_odds
from wlo_python.log_odds.schemas import check_count_table, find_duplicate_pairs

__all__ = [
    # Output column names
    "LOG_ODDS",
    "LOG_ODDS_WEIGHTED",
    # Column binding
    "BoundColumns",
    "bind_columns",
    "resolve_column",
    # Pipeline stages
    "check_count_table",
    "find_duplicate_pairs",
    "prior_expr",
    "estimate_prior",
    "annotate_pseudo_counts",
    "estimate_log_odds",
    "assemble_result",
    # Entry point
    "compute_weighted_log_odds",
    "bind_log_odds",
    # Grouping
    "GroupedFrame",
    "group_by",
    "ungroup",
    # Helpers
    "count_pairs",
    "top_log_odds",
]
