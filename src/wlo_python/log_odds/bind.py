"""Bind the weighted log-odds to a count table.

Pipeline (no state across calls):
    bind columns -> validate -> prior -> pseudo-counts -> odds/variance -> assemble
"""

from __future__ import annotations

import polars as pl
from loguru import logger

from wlo_python.log_odds._utils import ColumnKey, bind_columns, internal_view
from wlo_python.log_odds.assemble import assemble_result
from wlo_python.log_odds.estimate import estimate_log_odds
from wlo_python.log_odds.grouping import GroupedFrame, ungroup
from wlo_python.log_odds.pseudo_counts import annotate_pseudo_counts
from wlo_python.log_odds.schemas import check_count_table


def compute_weighted_log_odds(
    table: pl.DataFrame | GroupedFrame,
    set_key: ColumnKey,
    feature_key: ColumnKey,
    count_key: ColumnKey,
    uninformative: bool = False,
    unweighted: bool = False,
) -> pl.DataFrame | GroupedFrame:
    """Compute the weighted log-odds ratio of each feature in each set.

    The weighted log-odds is the log-odds ratio of a feature in one set versus
    the whole corpus, smoothed by a Dirichlet prior and divided by its
    standard error. It is a z-score: useful for ranking and for comparing
    features with very different counts, but after the weighting it is no
    longer a plain odds ratio.

    Args:
        table: Count table with one row per set-feature pair; a GroupedFrame's
            grouping is preserved but ignored
        set_key: Column of sets to compare (e.g. documents), name or position
        feature_key: Column of features (e.g. words), name or position
        count_key: Column of set-feature counts, name or position
        uninformative: Use the uninformative prior (alpha = 1) instead of the
            empirical-Bayes prior estimated from the data
        unweighted: Also return the unweighted ``log_odds`` column

    Returns:
        Table of the same kind as ``table``, same rows and order, with
        ``log_odds`` (if requested) and ``log_odds_weighted`` appended

    Raises:
        EmptyInputError: Table has zero rows
        ColumnNotFoundError: A key does not resolve
        InvalidCountError: Count column non-numeric or out of domain
        DuplicateRowError: A set-feature pair repeats
        DegenerateInputError: Odds are undefined for this table

    Example:
        >>> counts = pl.DataFrame({
        ...     "doc": [1, 1, 2, 2],
        ...     "word": ["a", "b", "a", "c"],
        ...     "n": [3, 1, 1, 2],
        ... })
        >>> compute_weighted_log_odds(counts, "doc", "word", "n").columns
        ['doc', 'word', 'n', 'log_odds_weighted']
    """
    df, groups = ungroup(table)
    columns = bind_columns(df, set_key, feature_key, count_key)
    check_count_table(df, columns, uninformative=uninformative)

    estimates = estimate_log_odds(
        annotate_pseudo_counts(internal_view(df, columns), uninformative=uninformative)
    )

    logger.bind(context={
        "set_col": columns.set_col,
        "feature_col": columns.feature_col,
        "count_col": columns.count_col,
        "n_rows": df.height,
        "prior": "uninformative" if uninformative else "empirical_bayes",
        "groups": list(groups),
    }).debug("Weighted log odds computed")

    result = assemble_result(df, estimates, unweighted=unweighted)

    if isinstance(table, GroupedFrame):
        return table.with_frame(result)
    return result


# Name used by the tidy-text tooling this statistic is usually paired with
bind_log_odds = compute_weighted_log_odds
