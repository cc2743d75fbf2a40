"""Dirichlet prior (pseudo-count alpha) per feature.

Two modes:
- Uninformative: alpha = 1 for every feature (add-one smoothing per
  feature per set).
- Empirical Bayes (default): alpha = total observed count of the feature
  across all sets. A method-of-moments stand-in for the Dirichlet
  concentration; the Dirichlet-multinomial MLE has no closed form.

Frequent features get a strong pull towards the corpus-wide rate; rare
features are only lightly regularized.
"""

from __future__ import annotations

import polars as pl

from wlo_python.log_odds._utils import ColumnKey, resolve_column

UNINFORMATIVE_ALPHA = 1.0


def prior_expr(feature_col: str, count_col: str, uninformative: bool = False) -> pl.Expr:
    """Per-row alpha as a Polars expression.

    Args:
        feature_col: Feature column name
        count_col: Count column name (Float64)
        uninformative: Use alpha = 1 instead of the empirical-Bayes prior

    Returns:
        Expression evaluating to the row's feature alpha
    """
    if uninformative:
        return pl.lit(UNINFORMATIVE_ALPHA, dtype=pl.Float64)
    return pl.col(count_col).sum().over(feature_col)


def estimate_prior(
    df: pl.DataFrame,
    feature_key: ColumnKey,
    count_key: ColumnKey,
    uninformative: bool = False,
) -> pl.DataFrame:
    """Materialize the prior vector, one row per distinct feature.

    Args:
        df: Count table
        feature_key: Feature column name or position
        count_key: Count column name or position
        uninformative: Use alpha = 1 instead of the empirical-Bayes prior

    Returns:
        DataFrame with columns (feature, alpha) in first-appearance order
    """
    feature_col = resolve_column(df, feature_key)
    count_col = resolve_column(df, count_key)

    prior = df.group_by(feature_col, maintain_order=True).agg(
        pl.col(count_col).cast(pl.Float64).sum().alias("alpha")
    )
    if uninformative:
        prior = prior.with_columns(pl.lit(UNINFORMATIVE_ALPHA, dtype=pl.Float64).alias("alpha"))
    return prior
