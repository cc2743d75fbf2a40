"""Telemetry events for log-odds runs.

- data.load: input table fingerprint
- algorithm.init: reproducibility anchor with prior mode and bound columns
- log_odds.summary: shape of the result for audit

Events are logged through loguru and end up as NDJSON once a sink is set up.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import polars as pl
from loguru import logger

from wlo_python.log_odds._utils import LOG_ODDS_WEIGHTED
from wlo_python.ndjson_logger import get_trace_id


@dataclass
class DataLoadEvent:
    """Event logged when a count table is loaded."""

    source: str
    sha256_hash: str
    row_count: int
    column_count: int
    columns: list[str]
    event_type: str = "data.load"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "event_type": self.event_type,
            "source": self.source,
            "sha256_hash": self.sha256_hash,
            "row_count": self.row_count,
            "column_count": self.column_count,
            "columns": self.columns,
        }


@dataclass
class AlgorithmInitEvent:
    """Event logged before the statistic is computed."""

    algorithm_name: str
    version: str
    config: dict[str, Any]
    input_hash: str
    event_type: str = "algorithm.init"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "event_type": self.event_type,
            "algorithm_name": self.algorithm_name,
            "version": self.version,
            "config": self.config,
            "input_hash": self.input_hash,
        }


@dataclass
class LogOddsSummaryEvent:
    """Event logged after the statistic is computed."""

    n_rows: int
    n_sets: int
    n_features: int
    prior: str
    min_weighted: float
    max_weighted: float
    n_positive: int
    event_type: str = "log_odds.summary"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "event_type": self.event_type,
            "n_rows": self.n_rows,
            "n_sets": self.n_sets,
            "n_features": self.n_features,
            "prior": self.prior,
            "min_weighted": round(self.min_weighted, 10),
            "max_weighted": round(self.max_weighted, 10),
            "n_positive": self.n_positive,
        }


def _emit_event(event_dict: dict[str, Any], level: str = "INFO") -> None:
    """Emit event to loguru with the event dict as bound context."""
    log_entry = {
        "ts": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
        "trace_id": get_trace_id(),
        **event_dict,
    }
    logger.bind(context=log_entry).log(level, f"[{event_dict.get('event_type', 'event')}]")


def log_data_load(
    source: str,
    sha256_hash: str,
    row_count: int,
    column_count: int,
    columns: list[str],
) -> DataLoadEvent:
    """Log data load event and return the event object."""
    event = DataLoadEvent(
        source=source,
        sha256_hash=sha256_hash,
        row_count=row_count,
        column_count=column_count,
        columns=columns,
    )
    _emit_event(event.to_dict())
    return event


def log_algorithm_init(
    algorithm_name: str,
    version: str,
    config: dict[str, Any],
    input_hash: str,
) -> AlgorithmInitEvent:
    """Log algorithm initialization event.

    Args:
        algorithm_name: Name of algorithm (e.g., "weighted_log_odds")
        version: Package version
        config: Configuration dictionary
        input_hash: Hash of the input table

    Returns:
        AlgorithmInitEvent instance
    """
    event = AlgorithmInitEvent(
        algorithm_name=algorithm_name,
        version=version,
        config=config,
        input_hash=input_hash,
    )
    _emit_event(event.to_dict(), level="DEBUG")
    return event


def log_log_odds_summary(
    result: pl.DataFrame,
    set_col: str,
    feature_col: str,
    uninformative: bool,
) -> LogOddsSummaryEvent:
    """Summarize a computed result and log it.

    Args:
        result: Output of ``compute_weighted_log_odds``
        set_col: Set column name
        feature_col: Feature column name
        uninformative: Prior mode used

    Returns:
        LogOddsSummaryEvent instance
    """
    weighted = result.get_column(LOG_ODDS_WEIGHTED)
    event = LogOddsSummaryEvent(
        n_rows=result.height,
        n_sets=result.get_column(set_col).n_unique(),
        n_features=result.get_column(feature_col).n_unique(),
        prior="uninformative" if uninformative else "empirical_bayes",
        min_weighted=float(weighted.min()),
        max_weighted=float(weighted.max()),
        n_positive=int((weighted > 0).sum()),
    )
    _emit_event(event.to_dict())
    return event
