"""Telemetry module for log-odds reproducibility.

This module provides:
- ProvenanceContext: Track data lineage through a run
- fingerprint_frame / fingerprint_file: Reproducibility fingerprints
- Event types for structured telemetry logging
"""

from wlo_python.telemetry.provenance import (
    ProvenanceContext,
    fingerprint_file,
    fingerprint_frame,
)

from wlo_python.telemetry.events import (
    AlgorithmInitEvent,
    DataLoadEvent,
    LogOddsSummaryEvent,
    log_algorithm_init,
    log_data_load,
    log_log_odds_summary,
)

__all__ = [
    # Provenance
    "ProvenanceContext",
    "fingerprint_frame",
    "fingerprint_file",
    # Events
    "DataLoadEvent",
    "AlgorithmInitEvent",
    "LogOddsSummaryEvent",
    "log_data_load",
    "log_algorithm_init",
    "log_log_odds_summary",
]
