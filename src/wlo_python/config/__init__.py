"""Configuration for log-odds runs.

Loads and validates config/log_odds.toml.
"""

from wlo_python.config.settings import (
    ColumnsConfig,
    LoggingConfig,
    LogOddsConfig,
    OutputConfig,
    PriorConfig,
    load_log_odds_config,
    validate_log_odds_config,
)

__all__ = [
    "ColumnsConfig",
    "LoggingConfig",
    "LogOddsConfig",
    "OutputConfig",
    "PriorConfig",
    "load_log_odds_config",
    "validate_log_odds_config",
]
