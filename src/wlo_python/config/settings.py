"""Log-odds run configuration loader and validator.

Loads config/log_odds.toml and provides typed access to configuration.
"""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from wlo_python.paths import get_config_dir

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ColumnsConfig:
    """Columns of the input count table."""

    set: str = "set"
    feature: str = "feature"
    count: str = "n"


@dataclass
class PriorConfig:
    """Dirichlet prior selection."""

    uninformative: bool = False


@dataclass
class OutputConfig:
    """Output columns and artifacts."""

    unweighted: bool = False
    top_n: int = 10
    output_dir: str = "artifacts/log_odds"
    write_prior: bool = True


@dataclass
class LoggingConfig:
    """NDJSON logging configuration."""

    log_dir: str | None = None
    level: str = "DEBUG"
    console_level: str | None = "WARNING"
    env: str = "development"


@dataclass
class LogOddsConfig:
    """Complete log-odds run configuration."""

    columns: ColumnsConfig = field(default_factory=ColumnsConfig)
    prior: PriorConfig = field(default_factory=PriorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (for hashing and logging)."""
        return asdict(self)


def _section(raw: dict, name: str, cls: type):
    values = raw.get(name, {})
    known = {k: v for k, v in values.items() if k in cls.__dataclass_fields__}
    return cls(**known)


def load_log_odds_config(config_path: Path | str | None = None) -> LogOddsConfig:
    """Load log-odds configuration from a TOML file.

    Unknown keys are ignored; missing keys take their dataclass defaults.

    Args:
        config_path: Path to config file. Defaults to config/log_odds.toml
                     in the repository.

    Returns:
        LogOddsConfig with all settings loaded.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = get_config_dir() / "log_odds.toml" if config_path is None else Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        raw = tomllib.load(f)

    return LogOddsConfig(
        columns=_section(raw, "columns", ColumnsConfig),
        prior=_section(raw, "prior", PriorConfig),
        output=_section(raw, "output", OutputConfig),
        logging=_section(raw, "logging", LoggingConfig),
    )


def validate_log_odds_config(config: LogOddsConfig) -> tuple[bool, list[str]]:
    """Validate log-odds configuration.

    Args:
        config: LogOddsConfig to validate.

    Returns:
        Tuple of (is_valid, list of error messages).
    """
    errors = []

    cols = config.columns
    for name in ("set", "feature", "count"):
        if not getattr(cols, name):
            errors.append(f"columns.{name} must be a non-empty column name")
    if cols.set and cols.set == cols.feature:
        errors.append(f"columns.set and columns.feature must differ (both '{cols.set}')")

    if config.output.top_n < 1:
        errors.append(f"output.top_n must be >= 1, got {config.output.top_n}")
    if not config.output.output_dir:
        errors.append("output.output_dir must not be empty")

    if config.logging.level.upper() not in LOG_LEVELS:
        errors.append(f"Unknown logging.level: {config.logging.level}")
    console = config.logging.console_level
    if console and console.upper() not in LOG_LEVELS:
        errors.append(f"Unknown logging.console_level: {console}")

    return len(errors) == 0, errors
