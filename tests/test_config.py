"""Tests for log-odds configuration loading and validation."""

from pathlib import Path

import pytest

from wlo_python.config import (
    LogOddsConfig,
    load_log_odds_config,
    validate_log_odds_config,
)
from wlo_python.paths import get_config_dir


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "log_odds.toml"
    path.write_text(
        """
[columns]
set = "document"
feature = "word"
count = "frequency"

[prior]
uninformative = true

[output]
top_n = 3
unknown_key = "ignored"

[logging]
console_level = "ERROR"
"""
    )
    return path


class TestLoadConfig:
    """Tests for TOML loading."""

    def test_load_values(self, config_file: Path):
        config = load_log_odds_config(config_file)

        assert config.columns.set == "document"
        assert config.columns.feature == "word"
        assert config.columns.count == "frequency"
        assert config.prior.uninformative is True
        assert config.output.top_n == 3
        assert config.logging.console_level == "ERROR"

    def test_missing_keys_use_defaults(self, config_file: Path):
        config = load_log_odds_config(config_file)

        assert config.output.unweighted is False
        assert config.output.write_prior is True
        assert config.logging.level == "DEBUG"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_log_odds_config(tmp_path / "absent.toml")

    def test_repository_default(self):
        config = load_log_odds_config(get_config_dir() / "log_odds.toml")

        assert config.prior.uninformative is False
        assert validate_log_odds_config(config) == (True, [])

    def test_to_dict(self):
        config = LogOddsConfig()

        assert config.to_dict()["columns"] == {"set": "set", "feature": "feature", "count": "n"}


class TestValidateConfig:
    """Tests for configuration validation."""

    def test_defaults_valid(self):
        is_valid, errors = validate_log_odds_config(LogOddsConfig())

        assert is_valid
        assert errors == []

    def test_same_set_and_feature(self):
        config = LogOddsConfig()
        config.columns.feature = config.columns.set

        is_valid, errors = validate_log_odds_config(config)

        assert not is_valid
        assert any("must differ" in e for e in errors)

    def test_bad_top_n_and_level(self):
        config = LogOddsConfig()
        config.output.top_n = 0
        config.logging.level = "LOUD"

        is_valid, errors = validate_log_odds_config(config)

        assert not is_valid
        assert len(errors) == 2

    def test_empty_column_name(self):
        config = LogOddsConfig()
        config.columns.count = ""

        is_valid, errors = validate_log_odds_config(config)

        assert not is_valid
        assert "columns.count must be a non-empty column name" in errors
