"""Tests for the log-odds runner and CLI."""

from __future__ import annotations

import json
from pathlib import Path

import polars as pl
import pytest
from polars.testing import assert_frame_equal

from wlo_python.config import ColumnsConfig, LogOddsConfig, OutputConfig
from wlo_python.log_odds.bind import compute_weighted_log_odds
from wlo_python.log_odds.runner import build_parser, apply_overrides, main, read_count_table, run_log_odds


@pytest.fixture
def word_config() -> LogOddsConfig:
    return LogOddsConfig(
        columns=ColumnsConfig(set="document", feature="word", count="frequency"),
        output=OutputConfig(top_n=2),
    )


@pytest.fixture
def counts_csv(tmp_path: Path, word_counts: pl.DataFrame) -> Path:
    path = tmp_path / "counts.csv"
    word_counts.write_csv(path)
    return path


class TestReadCountTable:
    """Input formats."""

    def test_csv(self, counts_csv: Path, word_counts: pl.DataFrame):
        assert_frame_equal(read_count_table(counts_csv), word_counts)

    def test_parquet(self, tmp_path: Path, word_counts: pl.DataFrame):
        path = tmp_path / "counts.parquet"
        word_counts.write_parquet(path)

        assert_frame_equal(read_count_table(path), word_counts)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_count_table(tmp_path / "absent.csv")

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "counts.xlsx"
        path.write_bytes(b"")

        with pytest.raises(ValueError, match="Unsupported input format"):
            read_count_table(path)


class TestRunLogOdds:
    """Orchestration without the CLI."""

    def test_in_memory(self, word_counts: pl.DataFrame, word_config: LogOddsConfig):
        results = run_log_odds(word_counts, config=word_config)
        expected = compute_weighted_log_odds(word_counts, "document", "word", "frequency")

        assert_frame_equal(results["result"], expected)
        assert results["prior"].height == 8
        assert results["top"].height == 4
        assert results["summary"]["n_positive"] == 6
        assert results["source"] == "<dataframe>"
        assert "count_table" in results["provenance"]["input_hashes"]

    def test_writes_artifacts(self, counts_csv: Path, word_config: LogOddsConfig, tmp_path: Path):
        out = tmp_path / "out"
        run_log_odds(counts_csv, config=word_config, output_dir=out)

        assert (out / "log_odds.parquet").exists()
        assert (out / "top_log_odds.parquet").exists()
        assert (out / "prior.parquet").exists()

        summary = json.loads((out / "summary.json").read_text())
        assert summary["source"] == str(counts_csv)
        assert summary["summary"]["n_rows"] == 10
        assert "result" not in summary

    def test_skip_prior_artifact(self, word_counts: pl.DataFrame, word_config: LogOddsConfig, tmp_path: Path):
        word_config.output.write_prior = False
        run_log_odds(word_counts, config=word_config, output_dir=tmp_path)

        assert not (tmp_path / "prior.parquet").exists()

    def test_invalid_input_raises(self, word_counts: pl.DataFrame, word_config: LogOddsConfig):
        with pytest.raises(ValueError):
            run_log_odds(pl.concat([word_counts, word_counts]), config=word_config)


class TestCLI:
    """Command-line entry point."""

    def test_overrides(self, word_config: LogOddsConfig):
        args = build_parser().parse_args(
            ["in.csv", "--set", "doc", "--uninformative", "--top-n", "5", "--output-dir", "x"]
        )
        config = apply_overrides(word_config, args)

        assert config.columns.set == "doc"
        assert config.columns.feature == "word"
        assert config.prior.uninformative is True
        assert config.output.unweighted is False
        assert config.output.top_n == 5
        assert config.output.output_dir == "x"

    def test_no_flags_keep_config(self, word_config: LogOddsConfig):
        args = build_parser().parse_args(["in.csv"])

        assert apply_overrides(word_config, args) == word_config

    def test_main_success(self, counts_csv: Path, tmp_path: Path, restore_logger, capsys):
        out = tmp_path / "cli_out"
        code = main([
            str(counts_csv),
            "--set", "document",
            "--feature", "word",
            "--count", "frequency",
            "--unweighted",
            "--output-dir", str(out),
            "--log-dir", str(tmp_path / "logs"),
        ])

        assert code == 0
        result = pl.read_parquet(out / "log_odds.parquet")
        assert result.columns == ["document", "word", "frequency", "log_odds", "log_odds_weighted"]
        assert (tmp_path / "logs" / "log_odds_runner.jsonl").exists()
        assert "WEIGHTED LOG ODDS SUMMARY" in capsys.readouterr().out

    def test_main_invalid_input(self, tmp_path: Path, word_counts: pl.DataFrame, restore_logger):
        path = tmp_path / "dupes.csv"
        pl.concat([word_counts, word_counts]).write_csv(path)

        code = main([
            str(path),
            "--set", "document",
            "--feature", "word",
            "--count", "frequency",
            "--output-dir", str(tmp_path / "out"),
            "--log-dir", str(tmp_path / "logs"),
        ])

        assert code == 1
        assert not (tmp_path / "out" / "log_odds.parquet").exists()

    def test_main_missing_config(self, counts_csv: Path, tmp_path: Path):
        code = main([str(counts_csv), "--config", str(tmp_path / "absent.toml")])

        assert code == 1

    def test_main_invalid_config(self, counts_csv: Path, tmp_path: Path):
        code = main([str(counts_csv), "--set", "word", "--feature", "word"])

        assert code == 1
