"""Log-odds runner - CLI entry point and orchestration.

Data Flow:
    CSV/Parquet -> Polars DataFrame -> fingerprint + telemetry
    -> compute_weighted_log_odds() -> Parquet + summary JSON
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import replace
from pathlib import Path

import polars as pl
from loguru import logger

from wlo_python import __version__
from wlo_python.config import LogOddsConfig, load_log_odds_config, validate_log_odds_config
from wlo_python.log_odds.bind import compute_weighted_log_odds
from wlo_python.log_odds.prior import estimate_prior
from wlo_python.log_odds.ranking import top_log_odds
from wlo_python.ndjson_logger import get_trace_id, set_input_hash, setup_ndjson_logger
from wlo_python.telemetry import (
    ProvenanceContext,
    fingerprint_frame,
    log_algorithm_init,
    log_data_load,
    log_log_odds_summary,
)


def read_count_table(path: Path | str) -> pl.DataFrame:
    """Read a count table from CSV or Parquet, chosen by file suffix.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is not .csv, .tsv or .parquet
    """
    path = Path(path)
    if not path.exists():
        msg = f"Input file not found: {path}"
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return pl.read_parquet(path)
    if suffix == ".csv":
        return pl.read_csv(path)
    if suffix == ".tsv":
        return pl.read_csv(path, separator="\t")
    msg = f"Unsupported input format '{suffix}' (expected .csv, .tsv or .parquet)"
    raise ValueError(msg)


def run_log_odds(
    table: pl.DataFrame | Path | str,
    config: LogOddsConfig | None = None,
    output_dir: Path | str | None = None,
) -> dict:
    """Run a complete weighted log-odds computation.

    Args:
        table: Count table, or path to a CSV/Parquet file holding one
        config: Run configuration (defaults if None)
        output_dir: Directory for artifacts (None = no file output)

    Returns:
        Dict with run metadata, summary and the result frames under
        "result", "prior" and "top"
    """
    config = config or LogOddsConfig()
    cols = config.columns

    provenance = ProvenanceContext()
    provenance.set_config_hash(config.to_dict())

    if isinstance(table, pl.DataFrame):
        df = table
        source = "<dataframe>"
    else:
        df = read_count_table(table)
        source = str(table)

    fingerprint = fingerprint_frame(df, "count_table")
    provenance.add_input_hash("count_table", fingerprint["sha256"])
    set_input_hash(fingerprint["sha256"])

    log_data_load(
        source=source,
        sha256_hash=fingerprint["sha256"],
        row_count=df.height,
        column_count=df.width,
        columns=df.columns,
    )
    log_algorithm_init(
        algorithm_name="weighted_log_odds",
        version=__version__,
        config=config.to_dict(),
        input_hash=fingerprint["sha256"],
    )

    phase_start = time.perf_counter()
    result = compute_weighted_log_odds(
        df,
        cols.set,
        cols.feature,
        cols.count,
        uninformative=config.prior.uninformative,
        unweighted=config.output.unweighted,
    )
    prior = estimate_prior(df, cols.feature, cols.count, uninformative=config.prior.uninformative)
    top = top_log_odds(result, cols.set, n=config.output.top_n)
    duration_ms = (time.perf_counter() - phase_start) * 1000

    summary_event = log_log_odds_summary(result, cols.set, cols.feature, config.prior.uninformative)

    results = {
        "run_id": provenance.run_id,
        "trace_id": get_trace_id(),
        "provenance": provenance.to_dict(),
        "source": source,
        "config": config.to_dict(),
        "summary": summary_event.to_dict(),
        "duration_ms": round(duration_ms, 2),
        "result": result,
        "prior": prior,
        "top": top,
    }

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        result.write_parquet(output_dir / "log_odds.parquet")
        top.write_parquet(output_dir / "top_log_odds.parquet")
        if config.output.write_prior:
            prior.write_parquet(output_dir / "prior.parquet")

        summary = {k: v for k, v in results.items() if not isinstance(v, pl.DataFrame)}
        with open(output_dir / "summary.json", "w") as f:
            json.dump(summary, f, indent=2, default=str)

        logger.bind(context={
            "output_dir": str(output_dir),
            "run_id": provenance.run_id,
        }).info("Artifacts written")

    logger.bind(context={
        "run_id": provenance.run_id,
        "n_rows": result.height,
        "duration_ms": results["duration_ms"],
    }).info("Log odds run complete")

    return results


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Weighted log-odds ratio of features across sets"
    )
    parser.add_argument("input", type=Path, help="Count table (.csv, .tsv or .parquet)")
    parser.add_argument("--config", "-c", type=Path, help="Config file path (TOML)")
    parser.add_argument("--set", dest="set_col", help="Set column name")
    parser.add_argument("--feature", dest="feature_col", help="Feature column name")
    parser.add_argument("--count", dest="count_col", help="Count column name")
    parser.add_argument(
        "--uninformative",
        action="store_true",
        default=None,
        help="Use the uninformative prior (alpha = 1)",
    )
    parser.add_argument(
        "--unweighted",
        action="store_true",
        default=None,
        help="Also output the unweighted log odds",
    )
    parser.add_argument("--top-n", type=int, help="Rows kept per set in top_log_odds.parquet")
    parser.add_argument("--output-dir", type=Path, help="Output directory for artifacts")
    parser.add_argument("--log-dir", type=Path, help="Directory for NDJSON logs")
    return parser


def apply_overrides(config: LogOddsConfig, args: argparse.Namespace) -> LogOddsConfig:
    """Return a copy of ``config`` with any CLI flags applied."""
    columns = replace(
        config.columns,
        set=args.set_col or config.columns.set,
        feature=args.feature_col or config.columns.feature,
        count=args.count_col or config.columns.count,
    )
    prior = replace(
        config.prior,
        uninformative=config.prior.uninformative if args.uninformative is None else True,
    )
    output = replace(
        config.output,
        unweighted=config.output.unweighted if args.unweighted is None else True,
        top_n=config.output.top_n if args.top_n is None else args.top_n,
        output_dir=str(args.output_dir) if args.output_dir else config.output.output_dir,
    )
    logging_cfg = replace(
        config.logging,
        log_dir=str(args.log_dir) if args.log_dir else config.logging.log_dir,
    )
    return replace(config, columns=columns, prior=prior, output=output, logging=logging_cfg)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_log_odds_config(args.config) if args.config else LogOddsConfig()
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    config = apply_overrides(config, args)

    is_valid, errors = validate_log_odds_config(config)
    if not is_valid:
        print("Configuration errors:", file=sys.stderr)
        for err in errors:
            print(f"  - {err}", file=sys.stderr)
        return 1

    setup_ndjson_logger(
        "log_odds_runner",
        log_dir=config.logging.log_dir,
        env=config.logging.env,
        level=config.logging.level,
        console_level=config.logging.console_level,
    )

    try:
        results = run_log_odds(args.input, config=config, output_dir=config.output.output_dir)
    except (FileNotFoundError, ValueError) as e:
        logger.bind(context={"input": str(args.input)}).error(f"Log odds run failed: {e}")
        logger.complete()
        return 1

    summary = results["summary"]
    print("\n" + "=" * 60)
    print("WEIGHTED LOG ODDS SUMMARY")
    print("=" * 60)
    print(f"Rows: {summary['n_rows']}  Sets: {summary['n_sets']}  Features: {summary['n_features']}")
    print(f"Prior: {summary['prior']}")
    print(f"log_odds_weighted range: [{summary['min_weighted']:.3f}, {summary['max_weighted']:.3f}]")
    print("=" * 60)
    print(f"\nOutputs written to: {config.output.output_dir}")

    # Flush loguru's queue before exit (enqueue=True requires this)
    logger.complete()
    return 0


if __name__ == "__main__":
    sys.exit(main())
