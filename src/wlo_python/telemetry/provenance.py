"""Provenance tracking for reproducible log-odds runs.

A run can be matched to its exact input from the logs alone:
- fingerprint_frame: SHA256 fingerprint of a Polars table
- fingerprint_file: SHA256 fingerprint of an input file
- ProvenanceContext: session, git SHA, input and config hashes
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np
import polars as pl

from wlo_python.ndjson_logger import get_git_sha, get_session_id


def fingerprint_frame(df: pl.DataFrame, name: str) -> dict[str, Any]:
    """Generate a reproducibility fingerprint for a DataFrame.

    The hash covers row contents in order (via ``hash_rows`` with a fixed
    seed) plus the schema, so renaming or retyping a column changes it.
    Row hashes are stable for a given Polars version only.

    Args:
        df: Table to fingerprint
        name: Descriptive name (e.g., "count_table")

    Returns:
        Dictionary with fingerprint data suitable for JSON serialization
    """
    row_hashes = df.hash_rows(seed=0).to_numpy().astype(np.uint64)
    digest = hashlib.sha256(row_hashes.tobytes())
    digest.update(json.dumps([[c, str(t)] for c, t in df.schema.items()]).encode())
    return {
        "name": name,
        "sha256": digest.hexdigest(),
        "shape": list(df.shape),
        "columns": df.columns,
        "dtypes": [str(t) for t in df.dtypes],
    }


def fingerprint_file(path: Path | str) -> dict[str, Any]:
    """Generate fingerprint for an input file.

    Args:
        path: Path to file

    Returns:
        Dictionary with file fingerprint data
    """
    path = Path(path)
    content = path.read_bytes()
    return {
        "path": str(path),
        "filename": path.name,
        "sha256": hashlib.sha256(content).hexdigest(),
        "size_bytes": len(content),
    }


@dataclass
class ProvenanceContext:
    """Accumulate provenance for one run.

    Attributes:
        session_id: Logging session the run belongs to
        run_id: Identifier of this run
        input_hashes: Map of input name to SHA256 hash
        git_sha: Git commit SHA at time of the run
        config_hash: Hash of the configuration used
        start_time: UTC timestamp when the run started
    """

    session_id: str = field(default_factory=get_session_id)
    run_id: str = field(default_factory=lambda: f"wlo_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}")
    input_hashes: dict[str, str] = field(default_factory=dict)
    git_sha: str = field(default_factory=get_git_sha)
    config_hash: str | None = None
    start_time: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def add_input_hash(self, name: str, hash_value: str) -> None:
        """Record input data hash for provenance."""
        self.input_hashes[name] = hash_value

    def set_config_hash(self, config: dict[str, Any]) -> None:
        """Compute and store hash of configuration."""
        config_str = json.dumps(config, sort_keys=True, default=str)
        self.config_hash = hashlib.sha256(config_str.encode()).hexdigest()[:16]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "session_id": self.session_id,
            "run_id": self.run_id,
            "input_hashes": self.input_hashes,
            "git_sha": self.git_sha,
            "config_hash": self.config_hash,
            "start_time": self.start_time,
        }
