"""NDJSON structured logging for log-odds runs.

Library modules log through ``loguru.logger.bind(context=...)`` and never add
sinks; an application (the runner, a notebook) calls ``setup_ndjson_logger``
once to route records to a JSON-lines file.

Schema:
{
    "ts": "2026-01-20T00:00:00.000000Z",  # UTC ISO 8601
    "level": "INFO",
    "msg": "Human readable message",
    "component": "log_odds_runner",        # Logger name
    "env": "development",
    "pid": 12345,
    "tid": 67890,
    "trace_id": "abc123",                  # Correlation ID
    "provenance": {
        "session_id": "sess_20260125_120000",
        "git_sha": "0dc100c",
        "input_hash": null                 # Set per run
    },
    "context": {...}
}
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from wlo_python.paths import get_log_dir


def get_trace_id() -> str:
    """Get or create a trace ID for the current session."""
    if not hasattr(get_trace_id, "_trace_id"):
        get_trace_id._trace_id = uuid.uuid4().hex[:16]
    return get_trace_id._trace_id


def set_trace_id(trace_id: str) -> None:
    """Set a specific trace ID (to correlate with an outer job)."""
    get_trace_id._trace_id = trace_id


def get_session_id() -> str:
    """Get or create a session ID for provenance tracking."""
    if not hasattr(get_session_id, "_session_id"):
        get_session_id._session_id = f"sess_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}"
    return get_session_id._session_id


def get_git_sha(short: bool = True) -> str:
    """Get the current git SHA, or "unknown" outside a repository."""
    if not hasattr(get_git_sha, "_git_sha"):
        try:
            result = subprocess.run(
                ["git", "rev-parse", "HEAD"],
                capture_output=True,
                text=True,
                check=True,
                timeout=5,
            )
            get_git_sha._git_sha = result.stdout.strip()
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
            get_git_sha._git_sha = "unknown"
    sha = get_git_sha._git_sha
    return sha[:8] if short and sha != "unknown" else sha


_provenance_context = threading.local()


def set_input_hash(input_hash: str | None) -> None:
    """Set the input fingerprint attached to subsequent records (thread-local)."""
    _provenance_context.input_hash = input_hash


def get_provenance() -> dict:
    """Get current provenance context for logging."""
    return {
        "session_id": get_session_id(),
        "git_sha": get_git_sha(),
        "input_hash": getattr(_provenance_context, "input_hash", None),
    }


class NDJSONFormatter:
    """Format loguru records as NDJSON with a stable schema."""

    def __init__(self, component: str, env: str = "development"):
        self.component = component
        self.env = env

    def build_entry(self, record: dict) -> dict:
        """Map a loguru record to the NDJSON schema."""
        extra = dict(record.get("extra", {}))
        context = dict(extra.pop("context", None) or {})

        for k, v in extra.items():
            if k.startswith("_"):
                continue
            try:
                json.dumps(v)
                context[k] = v
            except (TypeError, ValueError):
                context[k] = str(v)

        entry = {
            "ts": record["time"].astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record["level"].name,
            "msg": record["message"],
            "component": self.component,
            "env": self.env,
            "pid": os.getpid(),
            "tid": threading.get_ident(),
            "trace_id": get_trace_id(),
            "provenance": get_provenance(),
        }
        if context:
            entry["context"] = context

        exc = record.get("exception")
        if exc:
            entry["exception"] = {
                "type": exc.type.__name__ if exc.type else None,
                "value": str(exc.value) if exc.value else None,
            }
        return entry

    def format(self, record: dict) -> str:
        """Format a loguru record as one escaped NDJSON line."""
        try:
            json_str = json.dumps(self.build_entry(record), default=str)
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            json_str = json.dumps({
                "ts": datetime.now(timezone.utc).isoformat(),
                "level": "ERROR",
                "msg": f"Logging format error ({type(e).__name__}): {e}",
                "component": self.component,
                "trace_id": get_trace_id(),
            })
        # loguru runs format_map() on the returned template
        return json_str.replace("{", "{{").replace("}", "}}") + "\n"


def setup_ndjson_logger(
    component: str,
    log_dir: Path | str | None = None,
    env: str = "development",
    level: str = "DEBUG",
    rotation: str = "10 MB",
    retention: str = "7 days",
    console_level: str | None = "WARNING",
    enqueue: bool = True,
):
    """Route loguru output to ``<log_dir>/<component>.jsonl``.

    Replaces any previously configured sinks.

    Args:
        component: Component name written into every record
        log_dir: Directory for log files (default: repo logs/ndjson/)
        env: Environment name
        level: Minimum level for the file sink
        rotation: Log rotation policy (e.g., "10 MB", "1 day")
        retention: Log retention policy (e.g., "7 days", "3 files")
        console_level: Minimum level for stderr, or None for no console sink
        enqueue: Write through loguru's background queue

    Returns:
        Configured loguru logger
    """
    log_dir = get_log_dir() / "ndjson" if log_dir is None else Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = NDJSONFormatter(component=component, env=env)

    logger.remove()
    logger.add(
        str(log_dir / f"{component}.jsonl"),
        format=formatter.format,
        level=level,
        rotation=rotation,
        retention=retention,
        compression="gz",
        enqueue=enqueue,
        catch=True,
    )

    if console_level:
        logger.add(
            sys.stderr,
            format="<level>{level}</level>: <level>{message}</level>",
            level=console_level,
            catch=True,
        )

    return logger
