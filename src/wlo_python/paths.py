"""Repository-local path configuration.

All paths are relative to the repository root.
"""
from pathlib import Path

# Navigate from src/wlo_python/ to repo root
REPO_ROOT = Path(__file__).parent.parent.parent


def get_config_dir() -> Path:
    """Return the configuration directory (tracked in git)."""
    return REPO_ROOT / "config"


def get_artifacts_dir() -> Path:
    """Return the artifacts directory (gitignored)."""
    return REPO_ROOT / "artifacts"


def get_log_dir() -> Path:
    """Return the logs directory (gitignored)."""
    return REPO_ROOT / "logs"
