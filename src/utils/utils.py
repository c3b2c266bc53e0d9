"""Generic helpers shared across layers."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root (the directory holding ``src/``)."""
    return Path(__file__).resolve().parents[2]


__all__ = ["get_project_root"]
