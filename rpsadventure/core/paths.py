"""
Centralized path helpers (works with the current flat layout).
"""
from __future__ import annotations
from pathlib import Path

SETTINGS_FILENAME = ".rps_adventure_settings.json"
DEFAULT_RESULTS_FILE = "results.txt"

def resolve_results_path(name: str | Path) -> Path:
    """Relative result files live in the current working directory."""
    path = Path(name).expanduser()
    if path.is_absolute():
        return path
    return Path.cwd() / path
