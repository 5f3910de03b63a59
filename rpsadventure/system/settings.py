from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from rpsadventure.core.logging import logger, LEVELS
from rpsadventure.core.paths import SETTINGS_FILENAME, DEFAULT_RESULTS_FILE

SEED_ENV = "RPS_RNG_SEED"

@dataclass
class SettingsData:
    player_name: str = "Adventurer"
    log_level: str = "INFO"            # DEBUG / INFO / WARN / ERROR
    results_file: str = DEFAULT_RESULTS_FILE
    rng_seed: Optional[int] = None     # None -> fresh entropy every run

    def normalize(self):
        if not isinstance(self.player_name, str) or not self.player_name.strip():
            self.player_name = "Adventurer"
        self.player_name = self.player_name.strip()
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()
        if self.log_level not in LEVELS:
            self.log_level = "INFO"
        if not isinstance(self.results_file, str) or not self.results_file.strip() or "\0" in self.results_file:
            self.results_file = DEFAULT_RESULTS_FILE
        if self.rng_seed is not None and not isinstance(self.rng_seed, int):
            try:
                self.rng_seed = int(self.rng_seed)
            except (TypeError, ValueError):
                self.rng_seed = None

    def effective_seed(self) -> Optional[int]:
        """Seed from the environment wins over the stored one."""
        raw = os.environ.get(SEED_ENV)
        if raw:
            try:
                return int(raw)
            except ValueError:
                logger.warn("SeedEnvIgnored", value=raw)
        return self.rng_seed

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls) -> "Settings":
        path = cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("settings root must be an object")
                # unknown keys are dropped
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)

    def apply(self, **changes):
        """Update fields, normalize, persist and notify listeners."""
        for key, value in changes.items():
            if not hasattr(self.data, key):
                raise AttributeError(f"Unknown setting '{key}'")
            setattr(self.data, key, value)
        self.data.normalize()
        logger.set_level(self.data.log_level)  # type: ignore[arg-type]
        self.save()
        self._notify()
