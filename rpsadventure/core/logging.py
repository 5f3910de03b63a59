"""
Lightweight logger used across the project.
Colored output via colorama.
"""
from __future__ import annotations
import sys
from datetime import datetime
from typing import Literal, Any

from colorama import Fore, Style, init as colorama_init

colorama_init()

Level = Literal["DEBUG","INFO","WARN","ERROR"]

COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED
}
RESET = Style.RESET_ALL

LEVELS = ("DEBUG","INFO","WARN","ERROR")
DEFAULT_LEVEL: Level = "INFO"

class Logger:
    # DEBUG=10 .. ERROR=40
    _order = {name: (i + 1) * 10 for i, name in enumerate(LEVELS)}
    def __init__(self, level: Level = DEFAULT_LEVEL, stream=None):
        self.threshold = self._order[level]
        self.stream = stream

    def set_level(self, level: Level):
        self.threshold = self._order.get(level, self._order[DEFAULT_LEVEL])

    def is_enabled(self, level: Level) -> bool:
        return self._order[level] >= self.threshold

    def _emit(self, lvl: Level, msg: str, **extra: Any):
        if not self.is_enabled(lvl):
            return
        ts = datetime.now().isoformat(timespec="seconds")
        extras = ""
        if extra:
            kv = " ".join(f"{k}={v}" for k,v in extra.items())
            extras = " " + kv
        out = self.stream or sys.stdout
        out.write(f"{COLORS[lvl]}{ts} [{lvl}] {msg}{extras}{RESET}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

logger = Logger(DEFAULT_LEVEL)
