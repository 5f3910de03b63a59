"""Append-only results log.

One record per finished run::

    Game on 2026-10-19 14:03:11
    Player: Adventurer
    Wins: 3
    Final HP: 42
    Result: Saved the land!
    <blank line>
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional
from rpsadventure.core.errors import ResultsWriteError
from rpsadventure.core.logging import logger
from rpsadventure.core.paths import DEFAULT_RESULTS_FILE, resolve_results_path

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
WON_TEXT = "Saved the land!"
LOST_TEXT = "Defeated"

@dataclass
class ResultRecord:
    timestamp: datetime
    player: str
    wins: int
    final_hp: int
    won: bool

def format_record(player_name: str, wins: int, final_hp: int, won: bool, timestamp: datetime) -> str:
    return (
        f"Game on {timestamp.strftime(TIMESTAMP_FORMAT)}\n"
        f"Player: {player_name}\n"
        f"Wins: {wins}\n"
        f"Final HP: {final_hp}\n"
        f"Result: {WON_TEXT if won else LOST_TEXT}\n"
        "\n"
    )

def append_record(path: Path, text: str) -> None:
    try:
        with path.open("a", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as e:
        raise ResultsWriteError(str(path), e.strerror or str(e)) from e
    except ValueError as e:  # e.g. embedded NUL in the path
        raise ResultsWriteError(str(path), str(e)) from e

def _parse_block(lines: List[str]) -> ResultRecord:
    fields = {}
    for line in lines:
        key, sep, value = line.partition(":")
        if line.startswith("Game on "):
            fields["timestamp"] = line[len("Game on "):].strip()
        elif sep:
            fields[key.strip()] = value.strip()
    result = fields["Result"]
    if result not in (WON_TEXT, LOST_TEXT):
        raise ValueError(f"unknown result {result!r}")
    return ResultRecord(
        timestamp=datetime.strptime(fields["timestamp"], TIMESTAMP_FORMAT),
        player=fields["Player"],
        wins=int(fields["Wins"]),
        final_hp=int(fields["Final HP"]),
        won=result == WON_TEXT,
    )

def read_records(path: Path) -> List[ResultRecord]:
    """Parse every complete record in ``path``; malformed blocks are skipped."""
    if not path.is_file():
        return []
    records: List[ResultRecord] = []
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warn("ResultsReadFailed", path=str(path), error=str(e))
        return []
    blocks = text.split("\n\n")
    for block in blocks:
        lines = [ln for ln in block.splitlines() if ln.strip()]
        if not lines:
            continue
        try:
            records.append(_parse_block(lines))
        except (KeyError, ValueError) as e:
            logger.warn("ResultsRecordSkipped", path=str(path), error=str(e))
    return records

class ResultsLog:
    """Results sink writing to a text file.

    ``notify`` receives the user-facing confirmation or error line; the run
    outcome never depends on whether the write worked.
    """

    def __init__(self, path: str | Path = DEFAULT_RESULTS_FILE, notify: Optional[Callable[[str, str], None]] = None):
        self.path = resolve_results_path(path)
        self.notify = notify

    def _tell(self, text: str, kind: str):
        if self.notify:
            self.notify(text, kind)

    def record(self, player_name: str, wins: int, final_hp: int, won: bool, timestamp: datetime) -> bool:
        text = format_record(player_name, wins, final_hp, won, timestamp)
        try:
            append_record(self.path, text)
        except ResultsWriteError as e:
            logger.error("ResultsSaveFailed", file=e.path, error=e.detail)
            self._tell(f"Error saving results: {e.detail}", "error")
            return False
        logger.info("ResultsSaved", file=str(self.path))
        self._tell(f"Results saved to {self.path.name}!", "info")
        return True

    def history(self) -> List[ResultRecord]:
        return read_records(self.path)

__all__ = ["ResultsLog", "ResultRecord", "format_record", "read_records", "append_record"]
