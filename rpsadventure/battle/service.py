"""Run controller: fights the whole roster in order and reports the result.

The service owns nothing global. The player, roster, random source, move
provider and results sink are all handed in, so a run can be driven entirely
by tests with scripted moves and a fixed random source.
"""
from __future__ import annotations
import random
from datetime import datetime
from typing import Callable, List, Literal, Optional, Protocol, TypedDict
from rpsadventure.core.logging import logger
from .ai import RandomSource
from .models import Enemy, Move, Player, make_roster
from .session import EncounterSession, EncounterState, MessageCallback

MoveProvider = Callable[[Player, Enemy], Move]

class RunResult(TypedDict):
    outcome: Literal["PLAYER_WIN","PLAYER_LOSS"]
    player: str
    wins: int
    final_hp: int
    dynamite_left: int
    enemies_faced: List[str]

class ResultsSink(Protocol):
    def record(self, player_name: str, wins: int, final_hp: int, won: bool, timestamp: datetime) -> bool: ...

class AdventureService:
    def __init__(
        self,
        player: Player,
        sink: ResultsSink,
        *,
        roster: Optional[List[Enemy]] = None,
        rng: Optional[RandomSource] = None,
        message_cb: Optional[MessageCallback] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.player = player
        self.sink = sink
        self.roster = roster if roster is not None else make_roster()
        self.rng = rng or random.Random()
        self.message_cb = message_cb
        self.clock = clock
        self.sessions: List[EncounterSession] = []

    def _say(self, text: str, kind: str = "info"):
        if self.message_cb:
            self.message_cb(text, kind)

    def run(self, next_move: MoveProvider) -> RunResult:
        logger.info("RunStart", player=self.player.name, enemies=len(self.roster))
        self._say("Welcome to Rock-Paper-Scissors Adventure!", "title")
        won = True
        for enemy in self.roster:
            session = EncounterSession(self.player, enemy, self.rng, self.message_cb)
            self.sessions.append(session)
            session.announce()
            if session.run(next_move) is EncounterState.PLAYER_DEFEATED:
                won = False
                break

        if won:
            self._say(f"You saved the land! Wins: {self.player.wins}", "victory")
        else:
            self._say("Game Over! You were defeated...", "defeat")
        logger.info("RunEnd", won=won, wins=self.player.wins, final_hp=self.player.hp)
        self.sink.record(self.player.name, self.player.wins, self.player.hp, won, self.clock())
        return {
            "outcome": "PLAYER_WIN" if won else "PLAYER_LOSS",
            "player": self.player.name,
            "wins": self.player.wins,
            "final_hp": self.player.hp,
            "dynamite_left": self.player.dynamite,
            "enemies_faced": [s.enemy.name for s in self.sessions],
        }

__all__ = ["AdventureService", "RunResult", "ResultsSink", "MoveProvider"]
