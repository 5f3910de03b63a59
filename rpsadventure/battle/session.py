"""Single encounter orchestration: one player against one enemy.

Each :meth:`EncounterSession.step` is one turn: the player's already-accepted
move, the enemy's biased draw, resolution through the outcome table, then the
defeat checks. Messages for the player are collected in ``log`` and forwarded
to ``message_cb`` when one is attached.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional
from .models import BattleOutcome, Enemy, Move, OutcomeKind, Player
from .ai import RandomSource, choose_move
from .mechanics import apply_outcome, heal, resolve
from rpsadventure.core.errors import EncounterFinishedError
from rpsadventure.core.logging import logger

class EncounterState(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    PLAYER_DEFEATED = "PLAYER_DEFEATED"
    ENEMY_DEFEATED = "ENEMY_DEFEATED"

@dataclass(frozen=True)
class TurnRecord:
    turn: int
    player_move: Move
    enemy_move: Move
    outcome: BattleOutcome
    player_hp: int
    enemy_hp: int
    state: EncounterState

MessageCallback = Callable[[str, str], None]

class EncounterSession:
    def __init__(self, player: Player, enemy: Enemy, rng: RandomSource, message_cb: Optional[MessageCallback] = None):
        self.player = player
        self.enemy = enemy
        self.rng = rng
        self.message_cb = message_cb
        self.state = EncounterState.IN_PROGRESS
        self.turn_counter = 0
        self.turns: List[TurnRecord] = []
        self.log: List[str] = []

    def _say(self, text: str, kind: str = "info"):
        self.log.append(text)
        if self.message_cb:
            self.message_cb(text, kind)

    def is_over(self) -> bool:
        return self.state is not EncounterState.IN_PROGRESS

    def announce(self):
        self._say(f"A wild {self.enemy.name} appears!", "banner")
        logger.info("EncounterStart", enemy=self.enemy.name, enemy_hp=self.enemy.hp, player_hp=self.player.hp)

    def step(self, player_move: Move) -> TurnRecord:
        if self.is_over():
            raise EncounterFinishedError(self.enemy.name, self.state.value)
        self.turn_counter += 1
        if player_move is Move.DYNAMITE:
            self._say("BOOM! Dynamite used!", "dynamite")
        else:
            self._say(f"You chose: {player_move.value}")
        enemy_move = choose_move(self.enemy, self.rng)
        self._say(f"{self.enemy.name} chose: {enemy_move.value}")

        outcome = resolve(player_move, enemy_move)
        apply_outcome(outcome, self.player, self.enemy)
        self._narrate(outcome)

        if self.player.is_defeated():
            self.state = EncounterState.PLAYER_DEFEATED
        elif self.enemy.is_defeated():
            self.state = EncounterState.ENEMY_DEFEATED
            self._on_enemy_defeated()

        record = TurnRecord(
            turn=self.turn_counter,
            player_move=player_move,
            enemy_move=enemy_move,
            outcome=outcome,
            player_hp=self.player.hp,
            enemy_hp=self.enemy.hp,
            state=self.state,
        )
        self.turns.append(record)
        logger.debug("TurnResolved", turn=record.turn, player=player_move.value, enemy=enemy_move.value,
                     outcome=outcome.kind.value, damage=outcome.damage,
                     player_hp=record.player_hp, enemy_hp=record.enemy_hp)
        if self.is_over():
            logger.info("EncounterEnd", enemy=self.enemy.name, state=self.state.value, turns=self.turn_counter)
        return record

    def _narrate(self, outcome: BattleOutcome):
        if outcome.kind is OutcomeKind.DYNAMITE_HIT:
            self._say(f"Dynamite deals {outcome.damage} damage to {self.enemy.name}!", "hit")
        elif outcome.kind is OutcomeKind.TIE:
            self._say("It's a tie! No damage!")
        elif outcome.kind is OutcomeKind.PLAYER_HIT:
            self._say(f"You deal {outcome.damage} damage to {self.enemy.name}!", "hit")
        else:
            self._say(f"{self.enemy.name} deals {outcome.damage} damage to you!", "hurt")

    def _on_enemy_defeated(self):
        self._say(f"Victory! You defeated the {self.enemy.name}!", "victory")
        self.player.wins += 1
        healed = heal(self.player)
        if healed:
            self._say(f"You recover {healed} HP.")

    def run(self, next_move: Callable[[Player, Enemy], Move]) -> EncounterState:
        while not self.is_over():
            self.step(next_move(self.player, self.enemy))
        return self.state

__all__ = ["EncounterSession", "EncounterState", "TurnRecord"]
