from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List

MAX_PLAYER_HP = 50
STARTING_DYNAMITE = 2

# name, starting hp, rock bias
DEFAULT_ROSTER = (
    ("Goblin", 20, 0.6),
    ("Wizard", 30, 0.4),
    ("Dark Lord", 40, 0.3),
)

class Move(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    DYNAMITE = "dynamite"

class OutcomeKind(str, Enum):
    TIE = "tie"
    PLAYER_HIT = "player_hit"
    ENEMY_HIT = "enemy_hit"
    DYNAMITE_HIT = "dynamite_hit"

@dataclass(frozen=True)
class BattleOutcome:
    kind: OutcomeKind
    damage: int = 0

    @property
    def hits_enemy(self) -> bool:
        return self.kind in (OutcomeKind.PLAYER_HIT, OutcomeKind.DYNAMITE_HIT)

    @property
    def hits_player(self) -> bool:
        return self.kind is OutcomeKind.ENEMY_HIT

@dataclass
class Player:
    name: str = "Adventurer"
    hp: int = MAX_PLAYER_HP
    dynamite: int = STARTING_DYNAMITE
    wins: int = 0

    def is_defeated(self) -> bool:
        return self.hp <= 0

    def use_dynamite(self) -> bool:
        """Spend one charge; False (and no change) when none are left."""
        if self.dynamite > 0:
            self.dynamite -= 1
            return True
        return False

@dataclass
class Enemy:
    name: str
    hp: int
    rock_bias: float
    max_hp: int = field(default=0)

    def __post_init__(self):
        if not 0.0 <= self.rock_bias <= 1.0:
            raise ValueError(f"rock_bias must be within [0, 1], got {self.rock_bias}")
        if not self.max_hp:
            self.max_hp = self.hp

    def is_defeated(self) -> bool:
        return self.hp <= 0

def make_roster() -> List[Enemy]:
    """Fresh enemies for one run, in the order they are fought."""
    return [Enemy(name, hp, bias) for name, hp, bias in DEFAULT_ROSTER]

__all__ = [
    "Move", "OutcomeKind", "BattleOutcome", "Player", "Enemy",
    "make_roster", "DEFAULT_ROSTER", "MAX_PLAYER_HP", "STARTING_DYNAMITE",
]
