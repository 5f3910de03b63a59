from __future__ import annotations
from typing import Protocol
from rpsadventure.battle.models import Enemy, Move

class RandomSource(Protocol):
    def random(self) -> float: ...

def choose_move(enemy: Enemy, rng: RandomSource) -> Move:
    """Rock with probability ``rock_bias``; the rest splits evenly between paper and scissors."""
    roll = rng.random()
    bias = enemy.rock_bias
    if roll < bias:
        return Move.ROCK
    if roll < bias + (1 - bias) / 2:
        return Move.PAPER
    return Move.SCISSORS
