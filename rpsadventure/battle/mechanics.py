from __future__ import annotations
from rpsadventure.battle.models import (
    BattleOutcome, Enemy, Move, OutcomeKind, Player, MAX_PLAYER_HP,
)

DYNAMITE_DAMAGE = 25
PLAYER_HIT_DAMAGE = 10
ENEMY_HIT_DAMAGE = 8
VICTORY_HEAL = 15

# winner -> loser
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}

def resolve(player_move: Move, enemy_move: Move) -> BattleOutcome:
    if player_move is Move.DYNAMITE:
        return BattleOutcome(OutcomeKind.DYNAMITE_HIT, DYNAMITE_DAMAGE)
    if player_move is enemy_move:
        return BattleOutcome(OutcomeKind.TIE)
    if BEATS[player_move] is enemy_move:
        return BattleOutcome(OutcomeKind.PLAYER_HIT, PLAYER_HIT_DAMAGE)
    return BattleOutcome(OutcomeKind.ENEMY_HIT, ENEMY_HIT_DAMAGE)

def apply_outcome(outcome: BattleOutcome, player: Player, enemy: Enemy) -> None:
    # no floor: defeat is hp <= 0
    if outcome.hits_enemy:
        enemy.hp -= outcome.damage
    elif outcome.hits_player:
        player.hp -= outcome.damage

def heal(player: Player, amount: int = VICTORY_HEAL) -> int:
    """Heal up to MAX_PLAYER_HP and return the amount actually restored."""
    before = player.hp
    player.hp = max(0, min(player.hp + amount, MAX_PLAYER_HP))
    return player.hp - before
