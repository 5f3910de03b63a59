"""Player move validation.

``validate_move`` is pure: it maps a raw token to a :class:`Move` or raises a
:class:`~rpsadventure.core.errors.ValidationError` explaining the rejection.
``accept_move`` applies the side effect of an accepted choice (spending a
dynamite charge) to the player.
"""
from __future__ import annotations
from rpsadventure.battle.models import Move, Player
from rpsadventure.core.errors import InvalidMoveError, NoDynamiteError

_BY_TOKEN = {m.value: m for m in Move}

def normalize_token(token: str | None) -> str:
    return (token or "").strip().lower()

def validate_move(token: str | None, dynamite_charges: int) -> Move:
    key = normalize_token(token)
    move = _BY_TOKEN.get(key)
    if move is None:
        raise InvalidMoveError(key)
    if move is Move.DYNAMITE and dynamite_charges <= 0:
        raise NoDynamiteError(key)
    return move

def accept_move(token: str | None, player: Player) -> Move:
    move = validate_move(token, player.dynamite)
    if move is Move.DYNAMITE:
        player.use_dynamite()
    return move

__all__ = ["validate_move", "accept_move", "normalize_token"]
