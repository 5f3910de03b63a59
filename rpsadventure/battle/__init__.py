"""
Battle system package.
Modules:
- models.py (Player, Enemy, Move, BattleOutcome, roster)
- ai.py (enemy move selection)
- validation.py (player move tokens)
- mechanics.py (outcome table, damage, healing)
- session.py (single encounter state machine)
- service.py (full run over the roster)
"""
from .service import AdventureService, RunResult
from .session import EncounterSession, EncounterState
__all__ = ["AdventureService", "RunResult", "EncounterSession", "EncounterState"]
