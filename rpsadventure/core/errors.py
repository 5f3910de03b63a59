"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class AdventureError(Exception):
    pass

class ValidationError(AdventureError):
    def __init__(self, token: str, reason: str):
        super().__init__(reason)
        self.token = token
        self.reason = reason

class InvalidMoveError(ValidationError):
    def __init__(self, token: str):
        super().__init__(token, "Invalid move, try again!")

class NoDynamiteError(ValidationError):
    def __init__(self, token: str = "dynamite"):
        super().__init__(token, "No dynamite left!")

class EncounterFinishedError(AdventureError):
    def __init__(self, enemy: str, state: str):
        super().__init__(f"Encounter with {enemy} already ended ({state})")
        self.enemy = enemy
        self.state = state

class ResultsWriteError(AdventureError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to write {path}: {detail}")
        self.path = path
        self.detail = detail
