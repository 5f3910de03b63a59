"""Terminal battle UI.

Renders the status HUD before each turn, forwards encounter messages to the
console, and wraps move validation in the interactive prompt loop.
"""
from __future__ import annotations
from typing import Optional
from rich.align import Align
from rich.box import ROUNDED, DOUBLE
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from rpsadventure.battle.models import Enemy, Move, Player, MAX_PLAYER_HP
from rpsadventure.battle.service import MoveProvider
from rpsadventure.battle.validation import accept_move
from rpsadventure.core.errors import ValidationError
from rpsadventure.core.logging import logger
from rpsadventure.ui.console import console as default_console, style_for
from rpsadventure.ui.input import Reader

MOVE_PROMPT = "Choose your move (rock/paper/scissors/dynamite): "

def hp_bar(current: int, max_hp: int, width: int = 20) -> str:
    """HP bar as rich markup, green/yellow/red by remaining ratio."""
    if max_hp <= 0 or current <= 0:
        return "[red]DEFEATED[/red]"
    ratio = min(current, max_hp) / max_hp
    filled = int(ratio * width)
    if ratio > 0.5:
        color = "green"
    elif ratio > 0.25:
        color = "yellow"
    else:
        color = "red"
    bar = "█" * filled + "░" * (width - filled)
    return f"[{color}]{bar}[/{color}]"

def render_title(out: Optional[Console] = None):
    out = out or default_console
    title = Text("ROCK-PAPER-SCISSORS ADVENTURE", style="bold bright_white", justify="center")
    out.print(Align.center(Panel(Align.center(title), box=DOUBLE, style="bright_white", width=60, padding=(1, 2))))

def render_status(player: Player, enemy: Enemy, out: Optional[Console] = None):
    out = out or default_console
    enemy_panel = Panel(
        f"[bold bright_white]{escape(enemy.name)}[/bold bright_white]\n"
        f"HP: {enemy.hp}/{enemy.max_hp}\n{hp_bar(enemy.hp, enemy.max_hp)}",
        title="[bold]OPPONENT[/bold]",
        box=ROUNDED,
        style="bright_white",
        width=34,
        padding=(0, 1),
    )
    player_panel = Panel(
        f"[bold bright_white]{escape(player.name)}[/bold bright_white]\n"
        f"HP: {player.hp}/{MAX_PLAYER_HP}  Dynamite: {player.dynamite}\n{hp_bar(player.hp, MAX_PLAYER_HP)}",
        title="[bold]YOU[/bold]",
        box=ROUNDED,
        style="bright_white",
        width=34,
        padding=(0, 1),
    )
    out.print(Align.center(Columns([enemy_panel, player_panel], equal=True, expand=False, padding=(0, 4))))

def console_messages(out: Optional[Console] = None):
    """Message callback printing encounter/run messages with per-kind styling."""
    out = out or default_console
    def _print(text: str, kind: str = "info"):
        style = style_for(kind)
        if kind in ("banner", "victory", "defeat", "title"):
            out.print()
        out.print(f"[{style}]{escape(text)}[/{style}]")
    return _print

def prompt_player_move(player: Player, read: Reader = input, out: Optional[Console] = None) -> Move:
    """Ask until a valid move is entered; accepting dynamite spends a charge."""
    out = out or default_console
    while True:
        token = read(MOVE_PROMPT)
        try:
            return accept_move(token, player)
        except ValidationError as e:
            logger.debug("MoveRejected", token=e.token, reason=e.reason)
            out.print(f"[yellow]{escape(e.reason)}[/yellow]")

def interactive_moves(read: Reader = input, out: Optional[Console] = None) -> MoveProvider:
    out = out or default_console
    def _next(player: Player, enemy: Enemy) -> Move:
        render_status(player, enemy, out)
        return prompt_player_move(player, read, out)
    return _next
