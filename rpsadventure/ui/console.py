"""Shared rich console for all game output."""
from __future__ import annotations
from rich.console import Console

console = Console(highlight=False)

# message kind -> rich style
MESSAGE_STYLES = {
    "title": "bold bright_yellow",
    "banner": "bold bright_white",
    "victory": "bold green",
    "defeat": "bold red",
    "dynamite": "bold bright_red",
    "hit": "bright_green",
    "hurt": "bright_red",
    "error": "red",
    "info": "bright_white",
}

def style_for(kind: str) -> str:
    return MESSAGE_STYLES.get(kind, MESSAGE_STYLES["info"])
