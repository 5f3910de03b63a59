"""
High-level menus built on the numbered choice prompt.
"""
from __future__ import annotations
from typing import Optional
from rich.console import Console
from rpsadventure.core.logging import LEVELS
from rpsadventure.system.settings import Settings
from rpsadventure.ui.console import console as default_console
from rpsadventure.ui.input import Reader, get_choice, get_input

MAIN_MENU = {
    "Play": "play",
    "Results": "results",
    "Options": "options",
    "Quit": "quit",
}

def main_menu(read: Reader = input, out: Optional[Console] = None) -> str:
    choice = get_choice("\n=== MAIN MENU ===", list(MAIN_MENU), read=read, out=out)
    return MAIN_MENU[choice]

def options_submenu(settings: Settings, read: Reader = input, out: Optional[Console] = None) -> None:
    out = out or default_console
    while True:
        data = settings.data
        seed = "random" if data.rng_seed is None else data.rng_seed
        choices = [
            f"Player Name [{data.player_name}]",
            f"Log Level [{data.log_level}]",
            f"Results File [{data.results_file}]",
            f"RNG Seed [{seed}]",
            "Return",
        ]
        choice = get_choice("\n=== OPTIONS ===", choices, default="Return", read=read, out=out)
        if choice == "Return":
            return
        if choice.startswith("Player Name"):
            name = get_input("Name: ", read)
            if name:
                settings.apply(player_name=name)
        elif choice.startswith("Log Level"):
            level = get_choice("Log level", list(LEVELS), read=read, out=out)
            settings.apply(log_level=level)
        elif choice.startswith("Results File"):
            path = get_input("File: ", read)
            if path:
                settings.apply(results_file=path)
        elif choice.startswith("RNG Seed"):
            raw = get_input("Seed (blank for random): ", read)
            if not raw:
                settings.apply(rng_seed=None)
            else:
                try:
                    seed = int(raw)
                except ValueError:
                    out.print("Seed must be a whole number.")
                else:
                    settings.apply(rng_seed=seed)
