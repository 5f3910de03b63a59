from __future__ import annotations
import random
from typing import Optional
from rich.console import Console
from rpsadventure.battle.models import Player
from rpsadventure.battle.service import AdventureService, RunResult
from rpsadventure.core.logging import logger
from rpsadventure.system.results import ResultsLog
from rpsadventure.system.settings import Settings
from rpsadventure.ui.battle import console_messages, interactive_moves, render_title
from rpsadventure.ui.console import console as default_console
from rpsadventure.ui.input import Reader, get_input
from rpsadventure.ui.menu import main_menu, options_submenu
from rpsadventure.ui.results import render_history

def play(settings: Settings, read: Reader = input, out: Optional[Console] = None) -> RunResult:
    """One full run over the roster with a fresh player."""
    out = out or default_console
    say = console_messages(out)
    seed = settings.data.effective_seed()
    if seed is not None:
        logger.debug("RngSeeded", seed=seed)
    service = AdventureService(
        Player(name=settings.data.player_name),
        ResultsLog(settings.data.results_file, notify=say),
        rng=random.Random(seed),
        message_cb=say,
    )
    result = service.run(interactive_moves(read, out))
    get_input("Press Enter to continue...", read)
    return result

def run(read: Reader = input, out: Optional[Console] = None):
    out = out or default_console
    settings = Settings.load()
    logger.set_level(settings.data.log_level)  # type: ignore[arg-type]
    render_title(out)
    try:
        while True:
            choice = main_menu(read, out)
            if choice == "play":
                play(settings, read, out)
            elif choice == "results":
                render_history(ResultsLog(settings.data.results_file).history(), out)
            elif choice == "options":
                options_submenu(settings, read, out)
            elif choice == "quit":
                out.print("Farewell, adventurer!")
                break
    except (EOFError, KeyboardInterrupt):
        out.print()
        logger.debug("InputClosed")
    settings.save()
