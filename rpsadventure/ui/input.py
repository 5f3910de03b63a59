"""Line-based input helpers and menu choice prompts."""
from __future__ import annotations
from typing import Callable, List, Optional
from rich.console import Console
from rich.markup import escape
from rpsadventure.ui.console import console as default_console

Reader = Callable[[str], str]


def get_input(prompt: str = "> ", read: Reader = input) -> str:
    """Get user input with prompt"""
    return read(prompt).strip()


def get_choice(prompt: str, choices: List[str], default: Optional[str] = None,
               read: Reader = input, out: Optional[Console] = None) -> str:
    """Get a choice from user with validation"""
    out = out or default_console
    while True:
        out.print(escape(prompt))
        for i, choice in enumerate(choices, 1):
            out.print(f"{i}. {escape(choice)}")

        response = get_input("Choose (number or name): ", read).lower()

        if default and response == "":
            return default

        # Try to match by number
        try:
            idx = int(response) - 1
            if 0 <= idx < len(choices):
                return choices[idx]
        except ValueError:
            pass

        # Try to match by name
        for choice in choices:
            if response == choice.lower():
                return choice

        # Try partial match
        matches = [c for c in choices if response and c.lower().startswith(response)]
        if len(matches) == 1:
            return matches[0]

        out.print("Invalid choice. Please try again.")
