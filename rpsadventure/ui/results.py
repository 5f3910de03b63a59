from __future__ import annotations
from typing import List, Optional
from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rpsadventure.system.results import ResultRecord, TIMESTAMP_FORMAT
from rpsadventure.ui.console import console as default_console

def render_history(records: List[ResultRecord], out: Optional[Console] = None, limit: int = 10):
    """Most recent runs first."""
    out = out or default_console
    if not records:
        out.print("[dim]No adventures recorded yet.[/dim]")
        return
    table = Table(title="[bold]PAST ADVENTURES[/bold]", box=ROUNDED, style="bright_white")
    table.add_column("When")
    table.add_column("Player")
    table.add_column("Wins", justify="right")
    table.add_column("Final HP", justify="right")
    table.add_column("Result")
    for rec in list(reversed(records))[:limit]:
        result = "[green]Saved the land![/green]" if rec.won else "[red]Defeated[/red]"
        table.add_row(rec.timestamp.strftime(TIMESTAMP_FORMAT), escape(rec.player), str(rec.wins), str(rec.final_hp), result)
    out.print(table)
    total_wins = sum(1 for r in records if r.won)
    out.print(f"{total_wins}/{len(records)} runs saved the land.")
