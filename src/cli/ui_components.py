"""UI components for the CLI (Rich).

Keeps tables and panels out of the command functions so several commands can
share them.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ChainDescription


def print_banner(console: Console) -> None:
    title = Text("layered-datasource", style="bold cyan")
    subtitle = Text("File source • Compression • Encryption", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_chain_table(description: ChainDescription) -> Table:
    """Table of participants, outermost first."""

    table = Table(title="Data source chain")
    table.add_column("Depth", style="cyan", no_wrap=True)
    table.add_column("Participant", style="white")
    table.add_column("Layer", style="green")
    for item in description.participants:
        table.add_row(str(item.depth), item.name, item.kind.label() if item.kind else "source")
    if description.location:
        table.caption = f"Location: {description.location}"
    return table


def build_result_panel(label: str, value: str) -> Panel:
    body = Text(value)
    return Panel(body, title=Text(label, style="bold yellow"), border_style="yellow")
