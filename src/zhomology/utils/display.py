# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..data.containers import HomologyGroup


def homology_table(groups: Sequence[HomologyGroup]) -> Table:
    table = Table(show_header=True, header_style="bold magenta", box=None)
    table.add_column("Dim", style="dim", width=4)
    table.add_column("Group")
    table.add_column("Betti", justify="right")
    table.add_column("Torsion")
    table.add_column("Orders", style="dim")

    for group in groups:
        group_style = "dim" if group.is_trivial else "green"
        torsion = ", ".join(str(t) for t in group.torsion) or "-"
        table.add_row(
            str(group.dimension),
            f"[{group_style}]{group}[/{group_style}]",
            str(group.betti_number),
            torsion,
            str(group.orders),
        )
    return table


def print_homology(
    groups: Sequence[HomologyGroup], console: Console | None = None
) -> None:
    if console is None:
        console = Console()
    console.print(
        Panel(
            homology_table(groups),
            title="[bold blue]Integral homology",
            border_style="blue",
        )
    )
