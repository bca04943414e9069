from __future__ import annotations

from rich.console import Console
from rich.table import Table

from wgraph.models import GraphReport


def print_terminal_summary(report: GraphReport, console: Console | None = None) -> None:
    """
    Prints a deterministic summary of a GraphReport to the terminal.
    Components and articulation points are listed in native vertex order.
    """
    console = console or Console()

    table = Table(title="Graph Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Vertices", str(report.vertices))
    table.add_row("Edges", str(report.edges))
    table.add_row("Total weight", str(report.total_weight))
    table.add_row("Connected", "yes" if report.connected else "no")
    table.add_row("Components", str(len(report.components)))
    table.add_row("Articulation points", str(len(report.articulation_points)))

    console.print(table)

    if report.source is not None:
        console.print(distance_table(report.source, report.distances))

    if not report.connected:
        console.print("[bold yellow]Graph is disconnected[/bold yellow]")
    if report.articulation_points:
        names = ", ".join(str(v) for v in report.articulation_points)
        console.print(f"[bold red]Cut vertices:[/bold red] {names}")


def distance_table(source, distances) -> Table:
    t = Table(title=f"Distances from {source}")
    t.add_column("Vertex")
    t.add_column("Distance", justify="right")
    for v, d in distances.items():
        t.add_row(str(v), "inf" if d is None else str(d))
    return t
