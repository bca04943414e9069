import logging
from pathlib import Path

import pandas as pd
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from wgraph.analysis import GraphAnalyzer
from wgraph.io.csv_reader import CSVReader
from wgraph.reports.json_report import JSONReporter
from wgraph.reports.terminal_report import distance_table, print_terminal_summary
from wgraph.topology import (
    WeightedGraph,
    articulation_points,
    connected_components,
    dijkstras,
    is_reachable,
)
from wgraph.viz import render_graph


app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Classical algorithms over an undirected weighted edge list."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(edges_csv: str) -> WeightedGraph[str]:
    csv_path = Path(edges_csv)
    if not csv_path.exists():
        raise typer.BadParameter(f"CSV file not found: {csv_path}")
    return CSVReader(str(csv_path)).read_graph()


def _check_source(graph: WeightedGraph[str], source: str) -> None:
    if source not in graph:
        raise typer.BadParameter(f"Source vertex {source!r} is not in the graph")


@app.command()
def analyze(
    edges_csv: str = typer.Argument(..., help="Edge-list CSV with u,v,weight columns"),
    source: str = typer.Option(None, "--source", help="Vertex to compute shortest-path distances from"),
    out_json: str = typer.Option(None, "--out-json", help="Output JSON report path"),
    out_png: str = typer.Option(None, "--out-png", help="Output PNG rendering path"),
):
    """Run connectivity, components, articulation points and (optionally) Dijkstra."""
    graph = _load(edges_csv)
    if source is not None:
        _check_source(graph, source)

    report = GraphAnalyzer(source=source).analyze(graph)
    print_terminal_summary(report, console=console)

    if out_json:
        JSONReporter().generate(report, out_json)
        console.print(f"[green]OK[/green] JSON report saved to: {out_json}")

    if out_png:
        render_graph(graph, out_png, title=Path(edges_csv).stem)
        console.print(f"[green]OK[/green] Graph PNG: {out_png}")


@app.command()
def distances(
    edges_csv: str = typer.Argument(..., help="Edge-list CSV with u,v,weight columns"),
    source: str = typer.Argument(..., help="Source vertex"),
    out_csv: str = typer.Option(None, "--out-csv", help="Write vertex,distance rows to this CSV"),
):
    """Single-source shortest-path distances (Dijkstra)."""
    graph = _load(edges_csv)
    _check_source(graph, source)

    dist = {v: (d if is_reachable(d) else None) for v, d in dijkstras(graph, source).items()}
    console.print(distance_table(source, dist))

    if out_csv:
        rows = [{"vertex": v, "distance": "inf" if d is None else d} for v, d in dist.items()]
        pd.DataFrame(rows, columns=["vertex", "distance"]).to_csv(out_csv, index=False)
        console.print(f"[green]OK[/green] Distances CSV: {out_csv}")


@app.command()
def components(
    edges_csv: str = typer.Argument(..., help="Edge-list CSV with u,v,weight columns"),
):
    """List connected components in seed order."""
    graph = _load(edges_csv)
    comps = connected_components(graph)

    t = Table(title=f"{len(comps)} component(s)")
    t.add_column("#", justify="right")
    t.add_column("Vertices", justify="right")
    t.add_column("Edges", justify="right")
    t.add_column("Members")
    for i, comp in enumerate(comps, start=1):
        t.add_row(
            str(i),
            str(comp.num_vertices()),
            str(comp.num_edges()),
            ", ".join(str(v) for v in comp),
        )
    console.print(t)


@app.command()
def articulation(
    edges_csv: str = typer.Argument(..., help="Edge-list CSV with u,v,weight columns"),
):
    """List articulation points (cut vertices) in native vertex order."""
    graph = _load(edges_csv)
    points = articulation_points(graph)
    if not points:
        console.print("[bold green]No articulation points[/bold green]")
        return
    for v in points:
        console.print(f"[red]CUT[/red] {v}")


if __name__ == "__main__":
    app()
