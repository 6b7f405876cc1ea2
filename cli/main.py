"""
adjgraph CLI

Command-line interface for exploring the in-memory graph container.
Provides a self-checking demo and a way to inspect small graphs given
on the command line.

Commands:
    adjgraph demo               Build the sample graph and replay its checks
    adjgraph inspect            Build a graph from --node/--edge options and describe it

Usage:
    $ adjgraph demo --directed
    $ adjgraph inspect -n a=1 -n b -n c -e a:b=ab -e b:c
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from adjgraph import __version__
from adjgraph.errors import GraphError
from adjgraph.graph import Graph, SAMPLE_KEYS, build_graph, build_sample_graph

# Initialize Typer app and Rich console
app = typer.Typer(
    name="adjgraph",
    help="adjgraph: an in-memory graph of keyed nodes and valued edges",
    add_completion=False,
)
console = Console()


@dataclass
class DemoCheck:
    """
    Outcome of one demo check.

    Attributes:
        label: What was evaluated, e.g. "nodes_connected('aaa', 'bbb')"
        expected: The value the check should produce
        actual: The value the graph produced
    """

    label: str
    expected: Any
    actual: Any

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


@app.command()
def demo(
    directed: bool = typer.Option(
        False,
        "--directed",
        "-D",
        help="Build the sample graph in directed mode",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show debug logging from the graph",
    ),
) -> None:
    """
    Build the sample graph and replay its checks.

    Each check compares what the graph returns against the expected
    result. Exits with status 1 if any check fails.
    """
    _configure_logging(verbose)

    mode = "directed" if directed else "undirected"
    console.print(f"\n[bold blue]🔗 Sample graph:[/bold blue] {mode}\n")

    graph = build_sample_graph(directed=directed)
    try:
        checks = _run_demo_checks(graph)
    except GraphError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _print_checks(checks)
    console.print()
    _print_summary(graph)

    failed = [check for check in checks if not check.passed]
    if failed:
        console.print(f"\n[bold red]✗ {len(failed)}/{len(checks)} checks failed[/bold red]")
        raise typer.Exit(1)

    console.print(f"\n[bold green]✓ {len(checks)}/{len(checks)} checks passed[/bold green]")


@app.command()
def inspect(
    nodes: Optional[list[str]] = typer.Option(
        None,
        "--node",
        "-n",
        help="Node as KEY or KEY=VALUE (repeatable)",
    ),
    edges: Optional[list[str]] = typer.Option(
        None,
        "--edge",
        "-e",
        help="Edge as KEY1:KEY2 or KEY1:KEY2=VALUE (repeatable)",
    ),
    directed: bool = typer.Option(
        False,
        "--directed",
        "-D",
        help="Build a directed graph",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show debug logging from the graph",
    ),
) -> None:
    """
    Build a graph from the command line and describe it.

    Edges naming nodes that were not given with --node are dropped,
    exactly as Graph.add_edge drops them.
    """
    _configure_logging(verbose)

    node_items = [_parse_node(spec) for spec in nodes or []]
    edge_items = [_parse_edge(spec) for spec in edges or []]

    if not node_items:
        console.print("[yellow]No nodes given.[/yellow] Use [bold]--node KEY[/bold].")
        raise typer.Exit(1)

    graph = build_graph(node_items, edge_items, directed=directed)

    dropped = len(edge_items) - sum(
        1 for key1, key2, _ in edge_items if graph.nodes_connected(key1, key2)
    )

    _print_adjacency(graph)
    console.print()
    _print_summary(graph)

    if dropped:
        console.print(
            f"\n[dim]💡 {dropped} edge(s) referenced unknown nodes and were dropped.[/dim]"
        )


# Helper functions for demo checks and option parsing

def _run_demo_checks(graph: Graph) -> list[DemoCheck]:
    """
    Run the sample scenario against a graph built by build_sample_graph.

    The graph is mutated along the way: bbb is deleted, re-added and
    rewired, then one edge is removed again.
    """
    aaa, bbb, ccc, ddd, eee, fff = SAMPLE_KEYS
    directed = graph.directed
    checks: list[DemoCheck] = []

    def check(label: str, expected: Any, probe: Callable[[], Any]) -> None:
        checks.append(DemoCheck(label=label, expected=expected, actual=probe()))

    for key1, key2, expected in [
        (aaa, bbb, True),
        (bbb, fff, not directed),
        (aaa, ccc, False),
        (ccc, ddd, False),
        (ccc, bbb, False),
        (aaa, eee, False),
        (aaa, ddd, True),
    ]:
        check(
            f"nodes_connected({key1!r}, {key2!r})",
            expected,
            lambda: graph.nodes_connected(key1, key2),
        )

    check(f"node_val({aaa!r})", {"something": "arbitrary"}, lambda: graph.node_val(aaa))
    check(f"node_val({ddd!r})", 4, lambda: graph.node_val(ddd))
    check(f"edge_val({aaa!r}, {bbb!r})", "Another Value", lambda: graph.edge_val(aaa, bbb))
    check(f"edge_val({fff!r}, {bbb!r})", None, lambda: graph.edge_val(fff, bbb))
    check(f"edge_val({aaa!r}, {ddd!r})", 242, lambda: graph.edge_val(aaa, ddd))

    graph.del_node(bbb)
    for key in (aaa, ccc, fff):
        check(
            f"del_node({bbb!r}) -> nodes_connected({key!r}, {bbb!r})",
            False,
            lambda: graph.nodes_connected(key, bbb),
        )
    check(f"get_neighbors({aaa!r})", [ddd], lambda: graph.get_neighbors(aaa))
    check(f"get_neighbors({ccc!r})", [], lambda: graph.get_neighbors(ccc))
    check("is_connected_graph()", False, graph.is_connected_graph)

    graph.add_node(bbb, ["Value", "Really", "Doesn't", "Matter"])
    for key in (aaa, fff, ccc):
        graph.add_edge(key, bbb)
    # Directed: bbb has no outgoing edges, so only aaa, ddd and bbb are reached
    check(f"rewire {bbb!r} -> is_connected_graph()", not directed, graph.is_connected_graph)

    graph.del_edge(aaa, bbb)
    check(f"del_edge({aaa!r}, {bbb!r}) -> is_connected_graph()", False, graph.is_connected_graph)

    return checks


def _parse_node(spec: str) -> tuple[str, Optional[str]]:
    """Parse KEY or KEY=VALUE."""
    key, sep, value = spec.partition("=")
    if not key:
        raise typer.BadParameter(f"Invalid node {spec!r}, expected KEY or KEY=VALUE")
    return key, value if sep else None


def _parse_edge(spec: str) -> tuple[str, str, Optional[str]]:
    """Parse KEY1:KEY2 or KEY1:KEY2=VALUE."""
    pair, sep, value = spec.partition("=")
    key1, colon, key2 = pair.partition(":")
    if not colon or not key1 or not key2:
        raise typer.BadParameter(
            f"Invalid edge {spec!r}, expected KEY1:KEY2 or KEY1:KEY2=VALUE"
        )
    return key1, key2, value if sep else None


def _configure_logging(verbose: bool) -> None:
    """Route library logging through the Rich console."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# Helper functions for output formatting

def _print_checks(checks: list[DemoCheck]) -> None:
    """Print the demo checks as a table."""
    table = Table(title="Sample Checks", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Check", style="cyan")
    table.add_column("Expected")
    table.add_column("Actual")
    table.add_column("", justify="center")

    for index, check in enumerate(checks, start=1):
        table.add_row(
            str(index),
            check.label,
            repr(check.expected),
            repr(check.actual),
            "[green]✓[/green]" if check.passed else "[red]✗[/red]",
        )

    console.print(table)


def _print_adjacency(graph: Graph) -> None:
    """Print each node with its value and neighbors."""
    table = Table(title="Adjacency", box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("Value")
    table.add_column("Neighbors")

    for key, value in graph.nodes.items():
        neighbors = graph.get_neighbors(key)
        table.add_row(
            str(key),
            "[dim]-[/dim]" if value is None else str(value),
            ", ".join(str(n) for n in neighbors) if neighbors else "[dim]-[/dim]",
        )

    console.print(table)


def _print_summary(graph: Graph) -> None:
    """Print a summary panel for a graph."""
    summary = graph.summary()

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Mode", "directed" if summary.directed else "undirected")
    table.add_row("Nodes", str(summary.node_count))
    table.add_row("Edges", str(summary.edge_count))
    table.add_row("Density", f"{summary.density:.2f}")
    table.add_row(
        "Without neighbors",
        ", ".join(str(k) for k in summary.isolated_nodes) if summary.isolated_nodes else "0",
    )

    if summary.connected:
        title = "[bold green]✓ Connected[/bold green]"
        style = "green"
    else:
        title = "[bold yellow]⚠ Not connected[/bold yellow]"
        style = "yellow"

    console.print(Panel(table, title=title, border_style=style))


# Version command
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
) -> None:
    """
    adjgraph: an in-memory graph of keyed nodes and valued edges.
    """
    if version:
        console.print(f"[bold]adjgraph[/bold] version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


if __name__ == "__main__":
    app()
