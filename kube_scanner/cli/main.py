"""Main CLI interface using Typer."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core import DEFAULT_REGISTRY, ScanOrchestrator
from ..k8s import ClusterCLI
from ..k8s.client import DEFAULT_BINARY
from ..utils.logger import get_logger, set_log_level

# Create CLI app
app = typer.Typer(
    name="kube-scanner",
    help="Inspect pods and deployments in a namespace through the cluster CLI",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


@app.command()
def scan(
    namespace: str = typer.Argument(..., help="Namespace to scan"),
    resource_types: Optional[List[str]] = typer.Argument(
        None, help="Resource types to scan (e.g. pods deployments)"
    ),
    binary: str = typer.Option(
        DEFAULT_BINARY,
        "--binary",
        "-b",
        envvar="KUBE_SCANNER_BINARY",
        help="Cluster CLI executable to invoke",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit non-zero if any scan fails or a type is unknown"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Scan resource types in a namespace concurrently."""
    if verbose:
        set_log_level(logging.DEBUG)

    try:
        orchestrator = ScanOrchestrator(
            registry=DEFAULT_REGISTRY,
            client=ClusterCLI(binary=binary),
            console=console,
        )
        summary = orchestrator.run(namespace, resource_types or [])
    except Exception as e:
        logger.exception("Scan run failed")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if strict and not summary.all_succeeded:
        console.print(
            f"[red]{len(summary.failed)} failed, "
            f"{len(summary.unknown_types)} unknown resource types[/red]"
        )
        raise typer.Exit(1)


@app.command()
def resources():
    """List supported resource types."""
    table = Table(title="Supported Resource Types", show_header=True)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Scanner", style="white")

    for name in DEFAULT_REGISTRY.names():
        table.add_row(name, DEFAULT_REGISTRY.resolve(name).__name__)

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]kube-scanner[/bold] version {__version__}")
    console.print("Concurrent namespace inspection through the cluster CLI")


if __name__ == "__main__":
    app()
