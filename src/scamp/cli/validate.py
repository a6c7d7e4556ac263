from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from scamp.core import TopologyValidationError
from scamp.storage import load_topology


def validate(
    path: Path = typer.Argument(..., help="Topology file to check"),
) -> None:
    """Validate an existing topology file."""
    console = Console()

    try:
        topology = load_topology(path)
    except TopologyValidationError as exc:
        console.print(f"[red]✗[/red] {path} is not a valid topology:\n")
        for error in exc.errors:
            console.print(f"  [red]•[/red] {error}")
        raise typer.Exit(1) from exc
    except (OSError, ValueError) as exc:
        console.print(f"[red]✗[/red] {exc}")
        raise typer.Exit(1) from exc

    console.print(
        f"[green]✓[/green] {topology.name}: {len(topology.devices)} device(s), "
        f"{len(topology.connections)} connection(s)"
    )


def register(app: typer.Typer) -> None:
    app.command()(validate)
