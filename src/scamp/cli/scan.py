from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from scamp.core import (
    TopologyValidationError,
    build_topology,
    collect_profiler_data,
    default_setup_name,
)
from scamp.storage import default_output_name, write_topology

from .common import load_settings_or_exit

logger = logging.getLogger(__name__)


def scan(
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: topology-<timestamp>.json)",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name", "-n", help="Setup name (default: Scanned Setup <date>)"
        ),
    ] = None,
    from_dir: Annotated[
        Path | None,
        typer.Option(
            "--from-dir",
            "-f",
            help="Load usb/thunderbolt/displays/network.json from this directory",
            exists=True,
            file_okay=False,
        ),
    ] = None,
) -> None:
    """Scan connected hardware and write a topology file."""
    console = Console()
    settings = load_settings_or_exit()

    if from_dir is not None:
        console.print(f"Loading device data from {from_dir}...")
    else:
        console.print("Scanning devices...")
    data = collect_profiler_data(settings.scanning, from_dir=from_dir)

    setup_name = name or default_setup_name()
    logger.info("Creating topology %r", setup_name)
    try:
        topology = build_topology(data, setup_name, settings)
    except TopologyValidationError as exc:
        console.print("[red]✗[/red] Topology validation failed:\n")
        for error in exc.errors:
            console.print(f"  [red]•[/red] {error}")
        raise typer.Exit(1) from exc

    if len(topology.devices) <= 1:
        console.print("[yellow]⚠[/yellow] No devices found.")
        raise typer.Exit(1)

    table = Table()
    table.add_column("Device", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Detection ID")
    for device in topology.devices:
        table.add_row(device.label, device.type.value, device.detection_id or "")
    console.print(table)

    path = output or Path(default_output_name())
    try:
        write_topology(topology, path)
    except OSError as exc:
        console.print(f"[red]✗[/red] Failed to write {path}: {exc}")
        raise typer.Exit(1) from exc

    console.print(f"[green]✓[/green] Wrote {path}")
    console.print(f"Devices: {len(topology.devices)}")
    console.print(f"Connections: {len(topology.connections)}")


def register(app: typer.Typer) -> None:
    app.command()(scan)
