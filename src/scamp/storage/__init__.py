from __future__ import annotations

from .topology_file import (
    default_output_name,
    load_topology,
    parse_topology,
    render_topology,
    write_topology,
)

__all__ = [
    "default_output_name",
    "load_topology",
    "parse_topology",
    "render_topology",
    "write_topology",
]
