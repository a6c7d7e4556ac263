"""scamp - map connected hardware into an editable topology diagram."""

from __future__ import annotations

from importlib.metadata import version

from .config import Settings, get_settings
from .core import ProfilerData, build_topology, validate_topology
from .models import Connection, Device, ParsedDevice, ParsedEdge, Port, Topology

__all__ = [
    "Connection",
    "Device",
    "ParsedDevice",
    "ParsedEdge",
    "Port",
    "ProfilerData",
    "Settings",
    "Topology",
    "__version__",
    "build_topology",
    "get_settings",
    "validate_topology",
]

__version__ = version("scamp-scanner")
