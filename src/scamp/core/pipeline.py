"""End-to-end transform from profiler documents to a validated topology."""

from __future__ import annotations

import logging
from datetime import date

from scamp.config import Settings
from scamp.core.layout import calculate_layout
from scamp.core.mapper import map_to_topology
from scamp.core.parser import parse_profiler_data
from scamp.core.profiler import ProfilerData
from scamp.core.validator import ensure_valid
from scamp.models import Topology

logger = logging.getLogger(__name__)


def default_setup_name(today: date | None = None) -> str:
    today = today or date.today()
    return f"Scanned Setup {today.isoformat()}"


def build_topology(
    data: ProfilerData, name: str, settings: Settings | None = None
) -> Topology:
    """Parse, lay out, map and validate.

    Raises TopologyValidationError if the assembled document is invalid.
    """
    settings = settings or Settings()

    parsed = parse_profiler_data(data, root_name=settings.topology.root_name)
    positions = calculate_layout(
        parsed.devices,
        ring_spacing=settings.layout.ring_spacing,
        max_ring=settings.layout.max_ring,
    )
    topology = map_to_topology(
        parsed, positions, name, canvas=settings.topology.canvas
    )

    dropped = len(parsed.edges) - len(topology.connections)
    if dropped:
        logger.warning("Dropped %d unresolved connection(s)", dropped)

    ensure_valid(topology)
    return topology
