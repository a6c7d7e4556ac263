"""Radial layout: one ring per hierarchy depth around the root."""

from __future__ import annotations

import math
from collections.abc import Iterable

from scamp.models import ParsedDevice, Position

DEFAULT_RING_SPACING = 300.0
DEFAULT_MAX_RING = 3


def ring_radius(
    depth: int,
    ring_spacing: float = DEFAULT_RING_SPACING,
    max_ring: int = DEFAULT_MAX_RING,
) -> float:
    return ring_spacing * min(depth, max_ring)


def _round1(value: float) -> float:
    # half-up, matching how the editor rounds coordinates
    return math.floor(value * 10 + 0.5) / 10


def group_by_depth(
    devices: Iterable[ParsedDevice],
) -> list[tuple[int, list[ParsedDevice]]]:
    """Group devices by depth, ascending, keeping encounter order inside a group."""
    groups: dict[int, list[ParsedDevice]] = {}
    for device in devices:
        groups.setdefault(device.depth, []).append(device)
    return sorted(groups.items())


def calculate_layout(
    devices: Iterable[ParsedDevice],
    ring_spacing: float = DEFAULT_RING_SPACING,
    max_ring: int = DEFAULT_MAX_RING,
) -> dict[str, Position]:
    """Place each depth group evenly on its ring, clockwise from the top."""
    positions: dict[str, Position] = {}

    for depth, group in group_by_depth(devices):
        if depth == 0:
            for device in group:
                positions[device.detection_id] = Position(x=0.0, y=0.0)
            continue

        radius = ring_radius(depth, ring_spacing, max_ring)
        step = 2 * math.pi / len(group)
        for index, device in enumerate(group):
            angle = -math.pi / 2 + step * index
            positions[device.detection_id] = Position(
                x=_round1(radius * math.cos(angle)),
                y=_round1(radius * math.sin(angle)),
            )

    return positions
