"""Map parsed devices and edges onto the canonical topology document."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from scamp.models import (
    Canvas,
    Device,
    DeviceType,
    ParseResult,
    Port,
    Position,
    Topology,
    create_connection,
    create_device,
    create_empty_topology,
    map_connection_type,
    map_device_type,
)

logger = logging.getLogger(__name__)

UPSTREAM_PORT_ID = "upstream"


def _is_upstream(port: Port) -> bool:
    return port.id == UPSTREAM_PORT_ID or "upstream" in port.label.lower()


def find_matching_port(
    device: Device, connection_type: str, is_source: bool
) -> str | None:
    """Pick the port an edge should attach to, or ``None`` if there is none.

    Hubs take incoming links on their upstream port and hand out downstream
    ports for outgoing ones. Everything else prefers a port of the same type
    and falls back to its first port.
    """
    if not device.ports:
        return None

    first = device.ports[0]

    if device.type == DeviceType.HUB:
        if not is_source:
            upstream = next((p for p in device.ports if _is_upstream(p)), first)
            return upstream.id

        downstream = [p for p in device.ports if not _is_upstream(p)]
        matching = next((p for p in downstream if p.type == connection_type), None)
        if matching is not None:
            return matching.id
        return downstream[0].id if downstream else first.id

    matching = next((p for p in device.ports if p.type == connection_type), None)
    return matching.id if matching is not None else first.id


def map_to_topology(
    parsed: ParseResult,
    positions: Mapping[str, Position],
    name: str,
    canvas: Canvas = Canvas.CURRENT,
) -> Topology:
    """Build a topology document; unresolvable edges are dropped with a warning."""
    topology = create_empty_topology(name)
    devices_by_detection: dict[str, Device] = {}

    for parsed_device in parsed.devices:
        position = positions.get(parsed_device.detection_id)
        device = create_device(
            type=map_device_type(parsed_device.type),
            label=parsed_device.name,
            position=position.model_copy() if position else Position(),
            canvas=canvas,
            detection_id=parsed_device.detection_id,
        )
        devices_by_detection[parsed_device.detection_id] = device
        topology.devices.append(device)

    for edge in parsed.edges:
        source = devices_by_detection.get(edge.source)
        target = devices_by_detection.get(edge.target)
        if source is None or target is None:
            logger.warning(
                "Could not create connection between %s and %s",
                edge.source,
                edge.target,
            )
            continue

        connection_type = map_connection_type(edge.type)
        source_port = find_matching_port(source, connection_type, is_source=True)
        target_port = find_matching_port(target, connection_type, is_source=False)
        if source_port is None or target_port is None:
            logger.warning(
                "Could not find ports for connection between %s and %s",
                source.label,
                target.label,
            )
            continue

        topology.connections.append(
            create_connection(
                source=source.id,
                target=target.id,
                source_port=source_port,
                target_port=target_port,
                type=connection_type,
            )
        )

    logger.debug(
        "Mapped %d devices and %d of %d connections",
        len(topology.devices),
        len(topology.connections),
        len(parsed.edges),
    )
    return topology
