"""Canonical topology document models and their factories."""

from __future__ import annotations

import random
import string
import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from scamp.models.types import (
    FILE_FORMAT_VERSION,
    Canvas,
    ConnectionType,
    DeviceType,
    PortDirection,
    PortPosition,
)

_BASE36 = string.digits + string.ascii_lowercase


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Dump with the camelCase field names used on disk."""
        return self.model_dump(mode="json", by_alias=True)


class Position(_CamelModel):
    x: float = 0.0
    y: float = 0.0


class Port(_CamelModel):
    id: str
    label: str
    type: str
    position: PortPosition = PortPosition.RIGHT
    direction: PortDirection = PortDirection.BIDIRECTIONAL


class Device(_CamelModel):
    id: str
    type: DeviceType
    label: str
    detection_id: str | None = None
    position: Position = Field(default_factory=Position)
    canvas: Canvas = Canvas.CURRENT
    ports: list[Port] = Field(default_factory=list)

    def port(self, port_id: str) -> Port | None:
        return next((port for port in self.ports if port.id == port_id), None)


class Connection(_CamelModel):
    id: str
    source: str
    target: str
    source_port: str
    target_port: str
    type: str
    label: str = ""


class ConnectionTypeDef(_CamelModel):
    id: str
    name: str
    color: str = "#888888"


class Topology(_CamelModel):
    version: str = FILE_FORMAT_VERSION
    name: str
    devices: list[Device] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)
    connection_types: list[ConnectionTypeDef] = Field(default_factory=list)


def to_base36(value: int) -> str:
    digits = ""
    while value:
        value, rem = divmod(value, 36)
        digits = _BASE36[rem] + digits
    return digits or "0"


def generate_id(prefix: str) -> str:
    timestamp = to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(random.choices(_BASE36, k=5))
    return f"{prefix}-{timestamp}-{suffix}"


def create_empty_topology(name: str = "Untitled Setup") -> Topology:
    from scamp.models.registry import default_connection_types

    return Topology(name=name, connection_types=default_connection_types())


def create_device(
    type: DeviceType,
    label: str,
    position: Position | None = None,
    canvas: Canvas = Canvas.CURRENT,
    detection_id: str | None = None,
    ports: list[Port] | None = None,
) -> Device:
    """Build a device, falling back to the default port set for its type."""
    from scamp.models.registry import default_ports

    return Device(
        id=generate_id("device"),
        type=type,
        label=label,
        detection_id=detection_id,
        position=position or Position(),
        canvas=canvas,
        ports=ports if ports is not None else default_ports(type),
    )


def create_connection(
    source: str,
    target: str,
    source_port: str,
    target_port: str,
    type: str,
    label: str = "",
) -> Connection:
    return Connection(
        id=generate_id("conn"),
        source=source,
        target=target,
        source_port=source_port,
        target_port=target_port,
        type=type,
        label=label,
    )


def create_port(
    label: str,
    type: str = ConnectionType.USB,
    position: PortPosition = PortPosition.RIGHT,
    direction: PortDirection = PortDirection.BIDIRECTIONAL,
) -> Port:
    return Port(
        id=generate_id("port"),
        label=label,
        type=type,
        position=position,
        direction=direction,
    )


def create_connection_type(name: str, color: str = "#888888") -> ConnectionTypeDef:
    return ConnectionTypeDef(id=generate_id("ctype"), name=name, color=color)
