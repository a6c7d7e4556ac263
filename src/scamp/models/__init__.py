"""Data models for Scamp."""

from scamp.models.parsed import (
    ROOT_DETECTION_ID,
    ParsedDevice,
    ParsedEdge,
    ParseResult,
)
from scamp.models.registry import (
    CONNECTION_TYPE_MAP,
    DEFAULT_CONNECTION_TYPES,
    DEFAULT_PORTS,
    DEVICE_TYPE_MAP,
    default_connection_types,
    default_ports,
    map_connection_type,
    map_device_type,
)
from scamp.models.topology import (
    Connection,
    ConnectionTypeDef,
    Device,
    Port,
    Position,
    Topology,
    create_connection,
    create_connection_type,
    create_device,
    create_empty_topology,
    create_port,
)
from scamp.models.types import (
    FILE_FORMAT_VERSION,
    Canvas,
    ConnectionType,
    DeviceType,
    ParsedDeviceType,
    ParsedEdgeType,
    PortDirection,
    PortPosition,
)
from scamp.models.validation import ValidationResult

__all__ = [
    "CONNECTION_TYPE_MAP",
    "DEFAULT_CONNECTION_TYPES",
    "DEFAULT_PORTS",
    "DEVICE_TYPE_MAP",
    "FILE_FORMAT_VERSION",
    "ROOT_DETECTION_ID",
    "Canvas",
    "Connection",
    "ConnectionType",
    "ConnectionTypeDef",
    "Device",
    "DeviceType",
    "ParseResult",
    "ParsedDevice",
    "ParsedDeviceType",
    "ParsedEdge",
    "ParsedEdgeType",
    "Port",
    "PortDirection",
    "PortPosition",
    "Position",
    "Topology",
    "ValidationResult",
    "create_connection",
    "create_connection_type",
    "create_device",
    "create_empty_topology",
    "create_port",
    "default_connection_types",
    "default_ports",
    "map_connection_type",
    "map_device_type",
]
