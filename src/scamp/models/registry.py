"""Static lookup tables shared by the mapper and the validator."""

from __future__ import annotations

from scamp.models.topology import ConnectionTypeDef, Port
from scamp.models.types import (
    ConnectionType,
    DeviceType,
    ParsedDeviceType,
    ParsedEdgeType,
    PortDirection,
    PortPosition,
)

DEFAULT_CONNECTION_TYPES: tuple[ConnectionTypeDef, ...] = (
    ConnectionTypeDef(id=ConnectionType.USB, name="USB", color="#4169e1"),
    ConnectionTypeDef(
        id=ConnectionType.THUNDERBOLT, name="Thunderbolt", color="#f4c430"
    ),
    ConnectionTypeDef(id=ConnectionType.ETHERNET, name="Ethernet", color="#32cd32"),
    ConnectionTypeDef(
        id=ConnectionType.DISPLAYPORT, name="DisplayPort", color="#9370db"
    ),
    ConnectionTypeDef(id=ConnectionType.HDMI, name="HDMI", color="#ff6347"),
)


def _port(
    port_id: str,
    label: str,
    type_: ConnectionType,
    position: PortPosition,
    direction: PortDirection,
) -> Port:
    return Port(
        id=port_id, label=label, type=type_, position=position, direction=direction
    )


_LEFT, _RIGHT = PortPosition.LEFT, PortPosition.RIGHT
_IN, _OUT, _BOTH = PortDirection.IN, PortDirection.OUT, PortDirection.BIDIRECTIONAL

DEFAULT_PORTS: dict[DeviceType, tuple[Port, ...]] = {
    DeviceType.COMPUTER: (
        _port("thunderbolt-1", "TB1", ConnectionType.THUNDERBOLT, _LEFT, _BOTH),
        _port("thunderbolt-2", "TB2", ConnectionType.THUNDERBOLT, _LEFT, _BOTH),
        _port("thunderbolt-3", "TB3", ConnectionType.THUNDERBOLT, _LEFT, _BOTH),
        _port("usb-c-1", "USB-C 1", ConnectionType.USB, _RIGHT, _BOTH),
        _port("usb-c-2", "USB-C 2", ConnectionType.USB, _RIGHT, _BOTH),
    ),
    DeviceType.HUB: (
        _port("upstream", "Upstream", ConnectionType.USB, _LEFT, _IN),
        _port("usb-1", "USB 1", ConnectionType.USB, _RIGHT, _OUT),
        _port("usb-2", "USB 2", ConnectionType.USB, _RIGHT, _OUT),
        _port("usb-3", "USB 3", ConnectionType.USB, _RIGHT, _OUT),
        _port("usb-4", "USB 4", ConnectionType.USB, _RIGHT, _OUT),
    ),
    DeviceType.DISPLAY: (
        _port(
            "upstream", "Input", ConnectionType.THUNDERBOLT, PortPosition.TOP, _IN
        ),
        _port(
            "downstream",
            "Output",
            ConnectionType.THUNDERBOLT,
            PortPosition.BOTTOM,
            _OUT,
        ),
    ),
    DeviceType.USB_DEVICE: (_port("usb", "USB", ConnectionType.USB, _LEFT, _IN),),
    DeviceType.NETWORK_DEVICE: (
        _port("usb", "USB", ConnectionType.USB, _LEFT, _IN),
        _port("ethernet", "Ethernet", ConnectionType.ETHERNET, _RIGHT, _BOTH),
    ),
    DeviceType.THUNDERBOLT_DEVICE: (
        _port("thunderbolt", "TB", ConnectionType.THUNDERBOLT, _LEFT, _BOTH),
    ),
    DeviceType.ADAPTER: (
        _port("input", "In", ConnectionType.USB, _LEFT, _IN),
        _port("output", "Out", ConnectionType.ETHERNET, _RIGHT, _OUT),
    ),
    DeviceType.OTHER: (),
}

DEVICE_TYPE_MAP: dict[ParsedDeviceType, DeviceType] = {
    ParsedDeviceType.COMPUTER: DeviceType.COMPUTER,
    ParsedDeviceType.HUB: DeviceType.HUB,
    ParsedDeviceType.USB_DEVICE: DeviceType.USB_DEVICE,
    ParsedDeviceType.THUNDERBOLT_DEVICE: DeviceType.THUNDERBOLT_DEVICE,
    ParsedDeviceType.DISPLAY: DeviceType.DISPLAY,
    ParsedDeviceType.NETWORK_DEVICE: DeviceType.NETWORK_DEVICE,
    ParsedDeviceType.ADAPTER: DeviceType.ADAPTER,
}

CONNECTION_TYPE_MAP: dict[ParsedEdgeType, ConnectionType] = {
    ParsedEdgeType.USB: ConnectionType.USB,
    ParsedEdgeType.THUNDERBOLT: ConnectionType.THUNDERBOLT,
    ParsedEdgeType.ETHERNET: ConnectionType.ETHERNET,
    ParsedEdgeType.DISPLAYPORT: ConnectionType.DISPLAYPORT,
    ParsedEdgeType.HDMI: ConnectionType.HDMI,
}


def default_ports(device_type: DeviceType | str) -> list[Port]:
    """Return fresh copies of the default port set for a device type."""
    try:
        key = DeviceType(device_type)
    except ValueError:
        return []
    return [port.model_copy(deep=True) for port in DEFAULT_PORTS[key]]


def default_connection_types() -> list[ConnectionTypeDef]:
    return [entry.model_copy(deep=True) for entry in DEFAULT_CONNECTION_TYPES]


def map_device_type(value: ParsedDeviceType | str) -> DeviceType:
    try:
        return DEVICE_TYPE_MAP[ParsedDeviceType(value)]
    except ValueError:
        return DeviceType.OTHER


def map_connection_type(value: ParsedEdgeType | str) -> ConnectionType:
    try:
        return CONNECTION_TYPE_MAP[ParsedEdgeType(value)]
    except ValueError:
        return ConnectionType.USB
