from __future__ import annotations

from enum import StrEnum

FILE_FORMAT_VERSION = "1.0"


class DeviceType(StrEnum):
    COMPUTER = "computer"
    HUB = "hub"
    DISPLAY = "display"
    USB_DEVICE = "usb-device"
    NETWORK_DEVICE = "network-device"
    THUNDERBOLT_DEVICE = "thunderbolt-device"
    ADAPTER = "adapter"
    OTHER = "other"


class ParsedDeviceType(StrEnum):
    """Device kinds emitted by the profiler parser."""

    COMPUTER = "computer"
    HUB = "hub"
    USB_DEVICE = "usb-device"
    THUNDERBOLT_DEVICE = "thunderbolt-device"
    DISPLAY = "display"
    NETWORK_DEVICE = "network-device"
    ADAPTER = "adapter"


class ConnectionType(StrEnum):
    USB = "usb"
    THUNDERBOLT = "thunderbolt"
    ETHERNET = "ethernet"
    DISPLAYPORT = "displayport"
    HDMI = "hdmi"


class ParsedEdgeType(StrEnum):
    """Raw link kinds emitted by the profiler parser."""

    USB = "usb"
    THUNDERBOLT = "thunderbolt"
    ETHERNET = "ethernet"
    DISPLAYPORT = "displayport"
    HDMI = "hdmi"


class Canvas(StrEnum):
    CURRENT = "current"
    TARGET = "target"


class PortPosition(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class PortDirection(StrEnum):
    IN = "in"  # target only
    OUT = "out"  # source only
    BIDIRECTIONAL = "bidirectional"
