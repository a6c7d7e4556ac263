"""Flatten system_profiler documents into parsed devices and edges.

Every subsystem is parsed independently. A missing or malformed document
only means "no devices of this kind": it is logged and skipped, and never
aborts the whole parse.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from scamp.core.profiler import (
    DISPLAYS_DATA_TYPE,
    NETWORK_DATA_TYPE,
    THUNDERBOLT_DATA_TYPE,
    USB_DATA_TYPE,
    ProfilerData,
)
from scamp.models import (
    ROOT_DETECTION_ID,
    ParsedDevice,
    ParsedDeviceType,
    ParsedEdge,
    ParsedEdgeType,
    ParseResult,
)

logger = logging.getLogger(__name__)

HUB_PLACEHOLDER_NAME = "hub_device"
THUNDERBOLT_BUS_NAME = "Thunderbolt Bus"

_NON_ID_CHARS = re.compile(r"[^a-zA-Z0-9-]")
_VIRTUAL_ADAPTER_NAME = re.compile(r"^Ethernet Adapter \(en\d+\)$")


def generate_detection_id(prefix: str, *parts: object) -> str:
    """Derive a stable id from hardware attributes; empty parts are skipped."""
    values = [str(part) for part in (prefix, *parts) if part]
    return _NON_ID_CHARS.sub("", "-".join(values)).lower()


def _text(value: object, default: str = "") -> str:
    if value is None or value == "":
        return default
    return str(value)


def _subsystem_entries(
    document: Mapping[str, Any] | None, key: str, label: str
) -> list[Any]:
    if document is None:
        logger.warning("No %s data available, skipping", label)
        return []
    entries = document.get(key) if isinstance(document, Mapping) else None
    if not isinstance(entries, list):
        logger.warning("%s data has no %s list, skipping", label, key)
        return []
    return entries


def _add_child(
    result: ParseResult,
    device: ParsedDevice,
    parent_id: str,
    edge_type: ParsedEdgeType,
) -> None:
    result.devices.append(device)
    result.edges.append(
        ParsedEdge(source=parent_id, target=device.detection_id, type=edge_type)
    )


# USB


@dataclass
class UsbNode:
    name: str
    vendor_id: str = ""
    product_id: str = ""
    location_id: str = ""
    serial_num: str | None = None
    children: list[Any] = field(default_factory=list)

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> UsbNode:
        children = item.get("_items")
        return cls(
            name=_text(item.get("_name"), "Unknown USB Device"),
            vendor_id=_text(item.get("vendor_id")),
            product_id=_text(item.get("product_id")),
            location_id=_text(item.get("location_id")),
            serial_num=item.get("serial_num"),
            children=children if isinstance(children, list) else [],
        )

    @property
    def is_hub(self) -> bool:
        return len(self.children) > 0

    @property
    def is_placeholder(self) -> bool:
        return self.name.lower() == HUB_PLACEHOLDER_NAME

    @property
    def detection_id(self) -> str:
        # location_id tells identical siblings apart
        return generate_detection_id(
            "usb", self.name, self.vendor_id, self.product_id, self.location_id
        )

    def to_parsed(self, depth: int) -> ParsedDevice:
        return ParsedDevice(
            detection_id=self.detection_id,
            name=self.name,
            type=ParsedDeviceType.HUB if self.is_hub else ParsedDeviceType.USB_DEVICE,
            metadata={
                "vendor_id": self.vendor_id,
                "product_id": self.product_id,
                "location_id": self.location_id or None,
                "serial_num": self.serial_num,
            },
            depth=depth,
        )


def _walk_usb_items(
    items: list[Any], parent_id: str, parent_depth: int, result: ParseResult
) -> None:
    for item in items:
        if not isinstance(item, Mapping):
            logger.warning("Skipping malformed USB entry under %s", parent_id)
            continue

        node = UsbNode.from_item(item)
        if node.is_placeholder:
            # Controller stub: children attach to our parent at our depth.
            logger.debug("Eliding %s placeholder under %s", node.name, parent_id)
            _walk_usb_items(node.children, parent_id, parent_depth, result)
            continue

        device = node.to_parsed(parent_depth + 1)
        _add_child(result, device, parent_id, ParsedEdgeType.USB)
        _walk_usb_items(node.children, device.detection_id, device.depth, result)


def parse_usb_devices(document: Mapping[str, Any] | None, result: ParseResult) -> None:
    for bus in _subsystem_entries(document, USB_DATA_TYPE, "USB"):
        if not isinstance(bus, Mapping):
            logger.warning("Skipping malformed USB bus entry")
            continue
        items = bus.get("_items")
        if isinstance(items, list):
            _walk_usb_items(items, ROOT_DETECTION_ID, 0, result)


# Thunderbolt


def parse_thunderbolt_devices(
    document: Mapping[str, Any] | None, result: ParseResult
) -> None:
    for controller in _subsystem_entries(
        document, THUNDERBOLT_DATA_TYPE, "Thunderbolt"
    ):
        if not isinstance(controller, Mapping):
            logger.warning("Skipping malformed Thunderbolt entry")
            continue
        name = _text(controller.get("device_name"))
        if not name or name == THUNDERBOLT_BUS_NAME:
            continue

        device = ParsedDevice(
            detection_id=generate_detection_id(
                "tb", name, controller.get("vendor_id"), controller.get("device_id")
            ),
            name=name,
            type=ParsedDeviceType.THUNDERBOLT_DEVICE,
            metadata={
                "vendor_id": controller.get("vendor_id"),
                "device_id": controller.get("device_id"),
                "port_type": controller.get("port_type"),
            },
            depth=1,
        )
        _add_child(result, device, ROOT_DETECTION_ID, ParsedEdgeType.THUNDERBOLT)


# Displays


def classify_display_connection(connector: str) -> ParsedEdgeType:
    """Map a reported connector string to a link type, hdmi first."""
    lowered = connector.lower()
    if "hdmi" in lowered:
        return ParsedEdgeType.HDMI
    if "displayport" in lowered or "dp" in lowered:
        return ParsedEdgeType.DISPLAYPORT
    if "thunderbolt" in lowered:
        return ParsedEdgeType.THUNDERBOLT
    return ParsedEdgeType.DISPLAYPORT


def parse_displays(document: Mapping[str, Any] | None, result: ParseResult) -> None:
    for group in _subsystem_entries(document, DISPLAYS_DATA_TYPE, "Display"):
        if not isinstance(group, Mapping):
            logger.warning("Skipping malformed display group")
            continue
        displays = group.get("spdisplays_ndrvs")
        if not isinstance(displays, list):
            continue

        for display in displays:
            if not isinstance(display, Mapping):
                logger.warning("Skipping malformed display entry")
                continue
            name = _text(display.get("_name"), "Unknown Display")
            display_id = display.get("_spdisplays_displayID") or display.get(
                "_spdisplays_display_id"
            )
            connector = _text(display.get("spdisplays_connection_type"))
            edge_type = classify_display_connection(connector)

            device = ParsedDevice(
                detection_id=generate_detection_id(
                    "display",
                    name,
                    display.get("_spdisplays_display-vendor-id"),
                    display.get("_spdisplays_display-product-id"),
                    display_id,
                ),
                name=name,
                type=ParsedDeviceType.DISPLAY,
                metadata={
                    "connection_type": connector,
                    "resolution": display.get("_spdisplays_resolution"),
                },
                depth=1,
            )
            _add_child(result, device, ROOT_DETECTION_ID, edge_type)


# Network


def is_interface_active(interface: Mapping[str, Any]) -> bool:
    """An interface counts as active with an IPv4 address or a live link."""
    ipv4 = interface.get("IPv4")
    if isinstance(ipv4, Mapping):
        addresses = ipv4.get("Addresses")
        if isinstance(addresses, list) and addresses:
            return True

    ethernet = interface.get("Ethernet")
    if isinstance(ethernet, Mapping):
        media = _text(ethernet.get("MediaSubType"))
        if media and media != "none":
            return True

    return False


def _is_usb_backed(flag: object) -> bool:
    if isinstance(flag, bool):
        return flag
    return isinstance(flag, str) and "yes" in flag.lower()


def _include_interface(name: str, kind: str, interface_name: str) -> bool:
    if "bridge" in name.lower() or "bridge" in interface_name.lower():
        return False
    if _VIRTUAL_ADAPTER_NAME.match(name):
        return False
    lowered = name.lower()
    return "ethernet" in kind.lower() or "ethernet" in lowered or "lan" in lowered


def parse_network_devices(
    document: Mapping[str, Any] | None, result: ParseResult
) -> None:
    for interface in _subsystem_entries(document, NETWORK_DATA_TYPE, "Network"):
        if not isinstance(interface, Mapping):
            logger.warning("Skipping malformed network entry")
            continue
        interface_name = _text(interface.get("interface"))
        name = _text(interface.get("_name"), interface_name or "Unknown Network Device")
        kind = _text(interface.get("type"))

        if not _include_interface(name, kind, interface_name):
            logger.debug("Ignoring network interface %s", name)
            continue
        if not is_interface_active(interface):
            logger.debug("Ignoring inactive network interface %s", name)
            continue

        usb_backed = _is_usb_backed(interface.get("USB"))
        device = ParsedDevice(
            detection_id=generate_detection_id(
                "net",
                name,
                interface.get("vendor_id"),
                interface.get("product_id"),
                interface_name,
            ),
            name=name,
            type=(
                ParsedDeviceType.ADAPTER
                if usb_backed
                else ParsedDeviceType.NETWORK_DEVICE
            ),
            metadata={
                "interface": interface_name,
                "type": kind,
                "hardware": interface.get("hardware"),
            },
            depth=1,
        )
        _add_child(
            result,
            device,
            ROOT_DETECTION_ID,
            ParsedEdgeType.USB if usb_backed else ParsedEdgeType.ETHERNET,
        )


def root_device(name: str = "Mac") -> ParsedDevice:
    return ParsedDevice(
        detection_id=ROOT_DETECTION_ID,
        name=name,
        type=ParsedDeviceType.COMPUTER,
        depth=0,
    )


def parse_profiler_data(data: ProfilerData, root_name: str = "Mac") -> ParseResult:
    """Parse all subsystems into one flat result rooted at the computer."""
    result = ParseResult(devices=[root_device(root_name)])

    parse_usb_devices(data.usb, result)
    parse_thunderbolt_devices(data.thunderbolt, result)
    parse_displays(data.displays, result)
    parse_network_devices(data.network, result)

    logger.info(
        "Found %d devices (%d connections)",
        len(result.devices) - 1,
        len(result.edges),
    )
    return result
