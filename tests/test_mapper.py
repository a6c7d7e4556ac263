"""Tests for mapping parsed results onto the topology document."""

from __future__ import annotations

import logging

import pytest

from scamp.core.layout import calculate_layout
from scamp.core.mapper import find_matching_port, map_to_topology
from scamp.core.parser import parse_profiler_data
from scamp.core.profiler import ProfilerData
from scamp.models import (
    Canvas,
    ConnectionType,
    DeviceType,
    ParsedDevice,
    ParsedDeviceType,
    ParsedEdge,
    ParsedEdgeType,
    ParseResult,
    Port,
    create_device,
    map_connection_type,
    map_device_type,
)


def _device(device_type: DeviceType, ports=None):
    return create_device(type=device_type, label=device_type.value, ports=ports)


def test_hub_target_uses_upstream_port():
    hub = _device(DeviceType.HUB)
    assert find_matching_port(hub, ConnectionType.USB, is_source=False) == "upstream"


def test_hub_target_matches_upstream_label():
    hub = _device(
        DeviceType.HUB,
        ports=[
            Port(id="a", label="Downstream", type="usb"),
            Port(id="b", label="UPSTREAM (USB-C)", type="usb"),
        ],
    )
    assert find_matching_port(hub, ConnectionType.USB, is_source=False) == "b"


def test_hub_target_without_upstream_falls_back_to_first_port():
    hub = _device(DeviceType.HUB, ports=[Port(id="a", label="Port A", type="usb")])
    assert find_matching_port(hub, ConnectionType.USB, is_source=False) == "a"


def test_hub_source_prefers_downstream_port_of_same_type():
    hub = _device(
        DeviceType.HUB,
        ports=[
            Port(id="upstream", label="Upstream", type="usb"),
            Port(id="tb", label="TB Out", type="thunderbolt"),
            Port(id="usb-1", label="USB 1", type="usb"),
        ],
    )
    assert find_matching_port(hub, ConnectionType.USB, is_source=True) == "usb-1"
    assert find_matching_port(hub, ConnectionType.HDMI, is_source=True) == "tb"


def test_hub_source_with_only_upstream_port():
    hub = _device(
        DeviceType.HUB, ports=[Port(id="upstream", label="Upstream", type="usb")]
    )
    assert find_matching_port(hub, ConnectionType.USB, is_source=True) == "upstream"


@pytest.mark.parametrize(
    ("device_type", "connection_type", "expected"),
    [
        (DeviceType.COMPUTER, ConnectionType.USB, "usb-c-1"),
        (DeviceType.COMPUTER, ConnectionType.THUNDERBOLT, "thunderbolt-1"),
        (DeviceType.COMPUTER, ConnectionType.HDMI, "thunderbolt-1"),
        (DeviceType.DISPLAY, ConnectionType.HDMI, "upstream"),
        (DeviceType.NETWORK_DEVICE, ConnectionType.ETHERNET, "ethernet"),
        (DeviceType.ADAPTER, ConnectionType.USB, "input"),
    ],
)
def test_non_hub_port_matching(device_type, connection_type, expected):
    device = _device(device_type)
    assert find_matching_port(device, connection_type, is_source=True) == expected


def test_device_without_ports_has_no_match():
    device = _device(DeviceType.OTHER)
    assert device.ports == []
    assert find_matching_port(device, ConnectionType.USB, is_source=False) is None


def test_lookup_tables_fall_back():
    assert map_connection_type("hdmi") == ConnectionType.HDMI
    assert map_connection_type("firewire") == ConnectionType.USB
    assert map_device_type("adapter") == DeviceType.ADAPTER
    assert map_device_type("toaster") == DeviceType.OTHER


def test_maps_hub_tree(hub_usb):
    parsed = parse_profiler_data(ProfilerData(usb=hub_usb))
    positions = calculate_layout(parsed.devices)

    topology = map_to_topology(parsed, positions, "Desk")

    assert topology.name == "Desk"
    assert [d.type for d in topology.devices] == [
        DeviceType.COMPUTER,
        DeviceType.HUB,
        DeviceType.USB_DEVICE,
        DeviceType.USB_DEVICE,
    ]
    assert len({d.id for d in topology.devices}) == 4
    assert all(d.id.startswith("device-") for d in topology.devices)
    assert [c.id.startswith("conn-") for c in topology.connections] == [True] * 3

    computer, hub, mouse, keyboard = topology.devices
    assert (hub.position.x, hub.position.y) == (0.0, -300.0)
    assert (keyboard.position.x, keyboard.position.y) == (0.0, 600.0)
    assert hub.detection_id == "usb-hub-v1-p1-l1"

    links = [
        (c.source, c.source_port, c.target, c.target_port, c.type)
        for c in topology.connections
    ]
    assert links == [
        (computer.id, "usb-c-1", hub.id, "upstream", "usb"),
        (hub.id, "usb-1", mouse.id, "usb", "usb"),
        (hub.id, "usb-1", keyboard.id, "usb", "usb"),
    ]


def test_missing_position_defaults_to_origin():
    parsed = ParseResult(
        devices=[
            ParsedDevice(
                detection_id="computer", name="Mac", type=ParsedDeviceType.COMPUTER
            ),
            ParsedDevice(
                detection_id="usb-mouse",
                name="Mouse",
                type=ParsedDeviceType.USB_DEVICE,
                depth=1,
            ),
        ]
    )

    topology = map_to_topology(parsed, {}, "Desk", canvas=Canvas.TARGET)

    position = topology.devices[1].position
    assert (position.x, position.y) == (0.0, 0.0)
    assert {d.canvas for d in topology.devices} == {Canvas.TARGET}


def test_unresolved_edge_is_dropped(caplog):
    parsed = ParseResult(
        devices=[
            ParsedDevice(
                detection_id="computer", name="Mac", type=ParsedDeviceType.COMPUTER
            )
        ],
        edges=[ParsedEdge(source="computer", target="ghost", type=ParsedEdgeType.USB)],
    )

    with caplog.at_level(logging.WARNING):
        topology = map_to_topology(parsed, {}, "Desk")

    assert len(topology.devices) == 1
    assert topology.connections == []
    assert "Could not create connection between computer and ghost" in caplog.text


def test_empty_topology_carries_default_connection_types(hub_usb):
    parsed = parse_profiler_data(ProfilerData(usb=hub_usb))
    topology = map_to_topology(parsed, {}, "Desk")

    assert [ct.id for ct in topology.connection_types] == [
        "usb",
        "thunderbolt",
        "ethernet",
        "displayport",
        "hdmi",
    ]
