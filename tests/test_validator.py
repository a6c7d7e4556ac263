"""Tests for topology validation."""

from __future__ import annotations

import pytest

from scamp.core.validator import (
    TopologyValidationError,
    ensure_valid,
    validate_topology,
)
from scamp.models import (
    DeviceType,
    create_connection,
    create_connection_type,
    create_device,
    create_empty_topology,
    create_port,
)


@pytest.fixture
def topology():
    topology = create_empty_topology("Desk")
    computer = create_device(type=DeviceType.COMPUTER, label="Mac")
    mouse = create_device(type=DeviceType.USB_DEVICE, label="Mouse")
    topology.devices.extend([computer, mouse])
    topology.connections.append(
        create_connection(
            source=computer.id,
            target=mouse.id,
            source_port="usb-c-1",
            target_port="usb",
            type="usb",
        )
    )
    return topology


def test_valid_topology(topology):
    result = validate_topology(topology)
    assert result.valid is True
    assert result.errors == []


def test_none_document():
    result = validate_topology(None)
    assert result.valid is False
    assert result.errors == ["Topology is null or undefined"]


def test_missing_arrays_stop_early():
    result = validate_topology({"version": "1.0", "name": "Desk"})
    assert result.errors == ["Missing or invalid devices array"]

    result = validate_topology({"version": "1.0", "name": "Desk", "devices": []})
    assert result.errors == ["Missing or invalid connections array"]


def test_header_errors():
    result = validate_topology({"name": "", "devices": [], "connections": []})
    assert result.errors == ["Missing version field", "Missing or invalid name field"]


def test_device_errors(topology):
    document = topology.to_document()
    document["devices"].append(
        {
            "id": document["devices"][0]["id"],
            "type": "toaster",
            "label": "",
            "position": {"x": "1", "y": 2},
            "canvas": "elsewhere",
            "ports": [
                {"id": "p", "type": "usb"},
                {"id": "p", "type": "firewire"},
            ],
        }
    )

    result = validate_topology(document)

    assert result.valid is False
    device_id = document["devices"][0]["id"]
    assert f"Duplicate device id: {device_id}" in result.errors
    assert f"Device {device_id} has invalid type: toaster" in result.errors
    assert f"Device {device_id} missing or invalid label" in result.errors
    assert f"Device {device_id} has invalid position" in result.errors
    assert f"Device {device_id} has invalid canvas: elsewhere" in result.errors
    assert f"Device {device_id} has duplicate port id: p" in result.errors
    assert f"Device {device_id} port p has invalid type: firewire" in result.errors


def test_connection_errors(topology):
    document = topology.to_document()
    connection = document["connections"][0]
    connection["target"] = "device-missing"
    connection["sourcePort"] = "hdmi-9"
    connection["type"] = "firewire"

    result = validate_topology(document)
    ref = connection["id"]
    source = connection["source"]

    assert result.errors == [
        f"Connection {ref} has invalid type: firewire",
        f"Connection {ref} sourcePort hdmi-9 not found on device {source}",
        f"Connection {ref} references invalid target device: device-missing",
    ]


def test_connection_missing_ports(topology):
    document = topology.to_document()
    document["connections"][0]["targetPort"] = ""

    result = validate_topology(document)

    ref = document["connections"][0]["id"]
    assert result.errors == [f"Connection {ref} missing or invalid targetPort"]


def test_user_defined_connection_type(topology):
    custom = create_connection_type("Lightning", color="#ffffff")
    topology.connection_types.append(custom)
    topology.connections[0].type = custom.id
    port = create_port("Lightning", type=custom.id)
    topology.devices[1].ports.append(port)

    assert port.id.startswith("port-")
    assert custom.id.startswith("ctype-")
    assert validate_topology(topology).valid is True

    document = topology.to_document()
    document["connectionTypes"] = "nope"
    result = validate_topology(document)
    assert "connectionTypes must be an array" in result.errors


def test_ensure_valid_raises_with_errors():
    with pytest.raises(TopologyValidationError) as excinfo:
        ensure_valid({"version": "1.0", "name": "Desk"})

    assert excinfo.value.errors == ["Missing or invalid devices array"]
    assert isinstance(excinfo.value, ValueError)
