"""Structural validation of topology documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from scamp.models import (
    Canvas,
    ConnectionType,
    DeviceType,
    Topology,
    ValidationResult,
)

_DEVICE_TYPES = {member.value for member in DeviceType}
_CANVASES = {member.value for member in Canvas}


class TopologyValidationError(ValueError):
    """Raised when a topology document fails validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Topology validation failed: " + "; ".join(errors))


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _non_empty_string(value: object) -> bool:
    return isinstance(value, str) and value != ""


def _one_of(value: object, allowed: set[str]) -> bool:
    return isinstance(value, str) and value in allowed


def _connection_type_ids(document: Mapping[str, Any], errors: list[str]) -> set[str]:
    valid = {member.value for member in ConnectionType}
    custom = document.get("connectionTypes")
    if custom is None:
        return valid
    if not isinstance(custom, list):
        errors.append("connectionTypes must be an array")
        return valid
    for entry in custom:
        if isinstance(entry, Mapping) and _non_empty_string(entry.get("id")):
            valid.add(entry["id"])
    return valid


def _validate_ports(
    device: Mapping[str, Any], ref: object, type_ids: set[str], errors: list[str]
) -> set[str]:
    ports = device.get("ports")
    if ports is None:
        return set()
    if not isinstance(ports, list):
        errors.append(f"Device {ref} has invalid ports")
        return set()

    port_ids: set[str] = set()
    for index, port in enumerate(ports):
        if not isinstance(port, Mapping) or not _non_empty_string(port.get("id")):
            errors.append(f"Device {ref} port at index {index} missing id")
            continue
        port_id = port["id"]
        if port_id in port_ids:
            errors.append(f"Device {ref} has duplicate port id: {port_id}")
        port_ids.add(port_id)
        if not _one_of(port.get("type"), type_ids):
            errors.append(
                f"Device {ref} port {port_id} has invalid type: {port.get('type')}"
            )
    return port_ids


def _validate_devices(
    devices: list[Any], type_ids: set[str], errors: list[str]
) -> dict[str, set[str]]:
    ports_by_device: dict[str, set[str]] = {}

    for index, device in enumerate(devices):
        if not isinstance(device, Mapping):
            errors.append(f"Device at index {index} is not an object")
            continue

        device_id = device.get("id")
        ref = device_id or index
        if not _non_empty_string(device_id):
            errors.append(f"Device at index {index} missing id")
            device_id = None
        elif device_id in ports_by_device:
            errors.append(f"Duplicate device id: {device_id}")
            device_id = None

        if not _one_of(device.get("type"), _DEVICE_TYPES):
            errors.append(f"Device {ref} has invalid type: {device.get('type')}")
        if not _non_empty_string(device.get("label")):
            errors.append(f"Device {ref} missing or invalid label")

        position = device.get("position")
        if not (
            isinstance(position, Mapping)
            and _is_number(position.get("x"))
            and _is_number(position.get("y"))
        ):
            errors.append(f"Device {ref} has invalid position")
        if not _one_of(device.get("canvas"), _CANVASES):
            errors.append(f"Device {ref} has invalid canvas: {device.get('canvas')}")

        port_ids = _validate_ports(device, ref, type_ids, errors)
        if device_id is not None:
            ports_by_device[device_id] = port_ids

    return ports_by_device


def _validate_connections(
    connections: list[Any],
    ports_by_device: dict[str, set[str]],
    type_ids: set[str],
    errors: list[str],
) -> None:
    for index, connection in enumerate(connections):
        if not isinstance(connection, Mapping):
            errors.append(f"Connection at index {index} is not an object")
            continue

        ref = connection.get("id") or index
        if not _non_empty_string(connection.get("id")):
            errors.append(f"Connection at index {index} missing id")
        if not _one_of(connection.get("type"), type_ids):
            errors.append(
                f"Connection {ref} has invalid type: {connection.get('type')}"
            )

        for end, port_key in (("source", "sourcePort"), ("target", "targetPort")):
            device_id = connection.get(end)
            known = _one_of(device_id, set(ports_by_device))
            if not known:
                errors.append(
                    f"Connection {ref} references invalid {end} device: {device_id}"
                )

            port_id = connection.get(port_key)
            if not _non_empty_string(port_id):
                errors.append(f"Connection {ref} missing or invalid {port_key}")
            elif known and port_id not in ports_by_device[device_id]:
                errors.append(
                    f"Connection {ref} {port_key} {port_id} not found on "
                    f"device {device_id}"
                )


def validate_topology(
    document: Topology | Mapping[str, Any] | None,
) -> ValidationResult:
    """Check a topology document, returning every structural error found."""
    if document is None:
        return ValidationResult(valid=False, errors=["Topology is null or undefined"])
    if isinstance(document, Topology):
        document = document.to_document()
    if not isinstance(document, Mapping):
        return ValidationResult(valid=False, errors=["Topology must be an object"])

    errors: list[str] = []

    if not document.get("version"):
        errors.append("Missing version field")
    if not _non_empty_string(document.get("name")):
        errors.append("Missing or invalid name field")

    devices = document.get("devices")
    if not isinstance(devices, list):
        errors.append("Missing or invalid devices array")
        return ValidationResult(valid=False, errors=errors)
    connections = document.get("connections")
    if not isinstance(connections, list):
        errors.append("Missing or invalid connections array")
        return ValidationResult(valid=False, errors=errors)

    type_ids = _connection_type_ids(document, errors)
    ports_by_device = _validate_devices(devices, type_ids, errors)
    _validate_connections(connections, ports_by_device, type_ids, errors)

    return ValidationResult(valid=not errors, errors=errors)


def ensure_valid(document: Topology | Mapping[str, Any]) -> None:
    result = validate_topology(document)
    if not result.valid:
        raise TopologyValidationError(result.errors)
