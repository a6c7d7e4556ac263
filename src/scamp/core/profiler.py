"""Acquisition of raw system_profiler documents."""

from __future__ import annotations

import json
import logging
import subprocess
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any

from scamp.config import ScanningConfig

logger = logging.getLogger(__name__)

USB_DATA_TYPE = "SPUSBDataType"
THUNDERBOLT_DATA_TYPE = "SPThunderboltDataType"
DISPLAYS_DATA_TYPE = "SPDisplaysDataType"
NETWORK_DATA_TYPE = "SPNetworkDataType"

_CHUNK_SIZE = 64 * 1024

SUBSYSTEM_FILES = {
    "usb": "usb.json",
    "thunderbolt": "thunderbolt.json",
    "displays": "displays.json",
    "network": "network.json",
}

Document = dict[str, Any]


@dataclass
class ProfilerData:
    """One optional document per subsystem; ``None`` means unavailable."""

    usb: Document | None = None
    thunderbolt: Document | None = None
    displays: Document | None = None
    network: Document | None = None


def _decode_document(raw: str | bytes, source: str) -> Document | None:
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Invalid JSON from %s: %s", source, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Unexpected document from %s: not a JSON object", source)
        return None
    return data


def _read_capped(stream: IO[bytes], limit: int) -> bytes | None:
    """Read ``stream`` to EOF, giving up as soon as more than ``limit`` bytes arrive."""
    chunks: list[bytes] = []
    size = 0
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            return b"".join(chunks)
        size += len(chunk)
        if size > limit:
            return None
        chunks.append(chunk)


def run_profiler_command(data_type: str, config: ScanningConfig) -> Document | None:
    """Run ``system_profiler <data_type> -json`` and return the parsed document.

    Output is read incrementally and the process is killed once it exceeds
    ``config.max_output_bytes`` or runs longer than ``config.timeout``.
    """
    command = [config.profiler_command, data_type, "-json"]
    label = f"{config.profiler_command} {data_type}"
    logger.debug("Running %s", " ".join(command))
    try:
        process = subprocess.Popen(
            command, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL
        )
    except OSError as exc:
        logger.warning("Failed to run %s: %s", label, exc)
        return None

    timed_out = threading.Event()

    def _expire() -> None:
        timed_out.set()
        process.kill()

    timer = threading.Timer(config.timeout, _expire)
    timer.start()
    try:
        with process:
            assert process.stdout is not None
            output = _read_capped(process.stdout, config.max_output_bytes)
            if output is None:
                process.kill()
            returncode = process.wait()
    finally:
        timer.cancel()

    if output is None:
        logger.warning(
            "Output of %s exceeds %d bytes, skipping", label, config.max_output_bytes
        )
        return None
    if timed_out.is_set():
        logger.warning(
            "Failed to run %s: timed out after %s seconds", label, config.timeout
        )
        return None
    if returncode != 0:
        logger.warning("Failed to run %s: exit status %d", label, returncode)
        return None

    return _decode_document(output, data_type)


def load_profiler_file(path: Path) -> Document | None:
    if not path.exists():
        return None
    try:
        raw = path.read_bytes()
    except OSError as exc:
        logger.warning("Failed to load %s: %s", path, exc)
        return None
    return _decode_document(raw, str(path))


def collect_profiler_data(
    config: ScanningConfig, from_dir: Path | None = None
) -> ProfilerData:
    """Gather all four subsystem documents, live or from saved files."""
    if from_dir is not None:
        logger.info("Loading device data from %s", from_dir)
        return ProfilerData(
            **{
                key: load_profiler_file(from_dir / filename)
                for key, filename in SUBSYSTEM_FILES.items()
            }
        )

    logger.info("Scanning devices with %s", config.profiler_command)
    return ProfilerData(
        usb=run_profiler_command(USB_DATA_TYPE, config),
        thunderbolt=run_profiler_command(THUNDERBOLT_DATA_TYPE, config),
        displays=run_profiler_command(DISPLAYS_DATA_TYPE, config),
        network=run_profiler_command(NETWORK_DATA_TYPE, config),
    )
