from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from scamp.core.validator import TopologyValidationError, ensure_valid
from scamp.models import Topology, default_connection_types
from scamp.models.topology import to_base36


def default_output_name(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"topology-{to_base36(int(now.timestamp() * 1000))}.json"


def render_topology(topology: Topology) -> str:
    ensure_valid(topology)
    return json.dumps(topology.to_document(), indent=2)


def write_topology(topology: Topology, path: Path) -> None:
    content = render_topology(topology)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")


def parse_topology(text: str) -> Topology:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse JSON: {exc}") from exc

    if isinstance(data, dict) and not data.get("connectionTypes"):
        data["connectionTypes"] = [
            entry.to_document() for entry in default_connection_types()
        ]

    ensure_valid(data)
    try:
        return Topology.model_validate(data)
    except ValidationError as exc:
        raise TopologyValidationError([str(exc)]) from exc


def load_topology(path: Path) -> Topology:
    return parse_topology(path.read_text(encoding="utf-8"))
