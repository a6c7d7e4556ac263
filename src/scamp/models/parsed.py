"""Flat records produced by the profiler parser."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from scamp.models.types import ParsedDeviceType, ParsedEdgeType

ROOT_DETECTION_ID = "computer"


class ParsedDevice(BaseModel):
    model_config = {"frozen": True}

    detection_id: str
    name: str
    type: ParsedDeviceType
    metadata: dict[str, Any] = Field(default_factory=dict)
    depth: int = Field(default=0, ge=0)


class ParsedEdge(BaseModel):
    model_config = {"frozen": True}

    source: str
    target: str
    type: ParsedEdgeType


class ParseResult(BaseModel):
    devices: list[ParsedDevice] = Field(default_factory=list)
    edges: list[ParsedEdge] = Field(default_factory=list)
