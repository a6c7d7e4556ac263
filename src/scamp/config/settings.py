from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from scamp.models.types import Canvas

from .paths import default_config_path, expand_path

CONFIG_ENV_VAR = "SCAMP_CONFIG"


class ScanningConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    profiler_command: str = "system_profiler"
    timeout: float = Field(default=60.0, gt=0)
    max_output_bytes: int = Field(default=10 * 1024 * 1024, ge=1)


class LayoutConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    ring_spacing: float = Field(default=300.0, gt=0)
    max_ring: int = Field(default=3, ge=1)


class TopologyConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    root_name: str = Field(default="Mac", min_length=1)
    canvas: Canvas = Canvas.CURRENT


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    scanning: ScanningConfig = Field(default_factory=ScanningConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    topology: TopologyConfig = Field(default_factory=TopologyConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def _toml_string(value: str) -> str:
    return json.dumps(value)


def render_settings_toml(settings: Settings) -> str:
    lines = [
        "# Scamp configuration",
        "",
        "[scanning]",
        f"profiler_command = {_toml_string(settings.scanning.profiler_command)}",
        f"timeout = {settings.scanning.timeout}",
        f"max_output_bytes = {settings.scanning.max_output_bytes}",
        "",
        "[layout]",
        f"ring_spacing = {settings.layout.ring_spacing}",
        f"max_ring = {settings.layout.max_ring}",
        "",
        "[topology]",
        f"root_name = {_toml_string(settings.topology.root_name)}",
        f"canvas = {_toml_string(settings.topology.canvas.value)}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings))
