from __future__ import annotations

from .layout import calculate_layout, ring_radius
from .mapper import find_matching_port, map_to_topology
from .parser import generate_detection_id, parse_profiler_data
from .pipeline import build_topology, default_setup_name
from .profiler import ProfilerData, collect_profiler_data, run_profiler_command
from .validator import TopologyValidationError, ensure_valid, validate_topology

__all__ = [
    "ProfilerData",
    "TopologyValidationError",
    "build_topology",
    "calculate_layout",
    "collect_profiler_data",
    "default_setup_name",
    "ensure_valid",
    "find_matching_port",
    "generate_detection_id",
    "map_to_topology",
    "parse_profiler_data",
    "ring_radius",
    "run_profiler_command",
    "validate_topology",
]
