"""Shared utilities for the footwork trainer."""

from footwork.core.utils.json import read_json, write_json
from footwork.core.utils.mappings import freeze_mapping, thaw_mapping
from footwork.core.utils.math import clamp, clamp01, lerp, round_half_up, smoothstep

__all__ = [
    "clamp",
    "clamp01",
    "freeze_mapping",
    "lerp",
    "read_json",
    "round_half_up",
    "smoothstep",
    "thaw_mapping",
    "write_json",
]
