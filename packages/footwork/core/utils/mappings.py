"""Read-only mapping helpers for frozen catalog models."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def freeze_mapping(value: Mapping[Any, Any]) -> Mapping[Any, Any]:
    """Copy a mapping into a read-only view, freezing nested mappings too.

    The copy detaches the result from the caller's dict, so later edits to
    the source never show through.

    Example:
        >>> frozen = freeze_mapping({"F_C": "SEQ_FRONT_FH"})
        >>> frozen["F_C"] = "SEQ_REAR_FH"
        Traceback (most recent call last):
        TypeError: 'mappingproxy' object does not support item assignment
    """
    return MappingProxyType(
        {k: freeze_mapping(v) if isinstance(v, Mapping) else v for k, v in value.items()}
    )


def thaw_mapping(value: Mapping[Any, Any]) -> dict[Any, Any]:
    """Plain nested dict copy of a (possibly frozen) mapping, for serialization."""
    return {k: thaw_mapping(v) if isinstance(v, Mapping) else v for k, v in value.items()}
