"""Primitive library - reusable movement building blocks."""

from footwork.core.primitives.builtins import BUILTIN_PRIMITIVES
from footwork.core.primitives.library import PrimitiveLibrary
from footwork.core.primitives.models import Primitive

__all__ = [
    "BUILTIN_PRIMITIVES",
    "Primitive",
    "PrimitiveLibrary",
]
