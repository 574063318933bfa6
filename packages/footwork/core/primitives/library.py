"""Primitive library - catalog of movement primitives keyed by id."""

from __future__ import annotations

from footwork.core.primitives.models import Primitive
from footwork.core.registry import KeyedCatalog
from footwork.core.vocabulary import Intent


class PrimitiveLibrary(KeyedCatalog[Primitive]):
    """Registry of movement primitives.

    Example:
        >>> library = PrimitiveLibrary(BUILTIN_PRIMITIVES)
        >>> library.get("LUNGE_FH").intent
        <Intent.CONTACT: 'contact'>
    """

    kind = "primitive"

    def _item_id(self, item: Primitive) -> str:
        return item.id

    def _item_name(self, item: Primitive) -> str | None:
        return item.name

    def intent_of(self, primitive_id: str) -> Intent | None:
        """Intent of a primitive, or None when the id is unknown."""
        if not self.has(primitive_id):
            return None
        return self.get(primitive_id).intent

    def find(self, *, intent: Intent | None = None, has_tag: str | None = None) -> list[Primitive]:
        tag_key = has_tag.lower() if has_tag else None

        out: list[Primitive] = []
        for p in self:
            if intent is not None and p.intent != intent:
                continue
            if tag_key is not None and tag_key not in {t.lower() for t in p.tags}:
                continue
            out.append(p)
        return out
