"""Tests for the keyed catalog registry."""

from __future__ import annotations

import pytest

from footwork.core.primitives import BUILTIN_PRIMITIVES, PrimitiveLibrary
from footwork.core.primitives.builtins import LUNGE_FH, SPLIT
from footwork.core.registry import ItemNotFoundError, normalize_key


def test_normalize_key() -> None:
    assert normalize_key("Split Step") == "split_step"
    assert normalize_key("  LUNGE-FH ") == "lunge_fh"


class TestKeyedCatalog:
    def test_register_and_get(self) -> None:
        library = PrimitiveLibrary()
        library.register(SPLIT)
        assert library.get("SPLIT") is SPLIT
        assert len(library) == 1

    def test_lookup_by_name_and_alias(self) -> None:
        library = PrimitiveLibrary()
        library.register(SPLIT, aliases=["ready hop"])
        assert library.get("split step") is SPLIT
        assert library.get("Ready Hop") is SPLIT

    def test_duplicate_rejected(self) -> None:
        library = PrimitiveLibrary([SPLIT])
        with pytest.raises(ValueError, match="already registered"):
            library.register(SPLIT)

    def test_frozen_rejects_register(self) -> None:
        library = PrimitiveLibrary([SPLIT])
        library.freeze()
        assert library.frozen
        with pytest.raises(RuntimeError, match="frozen"):
            library.register(LUNGE_FH)

    def test_missing_item(self) -> None:
        library = PrimitiveLibrary(BUILTIN_PRIMITIVES)
        with pytest.raises(ItemNotFoundError):
            library.get("HOP")
        with pytest.raises(KeyError):
            library.get("HOP")
        assert not library.has("HOP")
        assert "HOP" not in library

    def test_list_ids_in_registration_order(self) -> None:
        library = PrimitiveLibrary(BUILTIN_PRIMITIVES)
        assert library.list_ids() == [
            "SPLIT",
            "LUNGE_FH",
            "LUNGE_BH",
            "CHASSE",
            "CROSS_TO_REAR",
            "SCISSOR",
            "RECOVER",
        ]
        assert [p.id for p in library] == library.list_ids()
