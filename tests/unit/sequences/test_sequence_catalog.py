"""Tests for sequence templates, the sequence catalog and landing maps."""

from __future__ import annotations

import pytest

from footwork.core.court.reference import build_landing_grid
from footwork.core.primitives import BUILTIN_PRIMITIVES, PrimitiveLibrary
from footwork.core.sequences import (
    BUILTIN_LANDING_MAPS,
    BUILTIN_SEQUENCES,
    LandingMapTable,
    LandingSequenceMap,
    SequenceCatalog,
    SequenceTemplate,
)
from footwork.core.vocabulary import Hand, PlayMode


@pytest.fixture
def primitives() -> PrimitiveLibrary:
    return PrimitiveLibrary(BUILTIN_PRIMITIVES)


class TestSequenceCatalog:
    def test_builtin_patterns(self, primitives: PrimitiveLibrary) -> None:
        catalog = SequenceCatalog(BUILTIN_SEQUENCES, primitives=primitives)
        assert catalog.get("SEQ_FRONT_FH").pattern == ("SPLIT", "LUNGE_FH", "RECOVER")
        assert catalog.get("SEQ_FRONT_BH").pattern == ("SPLIT", "LUNGE_BH", "RECOVER")
        assert catalog.get("SEQ_REAR_FH").pattern == (
            "SPLIT",
            "CROSS_TO_REAR",
            "SCISSOR",
            "RECOVER",
        )

    def test_rejects_unknown_primitive_at_registration(
        self, primitives: PrimitiveLibrary
    ) -> None:
        catalog = SequenceCatalog(primitives=primitives)
        bad = SequenceTemplate(id="SEQ_BAD", name="Bad", pattern=("SPLIT", "HOP", "RECOVER"))
        with pytest.raises(ValueError, match="HOP"):
            catalog.register(bad)
        assert "SEQ_BAD" not in catalog

    def test_without_library_accepts_any_ids(self) -> None:
        catalog = SequenceCatalog()
        catalog.register(SequenceTemplate(id="SEQ_X", name="X", pattern=("HOP",)))
        assert catalog.has("SEQ_X")


class TestLandingMaps:
    def test_singles_right_map_covers_grid(self) -> None:
        table = LandingMapTable(BUILTIN_LANDING_MAPS)
        landing_map = table.get(PlayMode.SINGLES, Hand.RIGHT)
        assert landing_map is not None
        assert landing_map.missing(build_landing_grid().ids()) == []

    @pytest.mark.parametrize(
        ("landing_id", "sequence_id"),
        [
            ("F_L", "SEQ_FRONT_BH"),
            ("F_C", "SEQ_FRONT_FH"),
            ("F_R", "SEQ_FRONT_FH"),
            ("M_L", "SEQ_FRONT_BH"),
            ("M_C", "SEQ_FRONT_FH"),
            ("M_R", "SEQ_FRONT_FH"),
            ("R_L", "SEQ_REAR_FH"),
            ("R_C", "SEQ_REAR_FH"),
            ("R_R", "SEQ_REAR_FH"),
        ],
    )
    def test_lookup(self, landing_id: str, sequence_id: str) -> None:
        table = LandingMapTable(BUILTIN_LANDING_MAPS)
        assert table.lookup(PlayMode.SINGLES, Hand.RIGHT, landing_id) == sequence_id

    def test_unregistered_combination(self) -> None:
        table = LandingMapTable(BUILTIN_LANDING_MAPS)
        assert table.get(PlayMode.DOUBLES, Hand.RIGHT) is None
        assert table.lookup(PlayMode.SINGLES, Hand.LEFT, "F_C") is None

    def test_duplicate_and_frozen(self) -> None:
        table = LandingMapTable(BUILTIN_LANDING_MAPS)
        with pytest.raises(ValueError, match="already registered"):
            table.register(BUILTIN_LANDING_MAPS[0])

        table.freeze()
        with pytest.raises(RuntimeError, match="frozen"):
            table.register(
                LandingSequenceMap(mode=PlayMode.DOUBLES, hand=Hand.RIGHT, entries={})
            )
