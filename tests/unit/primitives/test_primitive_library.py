"""Tests for primitives and the primitive library."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from footwork.core.court.models import Displacement
from footwork.core.primitives import BUILTIN_PRIMITIVES, Primitive, PrimitiveLibrary
from footwork.core.vocabulary import ContactPose, Intent


@pytest.fixture
def library() -> PrimitiveLibrary:
    return PrimitiveLibrary(BUILTIN_PRIMITIVES)


class TestPrimitive:
    def test_path_must_start_at_origin(self) -> None:
        with pytest.raises(ValidationError, match="start with a"):
            Primitive(
                id="HOP",
                name="Hop",
                intent=Intent.TRAVEL,
                nominal_duration_ms=100,
                relative_path=(Displacement(dx=0.1, dy=0.0),),
            )

    def test_duration_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Primitive(
                id="HOP",
                name="Hop",
                intent=Intent.TRAVEL,
                nominal_duration_ms=0,
                relative_path=(Displacement(),),
            )

    def test_end_displacement_is_last_delta(self, library: PrimitiveLibrary) -> None:
        cross = library.get("CROSS_TO_REAR")
        assert cross.end_displacement == Displacement(dx=0.18, dy=0.28)


class TestBuiltinPrimitives:
    @pytest.mark.parametrize(
        ("primitive_id", "intent", "duration", "pose"),
        [
            ("SPLIT", Intent.START, 220, ContactPose.NONE),
            ("LUNGE_FH", Intent.CONTACT, 420, ContactPose.LUNGE),
            ("LUNGE_BH", Intent.CONTACT, 440, ContactPose.LUNGE),
            ("CHASSE", Intent.TRAVEL, 360, ContactPose.NONE),
            ("CROSS_TO_REAR", Intent.TRAVEL, 520, ContactPose.NONE),
            ("SCISSOR", Intent.CONTACT, 460, ContactPose.SCISSOR),
            ("RECOVER", Intent.RECOVER, 520, ContactPose.NONE),
        ],
    )
    def test_builtin_data(
        self,
        library: PrimitiveLibrary,
        primitive_id: str,
        intent: Intent,
        duration: int,
        pose: ContactPose,
    ) -> None:
        p = library.get(primitive_id)
        assert p.intent is intent
        assert p.nominal_duration_ms == duration
        assert p.contact_pose is pose
        assert p.criteria

    def test_intent_of(self, library: PrimitiveLibrary) -> None:
        assert library.intent_of("SCISSOR") is Intent.CONTACT
        assert library.intent_of("NOPE") is None

    def test_find_by_intent(self, library: PrimitiveLibrary) -> None:
        contacts = [p.id for p in library.find(intent=Intent.CONTACT)]
        assert contacts == ["LUNGE_FH", "LUNGE_BH", "SCISSOR"]

    def test_find_by_tag(self, library: PrimitiveLibrary) -> None:
        rear = [p.id for p in library.find(has_tag="REAR")]
        assert rear == ["CROSS_TO_REAR", "SCISSOR"]
