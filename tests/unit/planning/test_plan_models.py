"""Tests for plan models and serialization."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from footwork.core.court import Coordinate
from footwork.core.planning import Plan, Segment, Tempo
from footwork.core.vocabulary import Intent


def test_tempo_defaults_and_clamping() -> None:
    assert Tempo() == Tempo(speed_multiplier=1.0, reaction_ms=180.0)
    clamped = Tempo(speed_multiplier=5.0, reaction_ms=-1.0).clamped()
    assert clamped.speed_multiplier == 3.0
    assert clamped.reaction_ms == 0.0


class TestPlanInvariants:
    def test_rejects_discontinuous_segments(self, front_plan: Plan) -> None:
        segments = list(front_plan.segments)
        segments[2] = segments[2].model_copy(update={"from_": Coordinate(x=0.1, y=0.1)})
        with pytest.raises(ValidationError, match="does not end where"):
            Plan(meta=front_plan.meta, segments=tuple(segments))

    def test_rejects_reaction_after_first_segment(self, front_plan: Plan) -> None:
        segments = list(front_plan.segments)
        segments[1] = segments[1].model_copy(update={"reaction_ms": 50.0})
        with pytest.raises(ValidationError, match="Only the first segment"):
            Plan(meta=front_plan.meta, segments=tuple(segments))

    def test_rejects_empty_plan(self, front_plan: Plan) -> None:
        with pytest.raises(ValidationError):
            Plan(meta=front_plan.meta, segments=())

    def test_segment_duration_positive(self) -> None:
        with pytest.raises(ValidationError):
            Segment(
                primitive_id="SPLIT",
                name="Split Step",
                intent=Intent.START,
                from_=Coordinate(x=0.5, y=0.5),
                to=Coordinate(x=0.5, y=0.5),
                duration_ms=0,
            )


class TestPlanViews:
    def test_path_points(self, front_plan: Plan) -> None:
        points = front_plan.path_points()
        assert len(points) == 4
        assert points[0] == points[-1] == front_plan.meta.base_position

    def test_contact_points(self, rear_plan: Plan) -> None:
        assert rear_plan.contact_points() == [rear_plan.segments[2].to]

    def test_record_uses_from_key(self, front_plan: Plan) -> None:
        record = front_plan.to_record()
        first = record["segments"][0]
        assert "from" in first
        assert "from_" not in first
        assert first["intent"] == "start"
        assert record["meta"]["mode"] == "singles"

    def test_json_round_trip(self, front_plan: Plan) -> None:
        """A record parses back into an equal plan."""
        restored = Plan.model_validate(json.loads(front_plan.to_json()))
        assert restored == front_plan
