"""Tests for the timeline sampler."""

from __future__ import annotations

import pytest

from footwork.core.court import Coordinate
from footwork.core.planning import Plan
from footwork.core.timeline import (
    TimelinePhase,
    progress_ratio,
    sample_at,
    segment_span_ms,
    timeline_duration_ms,
)

BASE = Coordinate(x=0.5, y=0.58)

# F_C timeline at 1.0x: reaction 180 | SPLIT 220 | LUNGE_FH 420 | RECOVER 520


class TestDuration:
    def test_total_without_hold(self, front_plan: Plan) -> None:
        assert timeline_duration_ms(front_plan, 180, 0) == 1340

    def test_hold_applies_to_contact_segments_only(self, front_plan: Plan) -> None:
        spans = [segment_span_ms(s, 200) for s in front_plan.segments]
        assert spans == [220, 620, 520]
        assert timeline_duration_ms(front_plan, 180, 200) == 1540

    def test_negative_inputs_treated_as_zero(self, front_plan: Plan) -> None:
        assert timeline_duration_ms(front_plan, -100, -50) == 1160

    def test_no_plan(self) -> None:
        assert timeline_duration_ms(None, 180) == 180


class TestReactionWindow:
    @pytest.mark.parametrize("t_ms", [-50.0, 0.0, 90.0, 180.0])
    def test_waits_at_base(self, front_plan: Plan, t_ms: float) -> None:
        sample = sample_at(front_plan, t_ms, 180)
        assert sample.position == BASE
        assert sample.active_segment_index == 0
        assert sample.progress == 0.0
        assert sample.phase is TimelinePhase.REACTION


class TestMovement:
    def test_segment_boundaries(self, front_plan: Plan) -> None:
        end_of_split = sample_at(front_plan, 400, 180)
        assert end_of_split.active_segment_index == 0
        assert end_of_split.progress == 1.0

        start_of_lunge = sample_at(front_plan, 401, 180)
        assert start_of_lunge.active_segment_index == 1
        assert start_of_lunge.progress == pytest.approx(1 / 420)

    def test_contact_point_reached_exactly(self, front_plan: Plan) -> None:
        sample = sample_at(front_plan, 820, 180)
        assert sample.active_segment_index == 1
        assert sample.position == front_plan.segments[1].to

    def test_eased_midpoint(self, front_plan: Plan) -> None:
        """Smoothstep is symmetric, so half time is half way."""
        sample = sample_at(front_plan, 610, 180)
        assert sample.progress == pytest.approx(0.5)
        assert sample.position.x == pytest.approx(0.5025)
        assert sample.position.y == pytest.approx(0.4475)
        assert sample.phase is TimelinePhase.MOVING

    def test_ease_in(self, front_plan: Plan) -> None:
        """A quarter of the way through in time covers less than a quarter of the distance."""
        lunge = front_plan.segments[1]
        sample = sample_at(front_plan, 400 + 105, 180)
        covered = (lunge.from_.y - sample.position.y) / (lunge.from_.y - lunge.to.y)
        assert sample.progress == pytest.approx(0.25)
        assert covered == pytest.approx(0.15625)

    def test_progress_is_linear(self, front_plan: Plan) -> None:
        assert sample_at(front_plan, 1080, 180).progress == pytest.approx(0.5)


class TestHold:
    def test_contact_held(self, front_plan: Plan) -> None:
        contact = front_plan.segments[1].to
        for t in (821, 900, 1020):
            sample = sample_at(front_plan, t, 180, 200)
            assert sample.position == contact
            assert sample.active_segment_index == 1
            assert sample.progress == 1.0
            assert sample.phase is TimelinePhase.HOLDING

    def test_recovery_starts_after_hold(self, front_plan: Plan) -> None:
        sample = sample_at(front_plan, 1021, 180, 200)
        assert sample.active_segment_index == 2
        assert sample.phase is TimelinePhase.MOVING

    def test_without_hold_recovery_starts_immediately(self, front_plan: Plan) -> None:
        assert sample_at(front_plan, 821, 180).active_segment_index == 2


class TestEnd:
    @pytest.mark.parametrize("t_ms", [1340.0, 1500.0, 1e9])
    def test_clamped_to_last_segment_end(self, front_plan: Plan, t_ms: float) -> None:
        sample = sample_at(front_plan, t_ms, 180)
        assert sample.position == BASE
        assert sample.active_segment_index == 2
        assert sample.progress == 1.0
        assert sample.phase is TimelinePhase.FINISHED

    def test_rear_plan_ends_at_base(self, rear_plan: Plan) -> None:
        total = timeline_duration_ms(rear_plan, 180, 150)
        sample = sample_at(rear_plan, total, 180, 150)
        assert sample.active_segment_index == 3
        assert sample.position == BASE


class TestNoPlan:
    def test_neutral_base(self) -> None:
        sample = sample_at(None, 500)
        assert sample.position == BASE
        assert sample.active_segment_index == 0
        assert sample.progress == 0.0

    def test_explicit_base(self) -> None:
        point = Coordinate(x=0.5, y=0.5)
        assert sample_at(None, 500, base=point).position == point


def test_sampling_is_pure(front_plan: Plan) -> None:
    """Identical inputs give identical samples, in any order."""
    times = [700.0, 100.0, 1200.0, 700.0]
    first = [sample_at(front_plan, t, 180, 100) for t in times]
    second = [sample_at(front_plan, t, 180, 100) for t in reversed(times)]
    assert first == list(reversed(second))
    assert first[0] == first[3]


def test_progress_ratio() -> None:
    assert progress_ratio(670, 1340) == pytest.approx(0.5)
    assert progress_ratio(5000, 1340) == 1.0
    assert progress_ratio(-5, 1340) == 0.0
    assert progress_ratio(10, 0) == 0.0
