"""Tests for math utilities."""

from __future__ import annotations

import pytest

from footwork.core.utils.math import clamp, clamp01, lerp, round_half_up, smoothstep


class TestClamp:
    def test_within_range(self) -> None:
        assert clamp(0.5, 0.0, 1.0) == 0.5

    def test_below_and_above(self) -> None:
        assert clamp(-1.0, 0.0, 1.0) == 0.0
        assert clamp(4.0, 0.25, 3.0) == 3.0

    def test_clamp01(self) -> None:
        assert clamp01(1.2) == 1.0
        assert clamp01(-0.01) == 0.0
        assert clamp01(0.42) == 0.42


class TestLerp:
    def test_endpoints_are_exact(self) -> None:
        """t=0 and t=1 return the inputs exactly (no float drift)."""
        assert lerp(0.52, 0.5, 0.0) == 0.52
        assert lerp(0.52, 0.5, 1.0) == 0.5

    def test_midpoint(self) -> None:
        assert lerp(0.0, 1.0, 0.5) == pytest.approx(0.5)

    def test_snap_weight(self) -> None:
        assert lerp(0.52, 0.5, 0.75) == pytest.approx(0.505)


class TestSmoothstep:
    def test_fixed_points(self) -> None:
        assert smoothstep(0.0) == 0.0
        assert smoothstep(0.5) == 0.5
        assert smoothstep(1.0) == 1.0

    def test_clamps_input(self) -> None:
        assert smoothstep(-2.0) == 0.0
        assert smoothstep(3.0) == 1.0

    def test_eases_in(self) -> None:
        """Slow start: eased value is below linear in the first half."""
        assert smoothstep(0.25) == pytest.approx(0.15625)
        assert smoothstep(0.25) < 0.25

    def test_monotonic(self) -> None:
        values = [smoothstep(i / 20) for i in range(21)]
        assert values == sorted(values)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (262.5, 263), (137.4, 137), (0.5, 1), (880.0, 880), (73.333, 73)],
    )
    def test_rounds_halves_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

    def test_differs_from_bankers_rounding(self) -> None:
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3
