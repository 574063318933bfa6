"""Tests for the shared vocabulary enums."""

from __future__ import annotations

from footwork.core.vocabulary import ContactPose, CourtSide, CourtZone, Hand, Intent, PlayMode


def test_only_contact_holds() -> None:
    assert Intent.CONTACT.holds_at_end
    assert not any(i.holds_at_end for i in (Intent.START, Intent.TRAVEL, Intent.RECOVER))


def test_string_values() -> None:
    assert Intent("recover") is Intent.RECOVER
    assert ContactPose("scissor") is ContactPose.SCISSOR
    assert PlayMode("doubles") is PlayMode.DOUBLES
    assert Hand("left") is Hand.LEFT


def test_grid_axis_ordering() -> None:
    assert sorted(CourtZone, key=CourtZone.sort_key) == [
        CourtZone.FRONT,
        CourtZone.MID,
        CourtZone.REAR,
    ]
    assert sorted(CourtSide, key=CourtSide.sort_key) == [CourtSide.L, CourtSide.C, CourtSide.R]
