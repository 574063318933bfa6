"""Plan generation errors.

All of these are deterministic given the catalog and inputs; callers must
surface them rather than retry.
"""

from __future__ import annotations


class PlanError(Exception):
    """Base class for plan generation failures."""


class UnknownLandingError(PlanError):
    """Landing id is not one of the nine grid cells."""

    def __init__(self, landing_id: str) -> None:
        self.landing_id = landing_id
        super().__init__(f"Unknown landing id: {landing_id}")


class UnmappedLandingError(PlanError):
    """Valid landing cell with no sequence for the requested mode/hand."""

    def __init__(self, landing_id: str, mode: str, hand: str) -> None:
        self.landing_id = landing_id
        self.mode = mode
        self.hand = hand
        super().__init__(f"No sequence mapped for landing id {landing_id} ({mode}/{hand})")


class InvalidSequenceError(PlanError):
    """Sequence template failed rule validation (a catalog authoring defect)."""

    def __init__(self, sequence_id: str, reason: str) -> None:
        self.sequence_id = sequence_id
        self.reason = reason
        super().__init__(f"Invalid sequence {sequence_id}: {reason}")
