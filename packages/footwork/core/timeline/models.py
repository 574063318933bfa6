"""Timeline sample models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from footwork.core.court.models import Coordinate


class TimelinePhase(str, Enum):
    """Where on the timeline a sample falls.

    Attributes:
        REACTION: Before movement starts; figure waits at base.
        MOVING: Interpolating along a segment.
        HOLDING: Held at a contact point during the hold window.
        FINISHED: At or past the end of the timeline.
    """

    REACTION = "reaction"
    MOVING = "moving"
    HOLDING = "holding"
    FINISHED = "finished"


class TimelineSample(BaseModel):
    """Position and segment state at one instant.

    Attributes:
        position: Interpolated figure position.
        active_segment_index: Segment the instant falls in.
        progress: Linear (un-eased) progress through that segment, [0, 1].
        phase: Timeline phase of the instant.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    position: Coordinate
    active_segment_index: int = Field(..., ge=0)
    progress: float = Field(..., ge=0.0, le=1.0)
    phase: TimelinePhase
