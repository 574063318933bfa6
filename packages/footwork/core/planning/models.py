"""Plan models - tempo input and the time-stamped segment output."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field, model_validator

from footwork.core.court.models import Coordinate
from footwork.core.utils.math import clamp
from footwork.core.vocabulary import ContactPose, Hand, Intent, PlayMode

MIN_SPEED_MULTIPLIER = 0.25
MAX_SPEED_MULTIPLIER = 3.0
DEFAULT_REACTION_MS = 180.0


class Tempo(BaseModel):
    """Caller-supplied timing controls.

    Values are accepted as given and clamped by the generator:
    speed to [0.25, 3.0], reaction to >= 0.

    Attributes:
        speed_multiplier: >1 plays faster (shorter segments), <1 slower.
        reaction_ms: Wait before the first movement, modelling reaction
            to the opponent's shot.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    speed_multiplier: float = 1.0
    reaction_ms: float = DEFAULT_REACTION_MS

    def clamped(self) -> Tempo:
        return Tempo(
            speed_multiplier=clamp(
                float(self.speed_multiplier), MIN_SPEED_MULTIPLIER, MAX_SPEED_MULTIPLIER
            ),
            reaction_ms=max(0.0, float(self.reaction_ms)),
        )


class Segment(BaseModel):
    """One primitive materialized with absolute positions and tempo-scaled duration.

    Attributes:
        primitive_id: Source primitive id.
        name: Primitive display name.
        intent: Primitive intent.
        from_: Start position (serialized as "from").
        to: End position.
        duration_ms: Tempo-scaled duration.
        contact_pose: Body shape at the end.
        criteria: Coaching cues for this segment.
        tags: Sorted primitive tags.
        reaction_ms: Reaction delay; non-zero only on the first segment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    primitive_id: str
    name: str
    intent: Intent
    from_: Coordinate = Field(..., alias="from")
    to: Coordinate
    duration_ms: int = Field(..., gt=0)
    contact_pose: ContactPose = ContactPose.NONE
    criteria: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    reaction_ms: float = Field(default=0.0, ge=0.0)


class PlanMeta(BaseModel):
    """Resolved identifiers a plan was built from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: PlayMode
    hand: Hand
    base_id: str
    base_position: Coordinate
    landing_id: str
    sequence_id: str


class Plan(BaseModel):
    """Complete, validated output of the plan generator.

    Invariants (checked on construction):
    - at least one segment
    - segments are position-continuous: ``segments[i].to == segments[i+1].from_``
    - only the first segment carries a reaction delay
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    meta: PlanMeta
    segments: tuple[Segment, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _validate_timeline(self) -> Plan:
        for i in range(len(self.segments) - 1):
            if self.segments[i].to != self.segments[i + 1].from_:
                raise ValueError(f"Segment {i} does not end where segment {i + 1} starts")
        for i, seg in enumerate(self.segments[1:], start=1):
            if seg.reaction_ms != 0.0:
                raise ValueError(f"Only the first segment may carry reaction_ms (segment {i})")
        return self

    @property
    def reaction_ms(self) -> float:
        return self.segments[0].reaction_ms

    @property
    def movement_ms(self) -> int:
        """Sum of segment durations, excluding reaction and hold windows."""
        return sum(s.duration_ms for s in self.segments)

    def path_points(self) -> list[Coordinate]:
        """Preview polyline: every segment start, then the final end point."""
        return [s.from_ for s in self.segments] + [self.segments[-1].to]

    def contact_points(self) -> list[Coordinate]:
        """End points of contact segments."""
        return [s.to for s in self.segments if s.intent is Intent.CONTACT]

    def to_record(self) -> dict:
        """Plain JSON-compatible record (segment starts under the "from" key)."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_record(), indent=indent, ensure_ascii=False)
