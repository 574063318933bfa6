"""Primitive models - atomic movement building blocks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from footwork.core.court.models import Displacement
from footwork.core.vocabulary import ContactPose, Intent


class Primitive(BaseModel):
    """Reusable movement block with nominal timing and a relative path.

    Attributes:
        id: Stable identifier, e.g. "LUNGE_FH".
        name: Human-readable name.
        intent: Role within a sequence (start / travel / contact / recover).
        nominal_duration_ms: Duration at speed multiplier 1.0.
        relative_path: Polyline of displacements from the primitive's start;
            the first delta is always (0, 0) and the last one is the
            primitive's end displacement.
        contact_pose: Body shape at the end of the primitive.
        criteria: Ordered coaching cues shown while the primitive plays.
        tags: Free-form labels for search.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., pattern=r"^[A-Z][A-Z0-9_]*$")
    name: str
    intent: Intent
    nominal_duration_ms: int = Field(..., gt=0)
    relative_path: tuple[Displacement, ...] = Field(..., min_length=1)
    contact_pose: ContactPose = ContactPose.NONE
    criteria: tuple[str, ...] = ()
    tags: frozenset[str] = frozenset()

    @field_validator("relative_path")
    @classmethod
    def _path_starts_at_origin(cls, v: tuple[Displacement, ...]) -> tuple[Displacement, ...]:
        if not v[0].is_zero:
            raise ValueError("relative_path must start with a (0, 0) delta")
        return v

    @property
    def end_displacement(self) -> Displacement:
        """Net displacement of the primitive (its path's final delta)."""
        return self.relative_path[-1]
