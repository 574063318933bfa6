"""Court geometry models.

All positions live in normalized court space: x and y in [0, 1] across the
drawable extent, (0, 0) toward the far top-left and (1, 1) toward the
near bottom-right. Mapping to pixels is left to renderers.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from footwork.core.utils.mappings import freeze_mapping, thaw_mapping
from footwork.core.vocabulary import CourtSide, CourtZone, PlayMode


class Coordinate(BaseModel):
    """Point in normalized court space."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., ge=0.0, le=1.0)
    y: float = Field(..., ge=0.0, le=1.0)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Displacement(BaseModel):
    """Relative step (dx, dy) in normalized court units."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    dx: float = 0.0
    dy: float = 0.0

    @property
    def is_zero(self) -> bool:
        return self.dx == 0.0 and self.dy == 0.0


class CourtBoundaries(BaseModel):
    """Outer lines of the playing area for one play mode."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    left: float = Field(..., ge=0.0, le=1.0)
    right: float = Field(..., ge=0.0, le=1.0)
    top: float = Field(..., ge=0.0, le=1.0)
    bottom: float = Field(..., ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _validate_extent(self) -> CourtBoundaries:
        if self.left >= self.right:
            raise ValueError("left boundary must be < right boundary")
        if self.top >= self.bottom:
            raise ValueError("top boundary must be < bottom boundary")
        return self

    def contains(self, point: Coordinate) -> bool:
        """Check whether a point lies on or inside the boundaries."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom


class CourtSpec(BaseModel):
    """Static court drawing reference.

    Attributes:
        unit: Coordinate unit (always "normalized").
        boundaries: Outer lines per play mode.
        net_y: Net line.
        short_service_y: Short service line on the learner's half.
        long_service_y_doubles: Doubles long service line.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    unit: str = "normalized"
    boundaries: Mapping[PlayMode, CourtBoundaries]
    net_y: float = Field(..., ge=0.0, le=1.0)
    short_service_y: float = Field(..., ge=0.0, le=1.0)
    long_service_y_doubles: float = Field(..., ge=0.0, le=1.0)

    @field_validator("boundaries")
    @classmethod
    def _freeze_boundaries(
        cls, v: Mapping[PlayMode, CourtBoundaries]
    ) -> Mapping[PlayMode, CourtBoundaries]:
        return freeze_mapping(v)

    @field_serializer("boundaries")
    def _serialize_boundaries(self, v: Mapping[PlayMode, CourtBoundaries]) -> dict:
        return thaw_mapping(v)

    def boundaries_for(self, mode: PlayMode) -> CourtBoundaries:
        """Boundaries for a play mode, falling back to singles."""
        return self.boundaries.get(mode) or self.boundaries[PlayMode.SINGLES]


class LandingCell(BaseModel):
    """One cell of the 3×3 landing grid.

    Attributes:
        id: Stable identifier, e.g. "F_C" (zone initial + side).
        label: Human-readable name.
        center: Cell center in normalized court space.
        zone: Depth band (front / mid / rear).
        side: Lateral column (L / C / R).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., pattern=r"^[A-Z]_[A-Z]$")
    label: str
    center: Coordinate
    zone: CourtZone
    side: CourtSide


class BasePosition(BaseModel):
    """Neutral recovery point the learner starts from and returns to."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    position: Coordinate
