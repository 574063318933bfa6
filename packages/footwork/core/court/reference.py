"""Static spatial reference: court lines, landing grid and base positions.

Everything here is immutable and built once; planners and samplers receive
these objects by reference.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator, model_validator

from footwork.core.court.models import (
    BasePosition,
    Coordinate,
    CourtBoundaries,
    CourtSpec,
    LandingCell,
)
from footwork.core.utils.mappings import freeze_mapping, thaw_mapping
from footwork.core.vocabulary import CourtSide, CourtZone, PlayMode

logger = logging.getLogger(__name__)

DEFAULT_BASE_ID = "neutral"


class LandingGrid(BaseModel):
    """The nine landing cells, exhaustive over zone × side.

    Example:
        >>> grid = build_landing_grid()
        >>> grid.get("F_C").center
        Coordinate(x=0.5, y=0.3)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    cells: tuple[LandingCell, ...]

    @model_validator(mode="after")
    def _validate_exhaustive(self) -> LandingGrid:
        ids = [c.id for c in self.cells]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate landing cell ids: {sorted(ids)}")

        slots = {(c.zone, c.side) for c in self.cells}
        expected = {(z, s) for z in CourtZone for s in CourtSide}
        if slots != expected or len(self.cells) != len(expected):
            missing = sorted(f"{z.value}/{s.value}" for z, s in expected - slots)
            raise ValueError(
                f"Landing grid must cover every zone/side exactly once; missing {missing}"
            )
        return self

    def get(self, cell_id: str) -> LandingCell | None:
        """Lookup a cell by id; None when the id is not on the grid."""
        for cell in self.cells:
            if cell.id == cell_id:
                return cell
        return None

    def has(self, cell_id: str) -> bool:
        return self.get(cell_id) is not None

    def ids(self) -> list[str]:
        """Cell ids ordered front-to-rear, left-to-right."""
        ordered = sorted(self.cells, key=lambda c: (c.zone.sort_key(), c.side.sort_key()))
        return [c.id for c in ordered]

    def cells_in_zone(self, zone: CourtZone) -> list[LandingCell]:
        return sorted(
            (c for c in self.cells if c.zone == zone),
            key=lambda c: c.side.sort_key(),
        )


class BaseTable(BaseModel):
    """Base positions keyed by play mode and base id.

    Lookups never fail: unknown ids and modes without their own entry fall
    back to the singles neutral base.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    bases: Mapping[PlayMode, Mapping[str, BasePosition]]

    @field_validator("bases")
    @classmethod
    def _freeze_bases(
        cls, v: Mapping[PlayMode, Mapping[str, BasePosition]]
    ) -> Mapping[PlayMode, Mapping[str, BasePosition]]:
        return freeze_mapping(v)

    @field_serializer("bases")
    def _serialize_bases(self, v: Mapping[PlayMode, Mapping[str, BasePosition]]) -> dict:
        return thaw_mapping(v)

    @model_validator(mode="after")
    def _validate_fallback(self) -> BaseTable:
        if DEFAULT_BASE_ID not in self.bases.get(PlayMode.SINGLES, {}):
            raise ValueError("BaseTable requires a singles neutral base")
        return self

    @property
    def fallback(self) -> BasePosition:
        return self.bases[PlayMode.SINGLES][DEFAULT_BASE_ID]

    def resolve(self, mode: PlayMode, base_id: str = DEFAULT_BASE_ID) -> BasePosition:
        """Resolve a base position with fallback to the singles neutral base."""
        by_id = self.bases.get(mode)
        if by_id is None:
            logger.debug(f"No bases for mode {mode.value}; using singles neutral")
            return self.fallback

        base = by_id.get(base_id)
        if base is None:
            logger.debug(f"Unknown base {base_id!r} for {mode.value}; using neutral")
            return by_id.get(DEFAULT_BASE_ID, self.fallback)
        return base


COURT_SPEC = CourtSpec(
    boundaries={
        PlayMode.SINGLES: CourtBoundaries(left=0.12, right=0.88, top=0.08, bottom=0.92),
        PlayMode.DOUBLES: CourtBoundaries(left=0.06, right=0.94, top=0.08, bottom=0.92),
    },
    net_y=0.50,
    short_service_y=0.42,
    long_service_y_doubles=0.90,
)

# Singles neutral base sits slightly behind the geometric center.
SINGLES_NEUTRAL_BASE = BasePosition(id="BASE_S_NEUTRAL", position=Coordinate(x=0.50, y=0.58))

_COLUMNS: dict[CourtSide, tuple[float, str]] = {
    CourtSide.L: (0.25, "Left"),
    CourtSide.C: (0.50, "Center"),
    CourtSide.R: (0.75, "Right"),
}

_ROWS: dict[CourtZone, tuple[float, str]] = {
    CourtZone.FRONT: (0.30, "Front"),
    CourtZone.MID: (0.50, "Mid"),
    CourtZone.REAR: (0.75, "Rear"),
}


def build_landing_grid() -> LandingGrid:
    """Build the 3×3 singles landing grid (F_L .. R_R)."""
    cells = [
        LandingCell(
            id=f"{zone.value[0].upper()}_{side.value}",
            label=f"{row_label} {col_label}",
            center=Coordinate(x=x, y=y),
            zone=zone,
            side=side,
        )
        for zone, (y, row_label) in _ROWS.items()
        for side, (x, col_label) in _COLUMNS.items()
    ]
    return LandingGrid(cells=tuple(cells))


def build_base_table() -> BaseTable:
    return BaseTable(bases={PlayMode.SINGLES: {DEFAULT_BASE_ID: SINGLES_NEUTRAL_BASE}})
