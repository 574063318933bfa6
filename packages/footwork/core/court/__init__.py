"""Spatial reference model - court lines, landing grid and base positions."""

from footwork.core.court.models import (
    BasePosition,
    Coordinate,
    CourtBoundaries,
    CourtSpec,
    Displacement,
    LandingCell,
)
from footwork.core.court.reference import (
    COURT_SPEC,
    DEFAULT_BASE_ID,
    SINGLES_NEUTRAL_BASE,
    BaseTable,
    LandingGrid,
    build_base_table,
    build_landing_grid,
)

__all__ = [
    "COURT_SPEC",
    "DEFAULT_BASE_ID",
    "SINGLES_NEUTRAL_BASE",
    "BasePosition",
    "BaseTable",
    "Coordinate",
    "CourtBoundaries",
    "CourtSpec",
    "Displacement",
    "LandingCell",
    "LandingGrid",
    "build_base_table",
    "build_landing_grid",
]
