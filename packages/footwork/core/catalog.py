"""Footwork catalog - the read-only knowledge base the planner works from.

Bundles the court reference, primitive library, sequence catalog and
landing maps. Built once at startup and passed by reference; nothing in it
changes after construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache

from footwork.core.court import (
    COURT_SPEC,
    BaseTable,
    CourtSpec,
    LandingGrid,
    build_base_table,
    build_landing_grid,
)
from footwork.core.primitives import BUILTIN_PRIMITIVES, PrimitiveLibrary
from footwork.core.sequences import (
    BUILTIN_LANDING_MAPS,
    BUILTIN_SEQUENCES,
    LandingMapTable,
    SequenceCatalog,
)
from footwork.core.utils.logging import log_performance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FootworkCatalog:
    """Immutable bundle of everything the plan generator resolves against.

    Attributes:
        grid: The nine landing cells.
        bases: Base positions per play mode.
        primitives: Movement primitive library.
        sequences: Sequence templates.
        landing_maps: Landing -> sequence maps per (mode, hand).
        court: Court line reference (for renderers).
    """

    grid: LandingGrid
    bases: BaseTable
    primitives: PrimitiveLibrary
    sequences: SequenceCatalog
    landing_maps: LandingMapTable
    court: CourtSpec = field(default=COURT_SPEC)

    def __post_init__(self) -> None:
        self.primitives.freeze()
        self.sequences.freeze()
        self.landing_maps.freeze()

        grid_ids = self.grid.ids()
        for mode, hand in self.landing_maps.combinations():
            landing_map = self.landing_maps.get(mode, hand)
            if landing_map is None:
                continue
            missing = landing_map.missing(grid_ids)
            if missing:
                logger.warning(
                    f"Landing map {mode.value}/{hand.value} has no entry for {missing}"
                )
            dangling = sorted(
                {sid for sid in landing_map.entries.values() if sid not in self.sequences}
            )
            if dangling:
                logger.warning(
                    f"Landing map {mode.value}/{hand.value} targets unknown sequences {dangling}"
                )


@log_performance
def build_default_catalog() -> FootworkCatalog:
    """Build a fresh catalog from the builtin singles / right-handed data."""
    primitives = PrimitiveLibrary(BUILTIN_PRIMITIVES)
    catalog = FootworkCatalog(
        grid=build_landing_grid(),
        bases=build_base_table(),
        primitives=primitives,
        sequences=SequenceCatalog(BUILTIN_SEQUENCES, primitives=primitives),
        landing_maps=LandingMapTable(BUILTIN_LANDING_MAPS),
    )
    logger.debug(
        f"Built catalog: {len(catalog.primitives)} primitives, "
        f"{len(catalog.sequences)} sequences, {len(catalog.landing_maps)} landing maps"
    )
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> FootworkCatalog:
    """Process-wide shared default catalog."""
    return build_default_catalog()
