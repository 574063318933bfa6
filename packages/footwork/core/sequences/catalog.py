"""Sequence catalog and landing map table."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from footwork.core.primitives.library import PrimitiveLibrary
from footwork.core.registry import KeyedCatalog
from footwork.core.sequences.models import LandingSequenceMap, SequenceTemplate
from footwork.core.vocabulary import Hand, PlayMode

logger = logging.getLogger(__name__)


class SequenceCatalog(KeyedCatalog[SequenceTemplate]):
    """Registry of sequence templates.

    When built with a primitive library, registration rejects patterns that
    reference primitives the library does not know.
    """

    kind = "sequence"

    def __init__(
        self,
        items: Iterable[SequenceTemplate] = (),
        *,
        primitives: PrimitiveLibrary | None = None,
    ) -> None:
        self._primitives = primitives
        super().__init__(items)

    def _item_id(self, item: SequenceTemplate) -> str:
        return item.id

    def _item_name(self, item: SequenceTemplate) -> str | None:
        return item.name

    def register(self, item: SequenceTemplate, *, aliases: Iterable[str] = ()) -> None:
        if self._primitives is not None:
            unknown = [pid for pid in item.pattern if pid not in self._primitives]
            if unknown:
                raise ValueError(f"Sequence {item.id} references unknown primitives: {unknown}")
        super().register(item, aliases=aliases)


class LandingMapTable:
    """Landing maps keyed by (mode, hand).

    Only combinations that were registered resolve; everything else is
    reported as unmapped by the planner.
    """

    def __init__(self, maps: Iterable[LandingSequenceMap] = ()) -> None:
        self._maps: dict[tuple[PlayMode, Hand], LandingSequenceMap] = {}
        self._frozen = False
        for m in maps:
            self.register(m)

    def register(self, landing_map: LandingSequenceMap) -> None:
        if self._frozen:
            raise RuntimeError("LandingMapTable is frozen; cannot register")

        key = (landing_map.mode, landing_map.hand)
        if key in self._maps:
            raise ValueError(
                f"Landing map already registered: {landing_map.mode.value}/{landing_map.hand.value}"
            )
        self._maps[key] = landing_map
        logger.debug(f"Registered landing map: {landing_map.mode.value}/{landing_map.hand.value}")

    def freeze(self) -> None:
        self._frozen = True

    def get(self, mode: PlayMode, hand: Hand) -> LandingSequenceMap | None:
        return self._maps.get((mode, hand))

    def lookup(self, mode: PlayMode, hand: Hand, landing_id: str) -> str | None:
        """Sequence id for a landing cell, or None when unmapped."""
        landing_map = self.get(mode, hand)
        if landing_map is None:
            return None
        return landing_map.sequence_for(landing_id)

    def combinations(self) -> list[tuple[PlayMode, Hand]]:
        return list(self._maps)

    def __len__(self) -> int:
        return len(self._maps)
