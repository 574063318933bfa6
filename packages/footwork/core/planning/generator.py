"""Plan generator - landing selection + tempo -> validated segment timeline.

Resolution order:
1. landing cell and base position
2. sequence template via the (mode, hand) landing map
3. rule validation of the template pattern
4. tempo clamping
5. walk the pattern emitting absolute segments

No randomness lives here: identical inputs always produce an identical plan.
"""

from __future__ import annotations

import logging

from footwork.core.catalog import FootworkCatalog, default_catalog
from footwork.core.court.models import Coordinate, LandingCell
from footwork.core.court.reference import DEFAULT_BASE_ID
from footwork.core.planning.errors import (
    InvalidSequenceError,
    UnknownLandingError,
    UnmappedLandingError,
)
from footwork.core.planning.models import Plan, PlanMeta, Segment, Tempo
from footwork.core.planning.validator import RuleValidator
from footwork.core.primitives.models import Primitive
from footwork.core.sequences.models import SequenceTemplate
from footwork.core.utils.math import clamp01, round_half_up
from footwork.core.vocabulary import Hand, Intent, PlayMode

logger = logging.getLogger(__name__)

# Contact end points are pulled this far toward the chosen cell's center.
CONTACT_SNAP_WEIGHT = 0.75


class PlanGenerator:
    """Builds plans against a read-only catalog.

    Example:
        >>> generator = PlanGenerator(build_default_catalog())
        >>> plan = generator.plan("F_C", Tempo(speed_multiplier=1.0, reaction_ms=180))
        >>> [s.primitive_id for s in plan.segments]
        ['SPLIT', 'LUNGE_FH', 'RECOVER']
    """

    def __init__(self, catalog: FootworkCatalog | None = None) -> None:
        self.catalog = catalog or default_catalog()
        self.validator = RuleValidator(self.catalog.primitives)

    def plan(
        self,
        landing_id: str,
        tempo: Tempo | None = None,
        mode: PlayMode | str = PlayMode.SINGLES,
        hand: Hand | str = Hand.RIGHT,
        base_id: str = DEFAULT_BASE_ID,
    ) -> Plan:
        """Generate a plan for a landing cell.

        Args:
            landing_id: One of the nine grid cell ids (e.g. "F_C").
            tempo: Speed and reaction controls (defaults: 1.0×, 180 ms).
            mode: Play mode.
            hand: Dominant hand.
            base_id: Base position id within the mode (falls back to neutral).

        Returns:
            A fresh, immutable Plan.

        Raises:
            UnknownLandingError: landing_id is not a grid cell.
            UnmappedLandingError: no sequence mapped for (mode, hand, landing_id).
            InvalidSequenceError: the mapped sequence fails rule validation.
        """
        mode = PlayMode(mode)
        hand = Hand(hand)
        tempo = (tempo or Tempo()).clamped()

        base = self.catalog.bases.resolve(mode, base_id)
        cell = self.catalog.grid.get(landing_id)
        if cell is None:
            logger.warning(f"Rejected plan request: unknown landing id {landing_id!r}")
            raise UnknownLandingError(landing_id)

        sequence = self._resolve_sequence(landing_id, mode, hand)

        validation = self.validator.validate(sequence.pattern)
        if not validation.ok:
            reason = validation.reason or "rejected"
            logger.error(f"Sequence {sequence.id} failed validation: {reason}")
            raise InvalidSequenceError(sequence.id, reason)

        segments = self._build_segments(sequence, cell, base.position, tempo)

        logger.debug(
            f"Planned {landing_id} -> {sequence.id}: {len(segments)} segments, "
            f"speed={tempo.speed_multiplier:.2f}x reaction={tempo.reaction_ms:.0f}ms"
        )

        return Plan(
            meta=PlanMeta(
                mode=mode,
                hand=hand,
                base_id=base.id,
                base_position=base.position,
                landing_id=landing_id,
                sequence_id=sequence.id,
            ),
            segments=tuple(segments),
        )

    def _resolve_sequence(self, landing_id: str, mode: PlayMode, hand: Hand) -> SequenceTemplate:
        sequence_id = self.catalog.landing_maps.lookup(mode, hand, landing_id)
        if sequence_id is None or sequence_id not in self.catalog.sequences:
            logger.warning(
                f"Rejected plan request: {landing_id} unmapped for {mode.value}/{hand.value}"
            )
            raise UnmappedLandingError(landing_id, mode.value, hand.value)
        return self.catalog.sequences.get(sequence_id)

    def _build_segments(
        self,
        sequence: SequenceTemplate,
        cell: LandingCell,
        base: Coordinate,
        tempo: Tempo,
    ) -> list[Segment]:
        segments: list[Segment] = []
        cur = base

        for index, primitive_id in enumerate(sequence.pattern):
            primitive = self.catalog.primitives.get(primitive_id)
            end = self._segment_end(primitive, cur, base, cell.center)

            segments.append(
                Segment(
                    primitive_id=primitive.id,
                    name=primitive.name,
                    intent=primitive.intent,
                    from_=cur,
                    to=end,
                    duration_ms=max(
                        1, round_half_up(primitive.nominal_duration_ms / tempo.speed_multiplier)
                    ),
                    contact_pose=primitive.contact_pose,
                    criteria=primitive.criteria,
                    tags=tuple(sorted(primitive.tags)),
                    reaction_ms=tempo.reaction_ms if index == 0 else 0.0,
                )
            )
            cur = end

        return segments

    @staticmethod
    def _segment_end(
        primitive: Primitive,
        cur: Coordinate,
        base: Coordinate,
        target: Coordinate,
    ) -> Coordinate:
        """Absolute end point of a primitive started at ``cur``."""
        # Recovery always heads back to base, whatever the stored path says.
        if primitive.intent is Intent.RECOVER:
            return base

        rel = primitive.end_displacement
        x = clamp01(cur.x + rel.dx)
        y = clamp01(cur.y + rel.dy)

        if primitive.intent is Intent.CONTACT:
            x = x + (target.x - x) * CONTACT_SNAP_WEIGHT
            y = y + (target.y - y) * CONTACT_SNAP_WEIGHT

        return Coordinate(x=x, y=y)


def plan(
    landing_id: str,
    tempo: Tempo | None = None,
    mode: PlayMode | str = PlayMode.SINGLES,
    hand: Hand | str = Hand.RIGHT,
    *,
    catalog: FootworkCatalog | None = None,
) -> Plan:
    """Generate a plan against the given (or default) catalog."""
    return PlanGenerator(catalog).plan(landing_id, tempo, mode=mode, hand=hand)
