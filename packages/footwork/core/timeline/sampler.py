"""Timeline sampler - elapsed time -> position on a plan.

Pure functions of their inputs: the same (plan, t, reaction, hold) always
produces the same sample, so scrubbing and replay need no state.

Timeline layout::

    |-- reaction --|-- seg 0 --|-- seg 1 (contact) --|-- hold --|-- seg 2 --|
                                                      ^ held at seg 1 "to"

Each segment occupies a span of ``duration_ms``, plus ``hold_ms`` for
contact segments.
"""

from __future__ import annotations

from footwork.core.court.models import Coordinate
from footwork.core.court.reference import SINGLES_NEUTRAL_BASE
from footwork.core.planning.models import Plan, Segment
from footwork.core.timeline.models import TimelinePhase, TimelineSample
from footwork.core.utils.math import clamp, lerp, smoothstep


def segment_span_ms(segment: Segment, hold_ms: float = 0.0) -> float:
    """Time a segment occupies on the timeline, including any contact hold."""
    hold = max(0.0, float(hold_ms)) if segment.intent.holds_at_end else 0.0
    return segment.duration_ms + hold


def timeline_duration_ms(
    plan: Plan | None,
    reaction_ms: float = 0.0,
    hold_ms: float = 0.0,
) -> float:
    """Total timeline length: reaction delay plus every segment span.

    This is the single definition of total duration; playback uses it to
    detect completion.
    """
    reaction = max(0.0, float(reaction_ms))
    if plan is None:
        return reaction
    return reaction + sum(segment_span_ms(s, hold_ms) for s in plan.segments)


def progress_ratio(t_ms: float, total_ms: float) -> float:
    """Fraction of the timeline elapsed, clamped to [0, 1]."""
    if total_ms <= 0:
        return 0.0
    return clamp(t_ms / total_ms, 0.0, 1.0)


def sample_at(
    plan: Plan | None,
    t_ms: float,
    reaction_ms: float = 0.0,
    hold_ms: float = 0.0,
    *,
    base: Coordinate | None = None,
) -> TimelineSample:
    """Sample a plan's timeline at an elapsed time.

    Out-of-range times are clamped: anything up to the reaction delay is at
    base, anything at or past the total duration is at the last segment's
    end point.

    Args:
        plan: Plan to sample, or None when no plan is loaded.
        t_ms: Elapsed time since playback start, reaction window included.
        reaction_ms: Reaction delay before movement starts.
        hold_ms: Extra time each contact segment holds its end position.
        base: Position to report before movement when no plan is loaded
            (defaults to the singles neutral base).

    Returns:
        TimelineSample with position, active segment index and progress.

    Example:
        >>> sample_at(plan, 0, reaction_ms=180).position == plan.meta.base_position
        True
    """
    reaction = max(0.0, float(reaction_ms))
    hold = max(0.0, float(hold_ms))

    if plan is None or not plan.segments:
        start = base or SINGLES_NEUTRAL_BASE.position
        return TimelineSample(
            position=start, active_segment_index=0, progress=0.0, phase=TimelinePhase.REACTION
        )

    if t_ms <= reaction:
        return TimelineSample(
            position=plan.meta.base_position,
            active_segment_index=0,
            progress=0.0,
            phase=TimelinePhase.REACTION,
        )

    if t_ms >= timeline_duration_ms(plan, reaction, hold):
        return _end_sample(plan)

    time = t_ms - reaction
    seg_start = 0.0
    for i, seg in enumerate(plan.segments):
        move_end = seg_start + seg.duration_ms
        span_end = seg_start + segment_span_ms(seg, hold)

        if time <= move_end:
            local = clamp((time - seg_start) / seg.duration_ms, 0.0, 1.0)
            return TimelineSample(
                position=_interpolate(seg, smoothstep(local)),
                active_segment_index=i,
                progress=local,
                phase=TimelinePhase.MOVING,
            )

        if time <= span_end:
            return TimelineSample(
                position=seg.to,
                active_segment_index=i,
                progress=1.0,
                phase=TimelinePhase.HOLDING,
            )

        seg_start = span_end

    # Only reachable through float accumulation at the very end.
    return _end_sample(plan)


def _end_sample(plan: Plan) -> TimelineSample:
    last_index = len(plan.segments) - 1
    return TimelineSample(
        position=plan.segments[last_index].to,
        active_segment_index=last_index,
        progress=1.0,
        phase=TimelinePhase.FINISHED,
    )


def _interpolate(segment: Segment, eased: float) -> Coordinate:
    if eased >= 1.0:
        return segment.to
    if eased <= 0.0:
        return segment.from_
    return Coordinate(
        x=lerp(segment.from_.x, segment.to.x, eased),
        y=lerp(segment.from_.y, segment.to.y, eased),
    )
