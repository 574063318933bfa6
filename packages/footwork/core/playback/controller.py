"""Playback controller - pull-based run state layered on the timeline sampler.

The controller never sleeps or schedules; a presentation loop calls
``poll()`` once per frame and the controller answers from its clock.
Operations called in a state where they make no sense are no-ops.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from footwork.core.planning.models import Plan, Segment
from footwork.core.playback.models import PlaybackFrame, PlaybackStatus
from footwork.core.timeline.sampler import progress_ratio, sample_at, timeline_duration_ms

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
SegmentListener = Callable[[int, Segment], None]


def monotonic_ms() -> float:
    """Default clock: monotonic milliseconds."""
    return time.perf_counter() * 1000.0


class PlaybackController:
    """Tracks wall-clock progress through one plan.

    Listeners registered with ``subscribe`` are called with
    ``(index, segment)`` when a fresh run starts and whenever the active
    segment changes while running; renderers use this to swap the
    coaching cues on screen.

    Example:
        >>> controller = PlaybackController(plan, hold_ms=200)
        >>> controller.start()
        >>> frame = controller.poll()
        >>> frame.sample.position
    """

    def __init__(
        self,
        plan: Plan | None = None,
        *,
        reaction_ms: float | None = None,
        hold_ms: float = 0.0,
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock or monotonic_ms
        self._listeners: list[SegmentListener] = []

        self._plan: Plan | None = None
        self._reaction_ms = 0.0
        self._hold_ms = max(0.0, float(hold_ms))
        self._reset()

        if plan is not None:
            self.load(plan, reaction_ms=reaction_ms)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def plan(self) -> Plan | None:
        return self._plan

    @property
    def status(self) -> PlaybackStatus:
        return self._status

    @property
    def reaction_ms(self) -> float:
        return self._reaction_ms

    @property
    def hold_ms(self) -> float:
        return self._hold_ms

    @property
    def active_segment_index(self) -> int:
        return self._active_index

    @property
    def total_ms(self) -> float:
        return timeline_duration_ms(self._plan, self._reaction_ms, self._hold_ms)

    @property
    def elapsed_ms(self) -> float:
        """Elapsed timeline time; frozen while paused, pinned to the end once completed."""
        if self._status is PlaybackStatus.IDLE:
            return 0.0
        if self._status is PlaybackStatus.COMPLETED:
            return self.total_ms
        now = self._paused_at if self._status is PlaybackStatus.PAUSED else self._clock()
        return max(0.0, now - self._started_at - self._paused_total)

    def _reset(self) -> None:
        self._status = PlaybackStatus.IDLE
        self._started_at = 0.0
        self._paused_at = 0.0
        self._paused_total = 0.0
        self._active_index = 0

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: SegmentListener) -> Callable[[], None]:
        """Register a segment-change listener; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, index: int) -> None:
        if self._plan is None:
            return
        segment = self._plan.segments[index]
        logger.debug(f"Active segment -> {index} ({segment.primitive_id})")
        for listener in list(self._listeners):
            listener(index, segment)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def load(
        self,
        plan: Plan,
        *,
        reaction_ms: float | None = None,
        hold_ms: float | None = None,
    ) -> None:
        """Replace the current plan and return to idle.

        Args:
            plan: New plan.
            reaction_ms: Reaction window; defaults to the plan's own.
            hold_ms: Contact hold window; keeps the current value if None.
        """
        self._plan = plan
        if reaction_ms is None:
            reaction_ms = plan.reaction_ms
        self._reaction_ms = max(0.0, float(reaction_ms))
        if hold_ms is not None:
            self._hold_ms = max(0.0, float(hold_ms))
        self._reset()
        logger.debug(
            f"Loaded plan {plan.meta.landing_id}/{plan.meta.sequence_id} "
            f"(total {self.total_ms:.0f}ms)"
        )

    def set_hold(self, hold_ms: float) -> None:
        """Change the contact hold window; takes effect from the next poll."""
        self._hold_ms = max(0.0, float(hold_ms))

    def start(self) -> None:
        """Start from idle, resume from paused, restart from completed."""
        if self._plan is None:
            logger.debug("start() ignored: no plan loaded")
            return

        if self._status is PlaybackStatus.RUNNING:
            return

        if self._status is PlaybackStatus.COMPLETED:
            self.replay()
            return

        now = self._clock()
        if self._status is PlaybackStatus.PAUSED:
            self._paused_total += now - self._paused_at
            self._paused_at = 0.0
            self._status = PlaybackStatus.RUNNING
            logger.debug(f"Resumed at {self.elapsed_ms:.0f}ms")
            return

        self._started_at = now
        self._paused_total = 0.0
        self._active_index = 0
        self._status = PlaybackStatus.RUNNING
        logger.debug("Playback started")
        self._publish(0)

    def pause(self) -> None:
        """Freeze elapsed time; only valid while running."""
        if self._status is not PlaybackStatus.RUNNING:
            return
        self._paused_at = self._clock()
        self._status = PlaybackStatus.PAUSED
        logger.debug(f"Paused at {self.elapsed_ms:.0f}ms")

    def stop(self) -> None:
        """Return to idle and reset elapsed time and active segment."""
        self._reset()

    def replay(self) -> None:
        """Stop then start."""
        self.stop()
        self.start()

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def poll(self) -> PlaybackFrame:
        """Sample the plan at the current elapsed time.

        While running this advances with the clock, publishes segment
        changes and detects natural completion. In any other state it
        reports the frozen position without side effects.
        """
        total = self.total_ms
        was_running = self._status is PlaybackStatus.RUNNING
        elapsed = min(self.elapsed_ms, total)

        completed_now = False
        if was_running and elapsed >= total:
            self._status = PlaybackStatus.COMPLETED
            completed_now = True
            logger.debug(f"Playback completed at {total:.0f}ms")

        sample = sample_at(self._plan, elapsed, self._reaction_ms, self._hold_ms)

        changed = False
        if was_running and sample.active_segment_index != self._active_index:
            self._active_index = sample.active_segment_index
            changed = True
            self._publish(self._active_index)

        return PlaybackFrame(
            status=self._status,
            elapsed_ms=elapsed,
            total_ms=total,
            ratio=progress_ratio(elapsed, total),
            sample=sample,
            segment_changed=changed,
            completed_now=completed_now,
        )
