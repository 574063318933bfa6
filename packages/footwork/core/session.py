"""Trainer session coordinator.

The session owns everything one learner interacts with:
- Configuration (tempo, hold, drill defaults)
- The read-only catalog and the plan generator built on it
- The current plan and its playback state
- The optional drill queue with auto-advance

All state is mutated only through the public methods below, from a single
thread of control.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path
from typing import Any
from uuid import uuid4

from footwork.core.catalog import FootworkCatalog, default_catalog
from footwork.core.config.loader import load_app_config
from footwork.core.config.models import AppConfig
from footwork.core.planning.generator import PlanGenerator
from footwork.core.planning.models import Plan, Segment, Tempo
from footwork.core.playback.controller import Clock, PlaybackController, SegmentListener
from footwork.core.playback.criteria import format_criteria
from footwork.core.playback.models import PlaybackFrame, PlaybackStatus
from footwork.core.playback.queue import DrillQueue, uniform_landing_source
from footwork.core.utils.logging import get_logger


class TrainerSession:
    """Single-learner session: landing selection, tempo, playback and drills.

    Example:
        >>> session = TrainerSession()
        >>> session.select_landing("F_C")
        >>> session.play()
        >>> frame = session.poll()
    """

    def __init__(
        self,
        *,
        app_config: AppConfig | Path | str | None = None,
        catalog: FootworkCatalog | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        session_id: str | None = None,
    ):
        """Initialize session.

        Args:
            app_config: AppConfig instance, path, or None (defaults)
            catalog: Catalog to plan against (shared default if None)
            clock: Millisecond clock for playback (monotonic if None)
            rng: Random generator for drill queues (seeded from config if None)
            session_id: Optional session ID. If None, generates a new UUID.

        Raises:
            TypeError: If app_config is of the wrong type
            ValidationError: If the config file is invalid
        """
        self.app_config: AppConfig = self._resolve_config(app_config)
        self.session_id = session_id or str(uuid4())
        self.log = get_logger(__name__, session_id=self.session_id)

        self.catalog = catalog or default_catalog()
        self.generator = PlanGenerator(self.catalog)

        self.tempo: Tempo = self.app_config.tempo.to_tempo()
        self.auto_advance: bool = self.app_config.drill.auto_advance
        self.rng = rng or random.Random(self.app_config.drill.seed)

        self.landing_id: str | None = None
        self.plan: Plan | None = None
        self.queue = DrillQueue()
        self.playback = PlaybackController(hold_ms=self.app_config.playback.hold_ms, clock=clock)

        self.log.debug("Session initialized")

    @staticmethod
    def _resolve_config(value: Any) -> AppConfig:
        if value is None:
            return AppConfig()
        elif isinstance(value, (Path, str)):
            return load_app_config(Path(value))
        elif isinstance(value, AppConfig):
            return value
        else:
            raise TypeError(f"Expected AppConfig, Path, str, or None; got {type(value).__name__}")

    @classmethod
    def from_directory(cls, config_dir: Path | str = ".", **kwargs: Any) -> TrainerSession:
        """Create a session from a directory containing footwork.yaml (optional)."""
        return cls(app_config=Path(config_dir) / AppConfig.default_path(), **kwargs)

    # ------------------------------------------------------------------
    # Plan selection
    # ------------------------------------------------------------------

    @property
    def hold_ms(self) -> float:
        return self.playback.hold_ms

    def select_landing(self, landing_id: str) -> Plan:
        """Select a landing cell, regenerate the plan and reset playback to idle.

        Raises:
            PlanError: If the landing cannot be planned; the previous plan stays loaded.
        """
        play = self.app_config.play
        new_plan = self.generator.plan(
            landing_id, self.tempo, mode=play.mode, hand=play.hand, base_id=play.base_id
        )
        self.landing_id = landing_id
        self.plan = new_plan
        self.playback.load(new_plan)
        self.log.info(f"Selected {landing_id} -> {new_plan.meta.sequence_id}")
        return new_plan

    def set_tempo(
        self,
        speed_multiplier: float | None = None,
        reaction_ms: float | None = None,
    ) -> Plan | None:
        """Update tempo controls; regenerates the current plan if one is selected."""
        self.tempo = Tempo(
            speed_multiplier=(
                self.tempo.speed_multiplier if speed_multiplier is None else speed_multiplier
            ),
            reaction_ms=self.tempo.reaction_ms if reaction_ms is None else reaction_ms,
        )
        if self.landing_id is None:
            return None
        return self.select_landing(self.landing_id)

    def set_hold(self, hold_ms: float) -> None:
        self.playback.set_hold(hold_ms)

    def export_plan(self) -> dict | None:
        """Plain record of the current plan (None when nothing is selected)."""
        return self.plan.to_record() if self.plan else None

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    @property
    def status(self) -> PlaybackStatus:
        return self.playback.status

    def subscribe(self, listener: SegmentListener) -> Callable[[], None]:
        """Listen for active-segment changes (index, segment)."""
        return self.playback.subscribe(listener)

    def play(self) -> None:
        """Start or resume; picks up the queued landing when nothing is selected yet."""
        if self.plan is None and self.queue.current is not None:
            self.select_landing(self.queue.current)
        self.playback.start()

    def pause(self) -> None:
        self.playback.pause()

    def toggle(self) -> None:
        """Pause when running, otherwise play."""
        if self.playback.status is PlaybackStatus.RUNNING:
            self.pause()
        else:
            self.play()

    def stop(self) -> None:
        self.playback.stop()

    def replay(self) -> None:
        if self.plan is None:
            return
        self.playback.replay()

    def poll(self) -> PlaybackFrame:
        """Advance playback; on completion, auto-advance the drill queue if enabled.

        The returned frame samples the run that just ended, but its status is
        the session status after the poll, so an auto-advanced drill reports
        RUNNING alongside ``completed_now``.
        """
        frame = self.playback.poll()
        if frame.completed_now:
            self.log.info(f"Run completed: {self.landing_id}")
            if self.auto_advance and not self.queue.is_empty and not self.queue.is_last:
                self.advance_queue()
                self.playback.replay()
                frame = frame.model_copy(update={"status": self.playback.status})
        return frame

    def active_segment(self) -> Segment | None:
        if self.plan is None:
            return None
        return self.plan.segments[self.playback.active_segment_index]

    def current_criteria(self) -> str:
        """Coaching panel text for the active segment."""
        return format_criteria(self.active_segment())

    # ------------------------------------------------------------------
    # Drill queue
    # ------------------------------------------------------------------

    def generate_queue(self, length: int | None = None) -> tuple[str, ...]:
        """Fill the drill queue with random landings and select the first one."""
        length = self.app_config.drill.queue_length if length is None else length
        source = uniform_landing_source(self.catalog.grid.ids(), self.rng)
        targets = self.queue.generate(length, source)
        self.select_landing(targets[0])
        return targets

    def advance_queue(self) -> str | None:
        """Move to the next queued landing and select it (idle, not started)."""
        before = self.queue.current_index
        landing_id = self.queue.advance()
        if landing_id is not None and self.queue.current_index != before:
            self.select_landing(landing_id)
        return landing_id

    def clear_queue(self) -> None:
        self.queue.clear()
