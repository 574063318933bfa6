"""Playback state models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from footwork.core.timeline.models import TimelineSample


class PlaybackStatus(str, Enum):
    """Lifecycle of one playback run.

    idle -> running -> {paused, completed}; paused -> running;
    any -> idle on stop, replay or a new plan.
    """

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"

    @property
    def is_active(self) -> bool:
        """Whether a run is in progress (running or paused)."""
        return self in (PlaybackStatus.RUNNING, PlaybackStatus.PAUSED)


class PlaybackFrame(BaseModel):
    """Result of one poll of the playback controller.

    Attributes:
        status: Status after this poll.
        elapsed_ms: Elapsed timeline time (pauses excluded).
        total_ms: Total timeline duration.
        ratio: elapsed / total, clamped to [0, 1].
        sample: Sampler output at ``elapsed_ms``.
        segment_changed: Active segment differs from the previous poll.
        completed_now: This poll moved the run to COMPLETED.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: PlaybackStatus
    elapsed_ms: float = Field(..., ge=0.0)
    total_ms: float = Field(..., ge=0.0)
    ratio: float = Field(..., ge=0.0, le=1.0)
    sample: TimelineSample
    segment_changed: bool = False
    completed_now: bool = False
