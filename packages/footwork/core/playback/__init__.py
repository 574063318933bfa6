"""Playback and drill-queue state layered on the timeline sampler."""

from footwork.core.playback.controller import (
    Clock,
    PlaybackController,
    SegmentListener,
    monotonic_ms,
)
from footwork.core.playback.criteria import criteria_lines, format_criteria
from footwork.core.playback.models import PlaybackFrame, PlaybackStatus
from footwork.core.playback.queue import DrillQueue, LandingIdSource, uniform_landing_source

__all__ = [
    "Clock",
    "DrillQueue",
    "LandingIdSource",
    "PlaybackController",
    "PlaybackFrame",
    "PlaybackStatus",
    "SegmentListener",
    "criteria_lines",
    "format_criteria",
    "monotonic_ms",
    "uniform_landing_source",
]
