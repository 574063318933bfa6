"""Timeline sampling - elapsed time -> position on a plan."""

from footwork.core.timeline.models import TimelinePhase, TimelineSample
from footwork.core.timeline.sampler import (
    progress_ratio,
    sample_at,
    segment_span_ms,
    timeline_duration_ms,
)
from footwork.core.timeline.trace import DEFAULT_STEP_MS, TimelineTrace, build_trace, time_grid

__all__ = [
    "DEFAULT_STEP_MS",
    "TimelinePhase",
    "TimelineSample",
    "TimelineTrace",
    "build_trace",
    "progress_ratio",
    "sample_at",
    "segment_span_ms",
    "time_grid",
    "timeline_duration_ms",
]
