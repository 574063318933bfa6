"""Fixed-rate timeline traces for renderers and exports.

A trace is the sampler evaluated on a uniform time grid, stored column-wise
as numpy arrays so a renderer can draw a whole path or step through frames
without calling back into the planner.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from footwork.core.planning.models import Plan
from footwork.core.timeline.sampler import sample_at, timeline_duration_ms
from footwork.core.utils.logging import log_performance

DEFAULT_STEP_MS = 1000.0 / 60.0


@dataclass(frozen=True)
class TimelineTrace:
    """Column-wise samples of one plan timeline.

    Attributes:
        t_ms: Sample times, strictly increasing, ending at the total duration.
        x: Figure x position per sample.
        y: Figure y position per sample.
        segment_index: Active segment per sample.
        progress: Intra-segment progress per sample.
    """

    t_ms: np.ndarray
    x: np.ndarray
    y: np.ndarray
    segment_index: np.ndarray
    progress: np.ndarray

    def __len__(self) -> int:
        return int(self.t_ms.shape[0])

    @property
    def total_ms(self) -> float:
        return float(self.t_ms[-1])

    def positions(self) -> np.ndarray:
        """(N, 2) array of x, y positions."""
        return np.column_stack([self.x, self.y])

    def segment_changes(self) -> np.ndarray:
        """Sample indices where the active segment differs from the previous sample."""
        return np.flatnonzero(np.diff(self.segment_index)) + 1


def time_grid(total_ms: float, step_ms: float = DEFAULT_STEP_MS) -> np.ndarray:
    """Uniform grid from 0 up to and including ``total_ms``.

    Args:
        total_ms: Timeline length (>= 0).
        step_ms: Grid spacing (> 0).

    Raises:
        ValueError: If step_ms <= 0.

    Example:
        >>> time_grid(100, 40).tolist()
        [0.0, 40.0, 80.0, 100.0]
    """
    if step_ms <= 0:
        raise ValueError("step_ms must be > 0")

    grid = np.arange(0.0, float(total_ms), float(step_ms), dtype=float)
    if grid.size == 0 or grid[-1] < total_ms:
        grid = np.append(grid, float(total_ms))
    return grid


@log_performance
def build_trace(
    plan: Plan,
    reaction_ms: float = 0.0,
    hold_ms: float = 0.0,
    step_ms: float = DEFAULT_STEP_MS,
) -> TimelineTrace:
    """Sample a plan's whole timeline on a uniform grid.

    Args:
        plan: Plan to trace.
        reaction_ms: Reaction delay (usually ``plan.reaction_ms``).
        hold_ms: Contact hold window.
        step_ms: Grid spacing.

    Returns:
        TimelineTrace whose last sample is the end of the timeline.
    """
    grid = time_grid(timeline_duration_ms(plan, reaction_ms, hold_ms), step_ms)
    samples = [sample_at(plan, float(t), reaction_ms, hold_ms) for t in grid]

    return TimelineTrace(
        t_ms=grid,
        x=np.array([s.position.x for s in samples], dtype=float),
        y=np.array([s.position.y for s in samples], dtype=float),
        segment_index=np.array([s.active_segment_index for s in samples], dtype=int),
        progress=np.array([s.progress for s in samples], dtype=float),
    )
