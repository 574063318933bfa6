"""Drill queue - an ordered list of landing targets for multi-trial drills."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

LandingIdSource = Callable[[], str]


def uniform_landing_source(
    landing_ids: Sequence[str],
    rng: random.Random | None = None,
) -> LandingIdSource:
    """Uniform-random selection with replacement over the given ids.

    Args:
        landing_ids: Ids to draw from (usually the nine grid cells).
        rng: Random generator; pass a seeded one for reproducible drills.

    Raises:
        ValueError: If landing_ids is empty.
    """
    if not landing_ids:
        raise ValueError("landing_ids must not be empty")

    pool = tuple(landing_ids)
    chooser = rng or random.Random()

    def draw() -> str:
        return chooser.choice(pool)

    return draw


class DrillQueue:
    """Ordered landing targets with a cursor.

    The cursor only moves forward and stops at the last entry.

    Example:
        >>> queue = DrillQueue()
        >>> queue.generate(3, lambda: "F_C")
        ('F_C', 'F_C', 'F_C')
        >>> for _ in range(3):
        ...     _ = queue.advance()
        >>> queue.current_index
        2
    """

    def __init__(self) -> None:
        self._targets: list[str] = []
        self._index = 0

    @property
    def targets(self) -> tuple[str, ...]:
        return tuple(self._targets)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current(self) -> str | None:
        """Landing id under the cursor, or None when the queue is empty."""
        if not self._targets:
            return None
        return self._targets[self._index]

    @property
    def is_empty(self) -> bool:
        return not self._targets

    @property
    def is_last(self) -> bool:
        return bool(self._targets) and self._index == len(self._targets) - 1

    def generate(self, length: int, source: LandingIdSource) -> tuple[str, ...]:
        """Replace the queue with ``length`` ids drawn from ``source``.

        Raises:
            ValueError: If length < 1.
        """
        if length < 1:
            raise ValueError(f"Queue length must be >= 1, got {length}")

        self._targets = [source() for _ in range(length)]
        self._index = 0
        logger.info(f"Generated drill queue: {' '.join(self._targets)}")
        return self.targets

    def advance(self) -> str | None:
        """Move the cursor forward one entry (clamped at the last); returns the current id."""
        if self._targets and self._index < len(self._targets) - 1:
            self._index += 1
            logger.debug(f"Queue advanced to {self._index}: {self._targets[self._index]}")
        return self.current

    def clear(self) -> None:
        self._targets = []
        self._index = 0

    def __len__(self) -> int:
        return len(self._targets)
