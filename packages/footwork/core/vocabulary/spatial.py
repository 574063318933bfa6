"""Spatial vocabulary - landing grid rows and columns.

Each axis has an ordering used when listing the grid front-to-rear and
left-to-right.
"""

from enum import Enum


class CourtZone(str, Enum):
    """Depth band of a landing cell, ordered net-to-baseline.

    Attributes:
        FRONT: Between the net and the short service line.
        MID: Mid court.
        REAR: Back court, toward the baseline.
    """

    FRONT = "front"
    MID = "mid"
    REAR = "rear"

    def sort_key(self) -> int:
        """Return an integer for front-to-rear ordering."""
        return _ZONE_SORT[self]


_ZONE_SORT: dict[CourtZone, int] = {
    CourtZone.FRONT: 0,
    CourtZone.MID: 1,
    CourtZone.REAR: 2,
}


class CourtSide(str, Enum):
    """Lateral column of a landing cell, ordered left-to-right."""

    L = "L"
    C = "C"
    R = "R"

    def sort_key(self) -> int:
        """Return an integer for left-to-right ordering."""
        return _SIDE_SORT[self]


_SIDE_SORT: dict[CourtSide, int] = {
    CourtSide.L: 0,
    CourtSide.C: 1,
    CourtSide.R: 2,
}
