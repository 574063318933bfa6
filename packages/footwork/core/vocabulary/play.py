"""Play enums - game format and handedness.

Only singles / right-handed data is populated; the other members exist so
catalogs can be keyed by them without a schema change.
"""

from enum import Enum


class PlayMode(str, Enum):
    SINGLES = "singles"
    DOUBLES = "doubles"


class Hand(str, Enum):
    RIGHT = "right"
    LEFT = "left"
