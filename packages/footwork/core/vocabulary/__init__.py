"""Footwork vocabulary - controlled enums shared by catalogs, planner and playback.

Single source of truth for all enums used across the trainer.
"""

from footwork.core.vocabulary.motion import ContactPose, Intent
from footwork.core.vocabulary.play import Hand, PlayMode
from footwork.core.vocabulary.spatial import CourtSide, CourtZone

__all__ = [
    # Motion
    "ContactPose",
    "Intent",
    # Play
    "Hand",
    "PlayMode",
    # Spatial
    "CourtSide",
    "CourtZone",
]
