"""Motion enums - what a movement primitive is for and how it ends."""

from enum import Enum


class Intent(str, Enum):
    """Role of a primitive within a footwork response.

    A valid sequence opens with START, reaches the shuttle with at least
    one CONTACT and closes with RECOVER. TRAVEL primitives bridge the gap.

    Attributes:
        START: Split step timed to the opponent's hit.
        TRAVEL: Covering ground toward the landing zone.
        CONTACT: The hitting step (lunge, scissor kick).
        RECOVER: Returning to base.
    """

    START = "start"
    TRAVEL = "travel"
    CONTACT = "contact"
    RECOVER = "recover"

    @property
    def holds_at_end(self) -> bool:
        """Whether the figure pauses at this primitive's end point during playback."""
        return self is Intent.CONTACT


class ContactPose(str, Enum):
    """Body shape at the end of a primitive."""

    NONE = "none"
    LUNGE = "lunge"
    SCISSOR = "scissor"
