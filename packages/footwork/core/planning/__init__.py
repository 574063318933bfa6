"""Plan generation - landing selection + tempo -> validated segment timeline."""

from footwork.core.planning.errors import (
    InvalidSequenceError,
    PlanError,
    UnknownLandingError,
    UnmappedLandingError,
)
from footwork.core.planning.generator import CONTACT_SNAP_WEIGHT, PlanGenerator, plan
from footwork.core.planning.models import (
    DEFAULT_REACTION_MS,
    MAX_SPEED_MULTIPLIER,
    MIN_SPEED_MULTIPLIER,
    Plan,
    PlanMeta,
    Segment,
    Tempo,
)
from footwork.core.planning.validator import RuleValidator, SequenceValidation

__all__ = [
    "CONTACT_SNAP_WEIGHT",
    "DEFAULT_REACTION_MS",
    "MAX_SPEED_MULTIPLIER",
    "MIN_SPEED_MULTIPLIER",
    # Errors
    "InvalidSequenceError",
    "PlanError",
    "UnknownLandingError",
    "UnmappedLandingError",
    # Generation
    "Plan",
    "PlanGenerator",
    "PlanMeta",
    "RuleValidator",
    "Segment",
    "SequenceValidation",
    "Tempo",
    "plan",
]
