"""Builtin primitives for singles, right-handed play."""

from __future__ import annotations

from footwork.core.court.models import Displacement
from footwork.core.primitives.models import Primitive
from footwork.core.vocabulary import ContactPose, Intent

_ORIGIN = Displacement(dx=0.0, dy=0.0)

SPLIT = Primitive(
    id="SPLIT",
    name="Split Step",
    intent=Intent.START,
    nominal_duration_ms=220,
    relative_path=(_ORIGIN, Displacement(dx=0.0, dy=0.0)),
    criteria=(
        "Both feet land together as the opponent strikes",
        "Push off straight from the landing, no pause",
        "Weight low, toes turned slightly out",
    ),
    tags=frozenset({"universal"}),
)

LUNGE_FH = Primitive(
    id="LUNGE_FH",
    name="Forehand Front Lunge",
    intent=Intent.CONTACT,
    nominal_duration_ms=420,
    relative_path=(_ORIGIN, Displacement(dx=0.02, dy=-0.22)),
    contact_pose=ContactPose.LUNGE,
    criteria=(
        "Last step brakes firmly without sliding through",
        "Upper body stays stable, no lunging forward over the knee",
        "Rebound off the front foot to start recovery after contact",
    ),
    tags=frozenset({"front", "forehand"}),
)

LUNGE_BH = Primitive(
    id="LUNGE_BH",
    name="Backhand Front Lunge",
    intent=Intent.CONTACT,
    nominal_duration_ms=440,
    relative_path=(_ORIGIN, Displacement(dx=-0.10, dy=-0.20)),
    contact_pose=ContactPose.LUNGE,
    criteria=(
        "Step across with a stable planted support foot",
        "Body slightly side-on to leave room for the backhand",
        "Push back toward base immediately after contact",
    ),
    tags=frozenset({"front", "backhand"}),
)

CHASSE = Primitive(
    id="CHASSE",
    name="Side Step / Chassé",
    intent=Intent.TRAVEL,
    nominal_duration_ms=360,
    relative_path=(_ORIGIN, Displacement(dx=0.16, dy=0.0)),
    criteria=(
        "Short, quick steps",
        "Keep the hips free to turn at any moment",
        "Used for lateral transitions through mid court",
    ),
    tags=frozenset({"mid", "travel"}),
)

CROSS_TO_REAR = Primitive(
    id="CROSS_TO_REAR",
    name="Cross-over to Rear Court",
    intent=Intent.TRAVEL,
    nominal_duration_ms=520,
    relative_path=(
        _ORIGIN,
        Displacement(dx=0.10, dy=0.14),
        Displacement(dx=0.18, dy=0.28),
    ),
    criteria=(
        "Turn the hips first, then step (no backpedalling)",
        "The cross-over step drives the body rotation",
        "Set up for the scissor kick at contact",
    ),
    tags=frozenset({"rear", "travel"}),
)

SCISSOR = Primitive(
    id="SCISSOR",
    name="Scissor Kick",
    intent=Intent.CONTACT,
    nominal_duration_ms=460,
    relative_path=(_ORIGIN, Displacement(dx=0.06, dy=0.02)),
    contact_pose=ContactPose.SCISSOR,
    criteria=(
        "Legs switch in the air at the moment of contact",
        "Land facing back toward the centre",
        "Recover straight from the landing, no freeze",
    ),
    tags=frozenset({"rear", "forehand"}),
)

# The stored path is a placeholder; the planner always aims recovery at base.
RECOVER = Primitive(
    id="RECOVER",
    name="Recover to Base",
    intent=Intent.RECOVER,
    nominal_duration_ms=520,
    relative_path=(_ORIGIN, Displacement(dx=0.0, dy=0.0)),
    criteria=(
        "First recovery step heads the right way",
        "Get back to a position ready for the next shot (not necessarily the exact base)",
    ),
    tags=frozenset({"recover"}),
)

BUILTIN_PRIMITIVES: tuple[Primitive, ...] = (
    SPLIT,
    LUNGE_FH,
    LUNGE_BH,
    CHASSE,
    CROSS_TO_REAR,
    SCISSOR,
    RECOVER,
)
