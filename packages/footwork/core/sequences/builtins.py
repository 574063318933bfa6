"""Builtin sequences and the singles / right-handed landing map.

Mid-court cells reuse the front-court sequences and every rear cell maps to
the forehand rear sequence; dedicated mid and rear-backhand sequences are
not authored yet.
"""

from __future__ import annotations

from footwork.core.sequences.models import (
    LandingSequenceMap,
    SequenceConstraints,
    SequenceTemplate,
)
from footwork.core.vocabulary import CourtZone, Hand, PlayMode

SEQ_FRONT_FH = SequenceTemplate(
    id="SEQ_FRONT_FH",
    name="Front Court Forehand",
    pattern=("SPLIT", "LUNGE_FH", "RECOVER"),
    constraints=SequenceConstraints(zones=(CourtZone.FRONT,), hand=(Hand.RIGHT,)),
)

SEQ_FRONT_BH = SequenceTemplate(
    id="SEQ_FRONT_BH",
    name="Front Court Backhand",
    pattern=("SPLIT", "LUNGE_BH", "RECOVER"),
    constraints=SequenceConstraints(zones=(CourtZone.FRONT,), hand=(Hand.RIGHT,)),
)

SEQ_REAR_FH = SequenceTemplate(
    id="SEQ_REAR_FH",
    name="Rear Court Forehand (Cross-over + Scissor)",
    pattern=("SPLIT", "CROSS_TO_REAR", "SCISSOR", "RECOVER"),
    constraints=SequenceConstraints(zones=(CourtZone.REAR,), hand=(Hand.RIGHT,)),
)

BUILTIN_SEQUENCES: tuple[SequenceTemplate, ...] = (SEQ_FRONT_FH, SEQ_FRONT_BH, SEQ_REAR_FH)

SINGLES_RIGHT_LANDING_MAP = LandingSequenceMap(
    mode=PlayMode.SINGLES,
    hand=Hand.RIGHT,
    entries={
        "F_L": "SEQ_FRONT_BH",
        "F_C": "SEQ_FRONT_FH",
        "F_R": "SEQ_FRONT_FH",
        "M_L": "SEQ_FRONT_BH",
        "M_C": "SEQ_FRONT_FH",
        "M_R": "SEQ_FRONT_FH",
        "R_L": "SEQ_REAR_FH",
        "R_C": "SEQ_REAR_FH",
        "R_R": "SEQ_REAR_FH",
    },
)

BUILTIN_LANDING_MAPS: tuple[LandingSequenceMap, ...] = (SINGLES_RIGHT_LANDING_MAP,)
