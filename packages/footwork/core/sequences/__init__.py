"""Sequence catalog and landing -> sequence map."""

from footwork.core.sequences.builtins import (
    BUILTIN_LANDING_MAPS,
    BUILTIN_SEQUENCES,
    SINGLES_RIGHT_LANDING_MAP,
)
from footwork.core.sequences.catalog import LandingMapTable, SequenceCatalog
from footwork.core.sequences.models import (
    LandingSequenceMap,
    SequenceConstraints,
    SequenceTemplate,
)

__all__ = [
    "BUILTIN_LANDING_MAPS",
    "BUILTIN_SEQUENCES",
    "SINGLES_RIGHT_LANDING_MAP",
    "LandingMapTable",
    "LandingSequenceMap",
    "SequenceCatalog",
    "SequenceConstraints",
    "SequenceTemplate",
]
