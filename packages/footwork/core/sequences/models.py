"""Sequence models - named primitive orderings and the landing lookup."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from footwork.core.utils.mappings import freeze_mapping, thaw_mapping
from footwork.core.vocabulary import CourtZone, Hand, PlayMode


class SequenceConstraints(BaseModel):
    """Where a sequence is meant to be used (informational)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    zones: tuple[CourtZone, ...] = ()
    hand: tuple[Hand, ...] = (Hand.RIGHT,)


class SequenceTemplate(BaseModel):
    """Ordered composition of primitives forming one footwork response.

    Structural rules (start / contact / recover) are checked by the rule
    validator at plan time, not here, so malformed catalog entries surface
    as InvalidSequenceError with a readable reason.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., pattern=r"^[A-Z][A-Z0-9_]*$")
    name: str
    pattern: tuple[str, ...]
    constraints: SequenceConstraints = Field(default_factory=SequenceConstraints)


class LandingSequenceMap(BaseModel):
    """Landing cell id -> sequence id for one (mode, hand) combination.

    Attributes:
        mode: Play mode the map applies to.
        hand: Dominant hand the map applies to.
        entries: Landing cell id to sequence template id (read-only).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: PlayMode
    hand: Hand
    entries: Mapping[str, str]

    @field_validator("entries")
    @classmethod
    def _freeze_entries(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return freeze_mapping(v)

    @field_serializer("entries")
    def _serialize_entries(self, v: Mapping[str, str]) -> dict[str, str]:
        return thaw_mapping(v)

    def sequence_for(self, landing_id: str) -> str | None:
        return self.entries.get(landing_id)

    def missing(self, landing_ids: list[str]) -> list[str]:
        """Landing ids this map has no entry for."""
        return [lid for lid in landing_ids if lid not in self.entries]
