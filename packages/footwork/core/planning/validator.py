"""Rule validator for sequence patterns.

Pure structural checks over a pattern of primitive ids. Rules are checked
in order and the first failure wins:

1. the pattern is non-empty and opens with a START primitive
2. at least one CONTACT primitive is present
3. the pattern closes with a RECOVER primitive
4. every id names a primitive in the library

Rules 1-3 read an unknown id as having no intent.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from footwork.core.primitives.library import PrimitiveLibrary
from footwork.core.vocabulary import Intent


class SequenceValidation(BaseModel):
    """Outcome of validating a pattern."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ok: bool
    reason: str | None = None

    @classmethod
    def accepted(cls) -> SequenceValidation:
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: str) -> SequenceValidation:
        return cls(ok=False, reason=reason)


class RuleValidator:
    """Checks sequence patterns against the primitive library.

    Example:
        >>> validator = RuleValidator(catalog.primitives)
        >>> validator.validate(["SPLIT", "LUNGE_FH", "RECOVER"]).ok
        True
        >>> validator.validate(["SPLIT", "RECOVER"]).reason
        'sequence must include a contact primitive'
    """

    def __init__(self, primitives: PrimitiveLibrary) -> None:
        self._primitives = primitives

    def _intent(self, pid: str) -> Intent | None:
        if pid not in self._primitives:
            return None
        return self._primitives.get(pid).intent

    def validate(self, pattern: Sequence[str]) -> SequenceValidation:
        intents = [self._intent(pid) for pid in pattern]

        if not intents or intents[0] is not Intent.START:
            return SequenceValidation.rejected("sequence must start with a start primitive")

        if Intent.CONTACT not in intents:
            return SequenceValidation.rejected("sequence must include a contact primitive")

        if intents[-1] is not Intent.RECOVER:
            return SequenceValidation.rejected("sequence must end with a recover primitive")

        for pid in pattern:
            if pid not in self._primitives:
                return SequenceValidation.rejected(f"unknown primitive: {pid}")

        return SequenceValidation.accepted()
