"""Coaching cue formatting for the criteria panel."""

from __future__ import annotations

from footwork.core.planning.models import Segment

NO_SELECTION_TEXT = "Select a landing cell..."


def criteria_lines(segment: Segment) -> list[str]:
    """Heading, blank line, then one bullet per coaching cue."""
    return [
        f"Current move: {segment.name} ({segment.intent.value})",
        "",
        *(f"- {c}" for c in segment.criteria),
    ]


def format_criteria(segment: Segment | None) -> str:
    if segment is None:
        return NO_SELECTION_TEXT
    return "\n".join(criteria_lines(segment))
