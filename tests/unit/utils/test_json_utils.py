"""Tests for JSON file helpers."""

from __future__ import annotations

from pathlib import Path

from footwork.core.utils.json import read_json, write_json


def test_write_then_read(tmp_path: Path) -> None:
    """write_json creates parents and read_json returns the same data."""
    target = tmp_path / "nested" / "plan.json"
    data = {"landing_id": "F_C", "segments": [{"from": {"x": 0.5, "y": 0.58}}]}

    written = write_json(target, data)

    assert written == target
    assert target.exists()
    assert read_json(target) == data


def test_write_keeps_unicode(tmp_path: Path) -> None:
    """Non-ASCII names are written as-is."""
    target = write_json(tmp_path / "names.json", {"name": "Side Step / Chassé"})
    assert "Chassé" in target.read_text(encoding="utf-8")
