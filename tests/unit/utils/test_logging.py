"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from footwork.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


def _record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    record = logging.LogRecord(
        name="footwork.test",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.funcName = "test_function"
    record.module = "test_module"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self) -> None:
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "footwork.test"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_log_with_extra_fields(self) -> None:
        """Extra fields (as a LoggerAdapter adds them) land in context."""
        record = _record()
        record.session_id = "s-1"
        record.landing_id = "F_C"

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["session_id"] == "s-1"
        assert data["context"]["landing_id"] == "F_C"

    def test_log_with_exception(self) -> None:
        """Exception info is reported as error fields."""
        try:
            raise ValueError("bad tempo")
        except ValueError:
            import sys

            record = logging.LogRecord(
                name="footwork.test",
                level=logging.ERROR,
                pathname=__file__,
                lineno=1,
                msg="failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad tempo"
        assert "Traceback" in data["context"]["stack_trace"]


class TestConfigureLogging:
    def test_sets_level(self, restore_root_logger) -> None:
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_structured_file_output(self, tmp_path: Path, restore_root_logger) -> None:
        """Structured logging to a file writes one JSON object per line."""
        log_file = tmp_path / "trainer.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)

        logging.getLogger("footwork.test").info("hello")
        for h in logging.getLogger().handlers:
            h.flush()

        lines = log_file.read_text().strip().splitlines()
        assert json.loads(lines[-1])["message"] == "hello"


class TestGetLogger:
    def test_plain_logger_without_context(self) -> None:
        assert isinstance(get_logger("footwork.x"), logging.Logger)

    def test_adapter_with_context(self) -> None:
        log = get_logger("footwork.x", session_id="abc")
        assert isinstance(log, logging.LoggerAdapter)
        assert log.extra == {"session_id": "abc"}


def test_log_performance_preserves_result(caplog: pytest.LogCaptureFixture) -> None:
    """Decorated function returns its result and a debug timing line is logged."""

    @log_performance
    def add(a: int, b: int) -> int:
        return a + b

    with caplog.at_level(logging.DEBUG, logger="footwork.core.utils.logging"):
        assert add(2, 3) == 5

    assert add.__name__ == "add"
    assert any("'add' took" in r.getMessage() for r in caplog.records)
