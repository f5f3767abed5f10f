"""Tests for structured logging setup and helper log events."""

from __future__ import annotations

import json

import pytest
import structlog

from fedversion.errors import ConfigurationError
from fedversion.observability.logging import get_logger, setup_logging
from fedversion.versioning import new_comparison_helper


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def _log_lines(err: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


class TestSetupLogging:
    """Tests for setup_logging() and get_logger()."""

    def test_json_output_with_component(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("info")
        get_logger("test").info("hello", cluster="west")

        (line,) = _log_lines(capsys.readouterr().err)
        assert line["event"] == "hello"
        assert line["component"] == "fedversion.test"
        assert line["cluster"] == "west"
        assert line["level"] == "info"
        assert "ts" in line

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("warning")
        get_logger("test").info("dropped")
        assert capsys.readouterr().err == ""

    def test_debug_logs_helper_selection(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("debug")
        new_comparison_helper("Generation")

        events = [line["event"] for line in _log_lines(capsys.readouterr().err)]
        assert "comparison_helper_selected" in events

    def test_unrecognized_type_logged_as_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("info")
        with pytest.raises(ConfigurationError):
            new_comparison_helper("Checksum")

        (line,) = _log_lines(capsys.readouterr().err)
        assert line["event"] == "unrecognized_compare_type"
        assert line["level"] == "error"
        assert line["compare_type"] == "'Checksum'"
