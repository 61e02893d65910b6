"""Tests for structlog rendering on the vkit logger."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from vkit.config.logging import configure_from_settings, configure_logging
from vkit.validation.aggregate import aggregate
from vkit.validation.fields import validate_field
from vkit.validation.validators import not_empty


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and vkit logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    vkit = logging.getLogger("vkit")
    vkit_handlers = vkit.handlers[:]
    vkit_level = vkit.level
    vkit_propagate = vkit.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    vkit.handlers = vkit_handlers
    vkit.setLevel(vkit_level)
    vkit.propagate = vkit_propagate


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("vkit").level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("vkit").level == logging.WARNING

    def test_human_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        logging.getLogger("vkit.test").warning("hello world")
        assert "hello world" in capfd.readouterr().err

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("vkit.test").warning("json test", extra={"answer": 42})
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "vkit.test"
        assert "timestamp" in parsed

    def test_field_failure_logged_as_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        validate_field("name", "", not_empty)

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Field name failed notEmpty.empty"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "vkit.validation.fields"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        aggregate(validate_field("name", "", not_empty))

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger("vkit").handlers) == 1


class TestHostLoggingUntouched:
    def test_root_handlers_and_level_kept(self) -> None:
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        root.setLevel(logging.INFO)

        configure_logging(verbose=True, log_json=True)
        configure_logging(verbose=False, log_json=False)

        assert host_handler in root.handlers
        assert root.level == logging.INFO

    def test_application_vkit_handler_kept(self) -> None:
        app_handler = logging.NullHandler()
        logging.getLogger("vkit").addHandler(app_handler)

        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)

        handlers = logging.getLogger("vkit").handlers
        assert app_handler in handlers
        assert len(handlers) == 2

    def test_vkit_records_stop_at_vkit_logger(self) -> None:
        configure_logging(verbose=True, log_json=True)
        assert logging.getLogger("vkit").propagate is False

    def test_other_loggers_unaffected(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("hostapp").debug("host message")
        assert "host message" not in capfd.readouterr().err


class TestConfigureFromSettings:
    def test_reads_verbose_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VKIT_VERBOSE", "1")
        configure_from_settings()
        assert logging.getLogger("vkit").level == logging.DEBUG

    def test_default_is_quiet(self) -> None:
        configure_from_settings()
        assert logging.getLogger("vkit").level == logging.WARNING
