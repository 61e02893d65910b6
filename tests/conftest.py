"""Shared pytest fixtures for vkit tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from vkit.config.settings import get_settings
from vkit.errors import RuleRuntimeError
from vkit.validation.result import ValidationError

VALID_ETH = "0x32Be343B94f860124dC4fEe278FDCBD38C102D88"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop ``VKIT_*`` env vars and the cached settings around each test."""
    for name in ("VKIT_LENGTH_UNIT", "VKIT_VERBOSE", "VKIT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class RecordingRule:
    """Rule double that records every value it sees."""

    def __init__(self, error: ValidationError | None = None) -> None:
        self.error = error
        self.calls: list[object] = []

    def __call__(self, value: object) -> ValidationError | None:
        self.calls.append(value)
        return self.error


def broken_rule(value: object) -> ValidationError | None:
    """Rule that can never evaluate."""
    msg = f"backend unavailable for {value!r}"
    raise RuleRuntimeError(msg)
