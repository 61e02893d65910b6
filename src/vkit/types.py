"""Enums shared by the validation and config packages."""

from __future__ import annotations

from enum import StrEnum


class LengthUnit(StrEnum):
    """How string length validators measure a value.

    CHARS counts Unicode code points (``len(str)``).
    BYTES counts UTF-8 encoded bytes.
    """

    CHARS = "chars"
    BYTES = "bytes"


def measure(value: str, unit: LengthUnit) -> int:
    """Length of *value* in *unit*."""
    if unit is LengthUnit.BYTES:
        return len(value.encode("utf-8"))
    return len(value)
