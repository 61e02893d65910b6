"""Built-in validators.

``not_empty``, ``is_email`` and ``eth_address`` are rules themselves; the
rest are factories that capture their parameters and return a rule.
Invalid factory parameters raise :class:`~vkit.errors.ConfigError` at
construction time, before any value is seen.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

from email_validator import EmailNotValidError, validate_email

from vkit.config.settings import get_settings
from vkit.errors import ConfigError
from vkit.types import LengthUnit, measure
from vkit.validation.messages import (
    FAIL_ETH_0X,
    FAIL_ETH_HEX,
    FAIL_ETH_LENGTH,
    FAIL_IS_EMAIL,
    FAIL_MAX,
    FAIL_MAX_LENGTH,
    FAIL_MIN,
    FAIL_MIN_LENGTH,
    FAIL_NOT_EMPTY,
    FAIL_ONE_OF,
    FAIL_REGEX,
)
from vkit.validation.result import ValidationError
from vkit.validation.rules import ValidationRule, first_failure

ETH_ADDRESS_LENGTH = 42
_ETH_HEX = re.compile(r"^0x[0-9a-fA-F]{40}$")

# --- String ---


def not_empty(value: str) -> ValidationError | None:
    if value == "":
        return FAIL_NOT_EMPTY.error()
    return None


def is_email(value: str) -> ValidationError | None:
    """Fail unless *value* is a syntactically valid address on a dotted domain.

    Display names (``Ada <ada@example.com>``) and quoted local parts are
    accepted. Syntax only: no DNS lookups are made.
    """
    try:
        info = validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
            allow_display_name=True,
            allow_quoted_local=True,
        )
    except EmailNotValidError:
        return FAIL_IS_EMAIL.error()
    # Dotless (local) domains pass the syntax check; a public address needs a dot.
    if "." not in info.domain:
        return FAIL_IS_EMAIL.error()
    return None


def _length_unit(unit: LengthUnit | str | None) -> LengthUnit:
    if unit is None:
        return get_settings().length_unit
    try:
        return LengthUnit(unit)
    except ValueError as exc:
        msg = f"Unknown length unit: {unit!r}"
        raise ConfigError(msg) from exc


def _check_bound(name: str, length: int) -> None:
    if length < 0:
        msg = f"{name} requires a non-negative length, got {length}"
        raise ConfigError(msg)


def min_length(length: int, *, unit: LengthUnit | str | None = None) -> ValidationRule[str]:
    """Fail when the value is shorter than *length*.

    *unit* defaults to ``VkitSettings.length_unit`` at construction time.
    """
    _check_bound("min_length", length)
    resolved = _length_unit(unit)

    def rule(value: str) -> ValidationError | None:
        if measure(value, resolved) < length:
            return FAIL_MIN_LENGTH.error(length=length)
        return None

    return rule


def max_length(length: int, *, unit: LengthUnit | str | None = None) -> ValidationRule[str]:
    """Fail when the value is longer than *length*."""
    _check_bound("max_length", length)
    resolved = _length_unit(unit)

    def rule(value: str) -> ValidationError | None:
        if measure(value, resolved) > length:
            return FAIL_MAX_LENGTH.error(length=length)
        return None

    return rule


def one_of(values: Iterable[str]) -> ValidationRule[str]:
    """Fail unless the value equals one of *values* exactly."""
    allowed = tuple(values)
    members = frozenset(allowed)
    listing = ", ".join(allowed)

    def rule(value: str) -> ValidationError | None:
        if value not in members:
            return FAIL_ONE_OF.error(values=listing)
        return None

    return rule


def regex(pattern: re.Pattern[str] | str) -> ValidationRule[str]:
    """Fail unless *pattern* matches somewhere in the value.

    Anchor the pattern (``^...$``) to require a full match. A pattern string
    that does not compile raises :class:`ConfigError`.
    """
    if isinstance(pattern, str):
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            msg = f"Invalid regex pattern {pattern!r}: {exc}"
            raise ConfigError(msg) from exc
    else:
        compiled = pattern

    def rule(value: str) -> ValidationError | None:
        if compiled.search(value) is None:
            return FAIL_REGEX.error()
        return None

    return rule


def eth_address(value: str) -> ValidationError | None:
    """Check an Ethereum address: ``0x`` prefix, then length, then hex digits.

    Checks run in that order and stop at the first failure.
    """
    if not value.startswith("0x"):
        return FAIL_ETH_0X.error()
    if len(value) != ETH_ADDRESS_LENGTH:
        return FAIL_ETH_LENGTH.error()
    if _ETH_HEX.match(value) is None:
        return FAIL_ETH_HEX.error()
    return None


# --- Integer ---


def min_value(bound: int) -> ValidationRule[int]:
    """Fail when the value is below *bound*."""

    def rule(value: int) -> ValidationError | None:
        if value < bound:
            return FAIL_MIN.error(bound=bound)
        return None

    return rule


def max_value(bound: int) -> ValidationRule[int]:
    """Fail when the value exceeds *bound*."""

    def rule(value: int) -> ValidationError | None:
        if value > bound:
            return FAIL_MAX.error(bound=bound)
        return None

    return rule


# --- Conditional ---


def when[T](predicate: Callable[[T], bool], *rules: ValidationRule[T]) -> ValidationRule[T]:
    """Apply *rules* only when ``predicate(value)`` is true.

    A false predicate passes without evaluating any rule.
    """

    def rule(value: T) -> ValidationError | None:
        if not predicate(value):
            return None
        return first_failure(value, rules)

    return rule


def is_non_empty(value: Any) -> bool:
    """Emptiness test used by :func:`when_not_empty`.

    ``""`` and ``0`` are empty. Values of any other type count as non-empty.
    """
    if isinstance(value, str):
        return value != ""
    if isinstance(value, int):
        return value != 0
    return True


def when_not_empty[T](*rules: ValidationRule[T]) -> ValidationRule[T]:
    """Apply *rules* unless the value is ``""`` or ``0``."""
    return when(is_non_empty, *rules)
