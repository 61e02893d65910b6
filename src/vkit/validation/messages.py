"""Failure catalog for the built-in validators.

Each entry pairs a stable machine-readable code with a message template.
Codes never change once published; messages may be reworded.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from vkit.validation.result import ValidationError


class Failure(NamedTuple):
    """A ``(code, template)`` pair. Templates use ``str.format`` fields."""

    code: str
    template: str

    def error(self, **params: Any) -> ValidationError:
        """Build a ValidationError with the template's fields substituted."""
        return ValidationError(code=self.code, message=self.template.format(**params))


FAIL_NOT_EMPTY = Failure("notEmpty.empty", "may not be empty.")
FAIL_IS_EMAIL = Failure("isEmail.invalid", "must be a valid email address.")
FAIL_MIN_LENGTH = Failure("minLength.length", "must be minimum {length} characters long.")
FAIL_MAX_LENGTH = Failure("maxLength.length", "must be max {length} characters long.")
FAIL_ONE_OF = Failure("oneOf.notFound", "is not one of {values}.")
FAIL_REGEX = Failure("regex.invalid", "does not match expected pattern.")
FAIL_ETH_0X = Failure("eth.0x", "must start with '0x'.")
FAIL_ETH_LENGTH = Failure("eth.length", "must be 42 characters long.")
FAIL_ETH_HEX = Failure("eth.hex", "may only contain hexadecimal characters.")
FAIL_MIN = Failure("min.invalid", "must be at least {bound}.")
FAIL_MAX = Failure("max.invalid", "must not exceed {bound}.")

ALL_FAILURES: tuple[Failure, ...] = (
    FAIL_NOT_EMPTY,
    FAIL_IS_EMAIL,
    FAIL_MIN_LENGTH,
    FAIL_MAX_LENGTH,
    FAIL_ONE_OF,
    FAIL_REGEX,
    FAIL_ETH_0X,
    FAIL_ETH_LENGTH,
    FAIL_ETH_HEX,
    FAIL_MIN,
    FAIL_MAX,
)
