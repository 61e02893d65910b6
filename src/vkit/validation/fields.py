"""Per-field validation with first-failure short-circuit.

INVARIANT: Evaluation stops at the first failing rule. Only that failure is
reported; later rules never run.
INVARIANT: An absent optional is always valid. No rule sees it.
"""

from __future__ import annotations

import logging

from vkit.errors import RuleRuntimeError
from vkit.option import Option
from vkit.validation.result import FieldValidationResult
from vkit.validation.rules import ValidationRule

logger = logging.getLogger(__name__)


def validate_field[T](field: str, value: T, *rules: ValidationRule[T]) -> FieldValidationResult:
    """Validate *value* against *rules* in order.

    A rule raising :class:`RuleRuntimeError` stops evaluation and the error
    is stored on the result instead of propagating. Any other exception is
    a bug in the rule and propagates.

    Args:
        field: Name reported on the result.
        value: Value handed to each rule.
        rules: Rules evaluated left to right.
    """
    for rule in rules:
        try:
            error = rule(value)
        except RuleRuntimeError as exc:
            logger.debug("Runtime error validating field %s: %s", field, exc)
            return FieldValidationResult(field=field, runtime_error=exc)
        if error is not None:
            logger.debug("Field %s failed %s", field, error.code)
            return FieldValidationResult(field=field, validation_error=error)
    return FieldValidationResult(field=field)


def validate_optional_field[T](
    field: str,
    option: Option[T],
    *rules: ValidationRule[T],
) -> FieldValidationResult:
    """Validate the value inside *option*, or pass immediately when absent."""
    value, ok = option.get()
    if not ok:
        return FieldValidationResult(field=field)
    return validate_field(field, value, *rules)  # type: ignore[arg-type]
