"""The ValidationRule contract every validator implements.

A rule is a pure callable from one value to an outcome:

- ``None``: the value passes.
- a :class:`~vkit.validation.result.ValidationError`: the value fails a
  business rule.
- raising :class:`~vkit.errors.RuleRuntimeError`: the rule itself cannot
  evaluate. This aborts the whole validation pass.

Rules close over their construction parameters and never mutate them.
"""

from __future__ import annotations

from collections.abc import Callable

from vkit.validation.result import ValidationError

type ValidationRule[T] = Callable[[T], ValidationError | None]


def first_failure[T](value: T, rules: tuple[ValidationRule[T], ...]) -> ValidationError | None:
    """Evaluate *rules* in order and return the first validation error.

    A ``RuleRuntimeError`` raised by a rule propagates unchanged.
    """
    for rule in rules:
        error = rule(value)
        if error is not None:
            return error
    return None
