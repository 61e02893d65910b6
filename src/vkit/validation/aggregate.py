"""Combine per-field results into one ValidationAggregate."""

from __future__ import annotations

import logging

from vkit.validation.result import FieldValidationResult, ValidationAggregate, ValidationError

logger = logging.getLogger(__name__)


def aggregate(*results: FieldValidationResult) -> ValidationAggregate:
    """Collect the validation errors of *results*, keyed by field name.

    Passing fields are left out. If a field name repeats, its first failure
    is kept.

    Raises:
        RuleRuntimeError: The first runtime error found, in argument order.
            A runtime error aborts the whole pass; nothing is collected.
    """
    errors: dict[str, ValidationError] = {}
    for result in results:
        if result.runtime_error is not None:
            logger.warning("Validation aborted by runtime error on field %s", result.field)
            raise result.runtime_error
        if result.validation_error is not None and result.field not in errors:
            errors[result.field] = result.validation_error
    logger.debug("Aggregated %d field(s), %d failed", len(results), len(errors))
    return ValidationAggregate(errors_by_field=errors)
