"""Composable field validation.

Build rules from :mod:`vkit.validation.validators`, run them per field with
:func:`validate_field` / :func:`validate_optional_field`, then combine the
results with :func:`aggregate`.
"""

from vkit.validation.aggregate import aggregate
from vkit.validation.fields import validate_field, validate_optional_field
from vkit.validation.result import FieldValidationResult, ValidationAggregate, ValidationError
from vkit.validation.rules import ValidationRule
from vkit.validation.validators import (
    eth_address,
    is_email,
    max_length,
    max_value,
    min_length,
    min_value,
    not_empty,
    one_of,
    regex,
    when,
    when_not_empty,
)

__all__ = [
    "FieldValidationResult",
    "ValidationAggregate",
    "ValidationError",
    "ValidationRule",
    "aggregate",
    "eth_address",
    "is_email",
    "max_length",
    "max_value",
    "min_length",
    "min_value",
    "not_empty",
    "one_of",
    "regex",
    "validate_field",
    "validate_optional_field",
    "when",
    "when_not_empty",
]
