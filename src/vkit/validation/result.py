"""ValidationError, FieldValidationResult and ValidationAggregate.

INVARIANT: A FieldValidationResult carries at most one failure, either a
validation error or a runtime error, never both.
INVARIANT: A ValidationAggregate only lists fields that failed.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from vkit.errors import RuleRuntimeError


class ValidationError(BaseModel):
    """A business-rule failure meant to be shown to the end user verbatim.

    This is data, not an exception. Rules return it; they never raise it.
    """

    model_config = {"frozen": True}

    code: str
    message: str

    def __str__(self) -> str:
        return self.message


class FieldValidationResult(BaseModel):
    """Outcome of validating one field against its rule list.

    Attributes:
        field: Name of the validated field.
        validation_error: First validation failure, if any.
        runtime_error: First runtime failure, if any. Not serialized.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    field: str
    validation_error: ValidationError | None = None
    runtime_error: RuleRuntimeError | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _single_failure(self) -> Self:
        if self.validation_error is not None and self.runtime_error is not None:
            msg = f"field {self.field!r} carries both a validation and a runtime error"
            raise ValueError(msg)
        return self

    @property
    def ok(self) -> bool:
        """True when no rule failed."""
        return self.validation_error is None and self.runtime_error is None


class ValidationAggregate(BaseModel):
    """Validation errors for several fields, keyed by field name."""

    model_config = {"frozen": True}

    errors_by_field: dict[str, ValidationError] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors_by_field

    @property
    def fields(self) -> list[str]:
        """Names of the failed fields, in aggregation order."""
        return list(self.errors_by_field)

    def error_for(self, field: str) -> ValidationError | None:
        return self.errors_by_field.get(field)
