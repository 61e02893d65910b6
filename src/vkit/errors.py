"""Exception hierarchy shared by the option and validation packages.

Two disjoint failure kinds exist in vkit:

- Validation failures are *data*: a rule returns a
  :class:`~vkit.validation.result.ValidationError` model meant for the end
  user. They are never raised.
- Runtime failures are *exceptions*: a validator that cannot evaluate raises
  :class:`RuleRuntimeError`, which aborts the whole validation pass.

:class:`LogicError` sits outside :class:`VkitError` on purpose. It marks a
caller contract violation and must not be caught by ``except VkitError``.
"""

from __future__ import annotations


class VkitError(Exception):
    """Base class for recoverable vkit errors."""


class RuleRuntimeError(VkitError):
    """A validator could not evaluate its input (infrastructure failure)."""


class ConfigError(RuleRuntimeError):
    """Invalid rule construction parameters or configuration source."""


class DecodeError(VkitError):
    """An optional value could not be decoded from its JSON form."""


class LogicError(AssertionError):
    """Programmer error, e.g. unwrapping an absent optional."""
