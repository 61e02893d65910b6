"""Option — a container holding zero or one value.

INVARIANT: An absent Option stores ``None``. The stored value of an absent
Option is never meaningful; only :meth:`Option.get` exposes it.

Options are frozen after construction. Equality is value equality.

Used as a pydantic field type, ``Option[T]`` maps JSON ``null`` to absent
and any other input to ``present(v)`` after validating ``v`` against ``T``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, get_args, get_origin

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from vkit.errors import LogicError


@dataclass(frozen=True, slots=True, repr=False)
class Option[T]:
    """Zero or one value of type ``T`` with explicit presence tracking.

    Construct through :meth:`present` or :meth:`absent` rather than the
    dataclass constructor.
    """

    _value: T | None = None
    _present: bool = False

    @classmethod
    def present(cls, value: T) -> Option[T]:
        """Wrap *value*; the result reports ``is_present() is True``."""
        return cls(value, True)

    @classmethod
    def absent(cls) -> Option[T]:
        """An Option without a value."""
        return cls(None, False)

    @classmethod
    def from_nullable(cls, value: T | None) -> Option[T]:
        """Absent for ``None``, present otherwise."""
        if value is None:
            return cls.absent()
        return cls.present(value)

    def is_present(self) -> bool:
        return self._present

    def is_absent(self) -> bool:
        return not self._present

    def get(self) -> tuple[T | None, bool]:
        """Return ``(value, is_present)``. Never raises."""
        return self._value, self._present

    def get_or_raise(self) -> T:
        """Return the value, or raise :class:`LogicError` when absent.

        An absent unwrap is a caller bug, not a recoverable condition.
        """
        if not self._present:
            msg = "unwrap of absent optional"
            raise LogicError(msg)
        return self._value  # type: ignore[return-value]

    def get_or_default(self, fallback: T) -> T:
        """Return the value if present, else *fallback*."""
        if not self._present:
            return fallback
        return self._value  # type: ignore[return-value]

    def get_or_compute(self, fallback_fn: Callable[[], T]) -> T:
        """Return the value if present, else ``fallback_fn()``.

        *fallback_fn* is only called when the Option is absent.
        """
        if not self._present:
            return fallback_fn()
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self._present:
            return f"Option.present({self._value!r})"
        return "Option.absent()"

    # --- pydantic adapter ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """Build a schema mapping ``null`` <-> absent and ``v`` <-> ``present(v)``."""
        inner_schema = core_schema.any_schema()
        if get_origin(source) is not None:
            args = get_args(source)
            if args:
                inner_schema = handler.generate_schema(args[0])

        nullable = core_schema.nullable_schema(inner_schema)
        from_data = core_schema.no_info_after_validator_function(cls.from_nullable, nullable)

        return core_schema.json_or_python_schema(
            json_schema=from_data,
            python_schema=core_schema.no_info_before_validator_function(_load_value, from_data),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _dump_value,
                return_schema=nullable,
            ),
        )


def _load_value(data: Any) -> Any:
    if isinstance(data, Option):
        value, ok = data.get()
        return value if ok else None
    return data


def _dump_value(option: Option[Any]) -> Any:
    value, ok = option.get()
    return value if ok else None


def present[T](value: T) -> Option[T]:
    """Shortcut for :meth:`Option.present`."""
    return Option.present(value)


def absent() -> Option[Any]:
    """Shortcut for :meth:`Option.absent`."""
    return Option.absent()
