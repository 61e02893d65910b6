"""JSON adapter for :class:`~vkit.option.Option`.

Absent maps to ``null``; ``present(v)`` maps to the JSON form of ``v``.
Both helpers go through a pydantic ``TypeAdapter`` built on the core schema
that ``Option`` declares, so models with ``Option[T]`` fields behave the
same way.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from vkit.errors import DecodeError
from vkit.option import Option


@lru_cache(maxsize=64)
def _adapter(value_type: Any) -> TypeAdapter[Option[Any]]:
    return TypeAdapter(Option[value_type])


def dump_option(option: Option[Any], value_type: Any = Any) -> str:
    """Render *option* as JSON text."""
    return _adapter(value_type).dump_json(option).decode("utf-8")


def load_option[T](raw: str | bytes, value_type: type[T]) -> Option[T]:
    """Parse JSON text into an Option of *value_type*.

    Raises:
        DecodeError: *raw* is not ``null`` and does not decode as *value_type*.
    """
    try:
        return _adapter(value_type).validate_json(raw)
    except PydanticValidationError as exc:
        msg = f"Cannot decode optional {getattr(value_type, '__name__', value_type)}: {exc}"
        raise DecodeError(msg) from exc
