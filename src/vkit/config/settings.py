"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: passed by the caller
  2. Env vars: ``VKIT_*`` prefix
  3. TOML file: ``vkit.toml``, or ``[tool.vkit]`` in ``pyproject.toml``
  4. Code defaults

Rules read settings once, at construction. Changing settings afterwards
never alters an existing rule.
"""

from __future__ import annotations

import threading
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from vkit.errors import ConfigError
from vkit.types import LengthUnit


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``vkit.toml`` or ``pyproject.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ConfigError(msg) from exc
            if toml_path.name == "pyproject.toml":
                data = data.get("tool", {}).get("vkit", {})
            self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class VkitSettings(BaseSettings):
    """Library-wide settings, frozen after construction.

    Attributes:
        length_unit: Default unit for ``min_length`` / ``max_length``.
        verbose: Enable DEBUG logging for the ``vkit`` logger.
        log_json: Emit JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VKIT_",
    }

    length_unit: LengthUnit = LengthUnit.CHARS
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_file(cls, path: str | Path, **overrides: Any) -> VkitSettings:
        """Construct settings from a TOML file plus keyword overrides.

        A missing file is not an error; defaults and env vars still apply.
        An out-of-range value raises ``ConfigError``.
        """
        _tls.toml_path = Path(path)
        try:
            return cls(**overrides)
        except ValidationError as exc:
            msg = f"Invalid vkit settings from {path}: {exc}"
            raise ConfigError(msg) from exc
        finally:
            _tls.toml_path = None


@lru_cache(maxsize=1)
def get_settings() -> VkitSettings:
    """Process-wide settings from env vars and defaults.

    Call ``get_settings.cache_clear()`` after changing the environment.
    A bad ``VKIT_*`` value raises ``ConfigError``.
    """
    try:
        return VkitSettings()
    except ValidationError as exc:
        msg = f"Invalid vkit settings: {exc}"
        raise ConfigError(msg) from exc
