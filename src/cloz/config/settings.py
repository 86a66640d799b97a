"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with CLOZ_ prefix
3. .env file named by CLOZ_ENV_FILE (if set and present)
4. Field defaults (lowest)

Example:
  CLOZ_MARKER_NAME=_ready
  CLOZ_INIT_HOOK_NAME=__setup
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import cloz.constants as constants


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicitly named file is used. If CLOZ_ENV_FILE is set but
    points nowhere, no .env is loaded rather than falling back silently.
    """
    if env_file := _os.environ.get("CLOZ_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class ClozSettings(_pydantic_settings.BaseSettings):
    """
    cloz configuration settings.

    All settings can be overridden via environment variables with the
    CLOZ_ prefix, e.g. CLOZ_MARKER_NAME=_ready.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    marker_name: str = _pydantic.Field(
        default=constants.DEFAULT_MARKER_NAME,
        description="Completion marker key requested when an object is composed.",
    )

    init_hook_name: str = _pydantic.Field(
        default=constants.DEFAULT_INIT_HOOK_NAME,
        description="Init hook key invoked when the initializer declares it.",
    )

    @_pydantic.field_validator("marker_name", "init_hook_name")
    @classmethod
    def _validate_hook_name(cls, v: str) -> str:
        """Hook names must be non-empty and free of surrounding whitespace."""
        if not v or v != v.strip():
            raise ValueError(f"hook name must be non-empty and unpadded, got {v!r}")
        return v

    @_pydantic.model_validator(mode="after")
    def _validate_distinct_hooks(self) -> "ClozSettings":
        if self.marker_name == self.init_hook_name:
            raise ValueError(
                f"marker_name and init_hook_name must differ (both {self.marker_name!r})"
            )
        return self

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "ClozSettings":
        """Create settings from environment variables only, ignoring any .env file.

        Useful for test isolation.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]


_settings: ClozSettings | None = None


def get_settings() -> ClozSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = ClozSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
