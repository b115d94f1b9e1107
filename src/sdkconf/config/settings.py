"""
Settings for sdkconf itself, using pydantic-settings.

These control how the process-wide configuration store is bootstrapped,
not the token data it holds.

Loads settings from:
1. Constructor arguments (highest precedence)
2. Environment variables with SDKCONF_ prefix
3. .env file named by SDKCONF_ENV_FILE (if set and present)

Examples:
  SDKCONF_DEFAULTS_PATH=/etc/myapp/tokens.yaml
  SDKCONF_OVERRIDES_PATH=./local-tokens.yaml
  SDKCONF_LOG_LEVEL=DEBUG
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic_settings as _pydantic_settings

LogLevel = _typing.Literal["DEBUG", "INFO", "WARNING", "ERROR"]


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only SDKCONF_ENV_FILE is honoured, and only when the file exists.
    Without it, settings come from the environment alone.
    """
    if env_file := _os.environ.get("SDKCONF_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    sdkconf bootstrap settings.

    All settings can be overridden via environment variables with the
    SDKCONF_ prefix.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="SDKCONF_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    defaults_path: _pathlib.Path | None = None
    """Host-supplied Default Layer file. Bundled defaults are used when unset."""

    overrides_path: _pathlib.Path | None = None
    """YAML file of overrides applied once when the store is created."""

    log_level: LogLevel = "WARNING"
    """Level for the sdkconf logger hierarchy."""

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]
