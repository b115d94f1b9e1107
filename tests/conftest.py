"""
Shared pytest fixtures for sdkconf tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import click.testing as _click_testing
import pytest as _pytest

import sdkconf.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "SDKCONF_DEFAULTS_PATH",
    "SDKCONF_OVERRIDES_PATH",
    "SDKCONF_LOG_LEVEL",
    "SDKCONF_ENV_FILE",
]


@_pytest.fixture(autouse=True)
def clean_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Remove SDKCONF_* settings from the environment for every test."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)


@_pytest.fixture(autouse=True)
def isolated_process_store() -> _typing.Iterator[None]:
    """Drop the process-wide store before and after each test."""
    config.set_configuration(None)
    yield
    config.set_configuration(None)


@_pytest.fixture
def token_defaults() -> dict[str, _typing.Any]:
    """A small Default Layer with one well-known token."""
    return {
        "tokens": {
            "TokenA": {"decimals": 18, "name": "Token A"},
            "TokenB": {"decimals": 6, "address": "0x00000000000000000000000000000000000000b0"},
        }
    }


@_pytest.fixture
def store(token_defaults: dict[str, _typing.Any]) -> config.ConfigurationStore:
    """Fresh store over token_defaults."""
    return config.ConfigurationStore(token_defaults)


@_pytest.fixture
def write_yaml(tmp_path: _pathlib.Path) -> _typing.Callable[[str, str], _pathlib.Path]:
    """Write YAML text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> _pathlib.Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@_pytest.fixture
def cli_runner() -> _click_testing.CliRunner:
    """CliRunner with SDKCONF_* and NO_COLOR removed from its environment."""
    env: dict[str, str | None] = {
        key: None for key in _os.environ if key.startswith("SDKCONF_")
    }
    env["NO_COLOR"] = None
    return _click_testing.CliRunner(env=env)
