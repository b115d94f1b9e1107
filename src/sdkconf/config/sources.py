"""YAML layer loading for sdkconf.

This module provides:

- load_yaml_layer(): read one YAML file as a configuration layer
- load_default_layer(): read the Default Layer (bundled or host-supplied)

Layers share one shape:

    tokens:
      WETH:
        decimals: 18

The Default Layer is required: a missing or empty defaults file is an
installation problem and is surfaced as ConfigFileError. Override files
are optional inputs and may be empty.
"""

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import yaml as _yaml

_logger = _logging.getLogger(__name__)


class ConfigFileError(Exception):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")


def get_builtin_defaults_path() -> _pathlib.Path:
    """
    Get the path to the built-in defaults config file.

    Returns:
        Path to defaults/config.yaml.
    """
    return _pathlib.Path(__file__).parent / "defaults" / "config.yaml"


def load_yaml_layer(path: _pathlib.Path) -> dict[str, _typing.Any]:
    """
    Load a YAML file and return its contents as a layer dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents, or an empty dict if the file is empty.

    Raises:
        ConfigFileError: If the file cannot be read, is malformed YAML,
            or contains non-dict content at the top level.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigFileError(path, f"permission denied: {e}") from e
    except OSError as e:
        raise ConfigFileError(path, f"cannot read file: {e}") from e

    try:
        parsed = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise ConfigFileError(path, f"invalid YAML: {e}") from e

    if parsed is None:
        return {}

    if not isinstance(parsed, dict):
        type_name = type(parsed).__name__
        raise ConfigFileError(
            path,
            f"config must be a YAML mapping (dict), got {type_name}",
        )

    _logger.debug("Loaded config layer from %s (%d sections)", path, len(parsed))
    return parsed


def load_default_layer(path: _pathlib.Path | None = None) -> dict[str, _typing.Any]:
    """
    Load the Default Layer.

    Args:
        path: Host-supplied defaults file. Uses the bundled
            defaults/config.yaml when not given.

    Returns:
        The parsed defaults.

    Raises:
        ConfigFileError: If the file is missing, empty or malformed.
    """
    defaults_path = path if path is not None else get_builtin_defaults_path()
    if not defaults_path.exists():
        raise ConfigFileError(
            defaults_path,
            "defaults not found (possible installation problem)",
        )
    content = load_yaml_layer(defaults_path)
    if not content:
        raise ConfigFileError(
            defaults_path,
            "defaults file is empty (possible installation problem)",
        )
    return content
