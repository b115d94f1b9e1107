"""Tests for YAML layer loading."""

import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import sdkconf.config.sources as sources


class TestHelperFunctions:
    """Tests for path helper functions."""

    def test_get_builtin_defaults_path(self) -> None:
        """Should return path to defaults/config.yaml."""
        path = sources.get_builtin_defaults_path()
        assert path.name == "config.yaml"
        assert path.parent.name == "defaults"
        assert path.exists()


class TestLoadYamlLayer:
    """load_yaml_layer()."""

    def test_loads_mapping(self, write_yaml: _typing.Any) -> None:
        path = write_yaml("layer.yaml", "tokens:\n  WETH:\n    decimals: 18\n")

        assert sources.load_yaml_layer(path) == {"tokens": {"WETH": {"decimals": 18}}}

    def test_empty_file_is_empty_layer(self, write_yaml: _typing.Any) -> None:
        path = write_yaml("empty.yaml", "# nothing here\n")

        assert sources.load_yaml_layer(path) == {}

    def test_missing_file_raises(self, tmp_path: _pathlib.Path) -> None:
        path = tmp_path / "missing.yaml"

        with _pytest.raises(sources.ConfigFileError, match="cannot read file") as exc_info:
            sources.load_yaml_layer(path)
        assert exc_info.value.path == path

    def test_malformed_yaml_raises(self, write_yaml: _typing.Any) -> None:
        path = write_yaml("bad.yaml", "tokens: [unclosed\n")

        with _pytest.raises(sources.ConfigFileError, match="invalid YAML"):
            sources.load_yaml_layer(path)

    def test_non_mapping_top_level_raises(self, write_yaml: _typing.Any) -> None:
        path = write_yaml("list.yaml", "- a\n- b\n")

        with _pytest.raises(sources.ConfigFileError, match="got list"):
            sources.load_yaml_layer(path)


class TestLoadDefaultLayer:
    """load_default_layer()."""

    def test_bundled_defaults(self) -> None:
        """Bundled defaults include the well-known test tokens."""
        layer = sources.load_default_layer()

        assert layer["tokens"]["TokenA"]["decimals"] == 18
        assert layer["tokens"]["USDC"]["decimals"] == 6

    def test_host_defaults(self, write_yaml: _typing.Any) -> None:
        path = write_yaml("host.yaml", "tokens:\n  AAA:\n    decimals: 3\n")

        assert sources.load_default_layer(path) == {"tokens": {"AAA": {"decimals": 3}}}

    def test_missing_defaults_raise(self, tmp_path: _pathlib.Path) -> None:
        with _pytest.raises(sources.ConfigFileError, match="defaults not found"):
            sources.load_default_layer(tmp_path / "nope.yaml")

    def test_empty_defaults_raise(self, write_yaml: _typing.Any) -> None:
        path = write_yaml("empty.yaml", "")

        with _pytest.raises(sources.ConfigFileError, match="defaults file is empty"):
            sources.load_default_layer(path)
