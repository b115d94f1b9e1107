"""
The layered, resettable configuration store.

A ConfigurationStore holds two layers of the same shape:

- Default Layer: the baseline, loaded once and never written to
- Override Layer: runtime changes made with update_configuration()

Reads merge the two on every call (Override wins, attribute by attribute).
reset_configuration() drops the Override Layer, restoring the defaults.

Collaborators should receive a store explicitly. get_configuration()
returns a lazily created process-wide store for SDK bootstrap code.

The store does no locking. Callers that share one store between threads
must serialize update_configuration() and reset_configuration().
"""

import collections.abc as _abc
import copy as _copy
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import sdkconf.config.accessors as accessors
import sdkconf.config.settings as settings_module
import sdkconf.config.sources as sources
import sdkconf.utils as utils

_logger = _logging.getLogger(__name__)

# Provenance labels, keyed by DeepChainMap layer index
_OVERRIDE = "override"
_DEFAULT = "default"


class ConfigurationStore:
    """
    Default and Override layers plus typed accessors.

    Example:
        >>> store = ConfigurationStore({"tokens": {"TokenA": {"decimals": 18}}})
        >>> store.tokens.get_decimals("TokenA")
        18
        >>> store.update_configuration({"tokens": {"TokenA": {"decimals": 6}}})
        >>> store.tokens.get_decimals("TokenA")
        6
        >>> store.reset_configuration()
        >>> store.tokens.get_decimals("TokenA")
        18
    """

    def __init__(self, defaults: _abc.Mapping[str, _typing.Any] | None = None) -> None:
        """
        Create a store.

        Args:
            defaults: The Default Layer. A deep copy is kept, so the
                caller's mapping is never shared with the store. Uses the
                bundled defaults when not given.

        Raises:
            ConfigFileError: If bundled defaults are needed but unreadable.
        """
        if defaults is None:
            layer = sources.load_default_layer()
        else:
            layer = _copy.deepcopy(dict(defaults))
        self._dcm = utils.DeepChainMap(layer)
        self.tokens = accessors.TokenConfiguration(self._dcm)

    @classmethod
    def from_settings(cls, settings: settings_module.Settings) -> "ConfigurationStore":
        """
        Create a store as described by bootstrap settings.

        Loads `settings.defaults_path` (or the bundled defaults), then
        applies `settings.overrides_path` if set.

        Raises:
            ConfigFileError: If a configured file cannot be loaded.
        """
        store = cls(sources.load_default_layer(settings.defaults_path))
        if settings.overrides_path is not None:
            store.load_overrides(settings.overrides_path)
        return store

    @property
    def sections(self) -> list[accessors.SectionAccessor[_typing.Any]]:
        """All section accessors of this store."""
        return [self.tokens]

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_overridden(self) -> bool:
        """
        Whether the Override Layer holds any entry.

        False right after construction or reset. An update with an empty
        partial (``{}``) records nothing and leaves this False. An update
        that creates only an empty section or record (``{"tokens": {}}``)
        does add an entry, so this becomes True.
        """
        return self._dcm.is_modified

    def update_configuration(self, partial: _abc.Mapping[str, _typing.Any]) -> None:
        """
        Merge partial configuration into the Override Layer.

        Only the attributes named in `partial` change. Other attributes of
        the same record, and all other records, keep their current values.
        Unknown identifiers and attributes are accepted as-is.

        Args:
            partial: Mapping of section → identifier → attributes, e.g.
                ``{"tokens": {"WETH": {"decimals": 18}}}``.

        Raises:
            TypeError: If `partial` is not a mapping.
        """
        self._dcm.update(partial)
        if _logger.isEnabledFor(_logging.DEBUG):
            for section, records in partial.items():
                touched = sorted(records) if isinstance(records, _abc.Mapping) else []
                _logger.debug("Updated configuration section %s: %s", section, touched)

    def reset_configuration(self) -> None:
        """Discard every override, reverting reads to the Default Layer."""
        self._dcm.reset()
        _logger.debug("Configuration reset to defaults")

    def load_overrides(self, path: _pathlib.Path) -> None:
        """
        Apply a YAML override file with update_configuration().

        Raises:
            ConfigFileError: If the file cannot be loaded.
        """
        layer = sources.load_yaml_layer(path)
        if not layer:
            _logger.warning("Override file %s is empty, nothing applied", path)
            return
        self.update_configuration(layer)

    # =========================================================================
    # Views
    # =========================================================================

    def effective_configuration(self) -> dict[str, _typing.Any]:
        """Return the merged configuration as an independent plain dict."""
        return self._dcm.to_dict()

    def default_configuration(self) -> utils.deep_chain_map.FrozenMapping:
        """Read-only view of the Default Layer."""
        return self._dcm.source_layers[0]

    def override_configuration(self) -> utils.deep_chain_map.FrozenMapping:
        """Read-only view of the Override Layer."""
        return self._dcm.front_layer

    def get_with_provenance(
        self,
        section: str,
    ) -> tuple[_typing.Any, _typing.Any]:
        """
        Get a merged section and where each value came from.

        Returns:
            Tuple of (value, provenance). Provenance mirrors the value's
            shape with "override" or "default" at each leaf.

        Raises:
            KeyError: If no layer defines the section.
        """
        value, provenance = self._dcm.get_with_provenance(section)
        return value, _label_provenance(provenance)

    def find_unknown_attributes(self) -> dict[str, _typing.Any]:
        """
        Collect attributes outside each section's schema.

        Unknown attributes are accepted everywhere; this only reports them,
        e.g. to spot a ``decimal`` typo for ``decimals``.

        Returns:
            Flat dict of dotted path → value, e.g. {"tokens.WETH.decimal": 6}.
        """
        result: dict[str, _typing.Any] = {}
        for accessor in self.sections:
            for identifier in accessor.identifiers():
                for key, value in accessor.unknown_attributes(identifier).items():
                    result[f"{accessor.section}.{identifier}.{key}"] = value
        return result


def _label_provenance(provenance: _typing.Any) -> _typing.Any:
    """Replace layer indices with readable labels."""
    if isinstance(provenance, dict):
        return {key: _label_provenance(value) for key, value in provenance.items()}
    return _OVERRIDE if provenance < 0 else _DEFAULT


# =============================================================================
# Process-wide store
# =============================================================================

_configuration: ConfigurationStore | None = None


def get_configuration() -> ConfigurationStore:
    """
    Return the process-wide store, creating it on first use.

    The store is built from Settings read from the environment.
    """
    global _configuration
    if _configuration is None:
        _configuration = ConfigurationStore.from_settings(settings_module.Settings())
        _logger.debug("Created process-wide configuration store")
    return _configuration


def load_store(settings: settings_module.Settings | None = None) -> ConfigurationStore:
    """
    Build a new store from bootstrap settings.

    Args:
        settings: Settings to use. Read from the environment when not given.

    Raises:
        ConfigFileError: If a configured file cannot be loaded.
    """
    if settings is None:
        settings = settings_module.Settings()
    return ConfigurationStore.from_settings(settings)


def set_configuration(store: ConfigurationStore | None) -> None:
    """
    Replace the process-wide store.

    Passing None makes the next get_configuration() build a fresh one.
    """
    global _configuration
    _configuration = store
