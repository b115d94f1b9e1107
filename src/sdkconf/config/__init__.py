"""
Configuration module for sdkconf.

The layered store, its typed accessors, and the bootstrap settings
(pydantic-settings) that decide which files feed it.
"""

from sdkconf.config.accessors import SectionAccessor, TokenConfiguration
from sdkconf.config.settings import Settings
from sdkconf.config.sources import ConfigFileError
from sdkconf.config.store import (
    ConfigurationStore,
    get_configuration,
    load_store,
    set_configuration,
)
from sdkconf.config.types import ConfigBase, TokenConfig

__all__ = [
    "ConfigBase",
    "ConfigFileError",
    "ConfigurationStore",
    "SectionAccessor",
    "Settings",
    "TokenConfig",
    "TokenConfiguration",
    "get_configuration",
    "load_store",
    "set_configuration",
]
