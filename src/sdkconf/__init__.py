"""
sdkconf - layered, resettable configuration for client SDKs

Per-entity settings (e.g. token decimals) with a fixed default layer and a
runtime override layer that can be discarded at any time.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("sdkconf")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from sdkconf.config import ConfigurationStore, get_configuration, set_configuration  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "ConfigurationStore",
    "get_configuration",
    "set_configuration",
]
