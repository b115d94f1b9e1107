"""
Utility classes and functions for sdkconf.

General-purpose utilities that don't belong to a specific domain.
"""

import sdkconf.utils.deep_chain_map as deep_chain_map
from sdkconf.utils.deep_chain_map import DeepChainMap

__all__ = ["DeepChainMap", "deep_chain_map"]
