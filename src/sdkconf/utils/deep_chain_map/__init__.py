"""
DeepChainMap — ChainMap with deep merging and a resettable front layer.

Layers are checked in priority order (first layer = highest priority).
Runtime overrides go to a separate front layer that sits above every
source layer and can be discarded in one call.

Example:
    >>> from sdkconf.utils.deep_chain_map import DeepChainMap
    >>> builtin = {"tokens": {"USDC": {"decimals": 6, "name": "USD Coin"}}}
    >>> dcm = DeepChainMap(builtin)
    >>> dcm.update({"tokens": {"USDC": {"decimals": 18}}})
    >>> dict(dcm["tokens"]["USDC"])
    {'decimals': 18, 'name': 'USD Coin'}
"""

from sdkconf.utils.deep_chain_map._core import DeepChainMap
from sdkconf.utils.deep_chain_map._frozen import FrozenMapping, freeze

__all__ = ["DeepChainMap", "FrozenMapping", "freeze"]
