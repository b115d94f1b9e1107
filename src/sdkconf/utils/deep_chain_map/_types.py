"""
Type aliases for DeepChainMap.

- Path: Tuple of strings addressing a nested key, e.g. ("tokens", "WETH", "decimals")
- Layer: One nested dict of configuration data
- Provenance: Recursive dict recording which layer each value came from
"""

from __future__ import annotations

import typing as _typing

Path: _typing.TypeAlias = tuple[str, ...]

Layer: _typing.TypeAlias = dict[str, _typing.Any]

# Layer index -1 is the front layer, 0..n index into the source layers
if _typing.TYPE_CHECKING:
    Provenance: _typing.TypeAlias = dict[str, "int | Provenance"]
else:
    Provenance: _typing.TypeAlias = dict[str, object]

FRONT_LAYER_INDEX = -1
