"""
DeepChainMap: a ChainMap-like mapping that deep-merges its layers on read.

Unlike collections.ChainMap, which returns the value from the first map
containing a key, DeepChainMap recursively merges nested dicts from every
layer that holds the key.

Architecture:
- Source layers: Stored by reference, never modified by DCM
- Front layer: Runtime overrides written through update(), cleared by reset()

Read semantics:
- Dicts: Returned as FrozenMapping (merged, read-only)
- Lists: Returned as tuples (replaced whole, never merged)
- Scalars: Returned directly

Every read re-merges from the layers. There is no cache to invalidate.

Thread safety: NOT thread-safe for concurrent writes. Read-only
concurrent access is safe.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing

import sdkconf.utils.deep_chain_map._frozen as _frozen
import sdkconf.utils.deep_chain_map._types as _types


class DeepChainMap(_abc.Mapping[str, _typing.Any]):
    """
    A read-mostly mapping with deep merging at lookup time.

    Example:
        >>> builtin = {"tokens": {"WETH": {"decimals": 18, "name": "Wrapped Ether"}}}
        >>> dcm = DeepChainMap(builtin)
        >>> dcm.update({"tokens": {"WETH": {"decimals": 6}}})
        >>> dict(dcm["tokens"]["WETH"])
        {'decimals': 6, 'name': 'Wrapped Ether'}
        >>> dcm.reset()
        >>> dcm["tokens"]["WETH"]["decimals"]
        18

    Provenance tracking:
        >>> dcm.update({"tokens": {"WETH": {"decimals": 6}}})
        >>> dcm.get_with_provenance("tokens")[1]
        {'WETH': {'decimals': -1, 'name': 0}}
        # -1 = front layer, 0.. = index into source layers

    Args:
        *maps: Dicts in priority order (first = highest priority).

    Note:
        Source layers are stored **by reference**. DCM never writes to them,
        but edits made to them by their owner are visible on the next read.
        Pass a deep copy if snapshot semantics are needed.

        Merge rules, applied recursively:

        - dict over dict: merged key by key
        - anything else: the higher-priority value replaces the lower one
    """

    def __init__(self, *maps: _types.Layer) -> None:
        self._layers: list[_types.Layer] = list(maps)
        self._front_layer: _types.Layer = {}

    @property
    def source_layers(self) -> list[_frozen.FrozenMapping]:
        """Read-only views of the source layers, highest priority first."""
        return [_frozen.FrozenMapping(layer) for layer in self._layers]

    @property
    def front_layer(self) -> _frozen.FrozenMapping:
        """Read-only view of the front layer (runtime overrides)."""
        return _frozen.FrozenMapping(self._front_layer)

    @property
    def is_modified(self) -> bool:
        """True if the front layer holds any override."""
        return bool(self._front_layer)

    # =========================================================================
    # Writes
    # =========================================================================

    def update(self, partial: _abc.Mapping[str, _typing.Any]) -> None:
        """
        Deep-merge a partial structure into the front layer.

        Keys not mentioned in ``partial`` keep their current overrides.
        Values are deep-copied, so later edits to ``partial`` have no effect.

        Args:
            partial: Nested mapping of overrides.

        Raises:
            TypeError: If ``partial`` is not a mapping or a key is not a string.
        """
        if not isinstance(partial, _abc.Mapping):
            raise TypeError(
                f"update() requires a mapping, got {type(partial).__name__}"
            )
        self._merge_into(self._front_layer, partial, ())

    def reset(self) -> None:
        """
        Discard all runtime overrides.

        Source layers are untouched; reads fall back to them.
        """
        self._front_layer.clear()

    def _merge_into(
        self,
        target: _types.Layer,
        partial: _abc.Mapping[str, _typing.Any],
        path: _types.Path,
    ) -> None:
        """Recursively merge ``partial`` into ``target`` in place."""
        for key, value in partial.items():
            if not isinstance(key, str):
                location = ".".join(path) or "<root>"
                raise TypeError(
                    f"Keys must be strings, got {type(key).__name__} at {location}"
                )
            if isinstance(value, _abc.Mapping):
                existing = target.get(key)
                if not isinstance(existing, dict):
                    existing = target[key] = {}
                self._merge_into(existing, value, path + (key,))
            else:
                target[key] = _copy.deepcopy(value)

    # =========================================================================
    # Reads
    # =========================================================================

    def _candidates(self, key: str) -> list[tuple[int, _typing.Any]]:
        """Collect (layer_index, value) for ``key``, highest priority first."""
        found: list[tuple[int, _typing.Any]] = []
        if key in self._front_layer:
            found.append((_types.FRONT_LAYER_INDEX, self._front_layer[key]))
        for index, layer in enumerate(self._layers):
            if key in layer:
                found.append((index, layer[key]))
        return found

    def __getitem__(self, key: str) -> _typing.Any:
        """
        Get the merged value for a top-level key.

        Raises:
            KeyError: If no layer holds the key.
        """
        candidates = self._candidates(key)
        if not candidates:
            raise KeyError(key)
        value, _ = _merge_candidates(candidates)
        return _frozen.freeze(value)

    def __iter__(self) -> _typing.Iterator[str]:
        """Iterate over unique keys, lowest-priority layer order first."""
        keys: dict[str, None] = {}
        for layer in reversed(self._layers):
            keys.update(dict.fromkeys(layer))
        keys.update(dict.fromkeys(self._front_layer))
        return iter(keys)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key in self._front_layer or any(key in layer for layer in self._layers)

    def __repr__(self) -> str:
        return f"DeepChainMap(front={self._front_layer!r}, layers={self._layers!r})"

    def get_path(
        self,
        path: _types.Path,
        default: _typing.Any = None,
    ) -> _typing.Any:
        """
        Get the merged value at a nested key path.

        Args:
            path: Keys from the root, e.g. ("tokens", "WETH", "decimals").
            default: Returned when any component of the path is missing.

        Returns:
            The merged (frozen) value, or ``default``.

        Raises:
            TypeError: If a path component is not a string.
        """
        for component in path:
            if not isinstance(component, str):
                raise TypeError(
                    f"Path components must be strings, got {type(component).__name__}"
                )
        if not path:
            return default

        current: _typing.Any = self
        for key in path:
            if not isinstance(current, _abc.Mapping) or key not in current:
                return default
            current = current[key]
        return current

    def get_with_provenance(
        self,
        key: str,
    ) -> tuple[_typing.Any, int | _types.Provenance]:
        """
        Get a merged value along with the layer each part came from.

        Returns:
            Tuple of (value, provenance). For a scalar, provenance is the
            layer index. For a dict, it mirrors the dict's shape with a
            layer index at each leaf.

        Raises:
            KeyError: If no layer holds the key.
        """
        candidates = self._candidates(key)
        if not candidates:
            raise KeyError(key)
        value, provenance = _merge_candidates(candidates)
        return _frozen.freeze(value), provenance

    def to_dict(self) -> dict[str, _typing.Any]:
        """Return the whole merged view as an independent plain dict."""
        result: dict[str, _typing.Any] = {}
        for key in self:
            value, _ = _merge_candidates(self._candidates(key))
            result[key] = _copy.deepcopy(value)
        return result


def _merge_candidates(
    candidates: list[tuple[int, _typing.Any]],
) -> tuple[_typing.Any, int | _types.Provenance]:
    """
    Merge values for one key, highest priority first.

    A dict merges with the dicts directly beneath it. The first non-dict
    below stops the merge, since a dict above masks it.

    Returns:
        Tuple of (merged value, provenance).
    """
    top_index, top_value = candidates[0]
    if not isinstance(top_value, dict):
        return top_value, top_index

    dicts: list[tuple[int, dict[str, _typing.Any]]] = []
    for index, value in candidates:
        if not isinstance(value, dict):
            break
        dicts.append((index, value))

    # Lowest priority first so base key order is kept
    keys: dict[str, None] = {}
    for _, layer in reversed(dicts):
        keys.update(dict.fromkeys(layer))

    result: dict[str, _typing.Any] = {}
    provenance: _types.Provenance = {}
    for key in keys:
        nested = [(index, layer[key]) for index, layer in dicts if key in layer]
        result[key], provenance[key] = _merge_candidates(nested)
    return result, provenance
