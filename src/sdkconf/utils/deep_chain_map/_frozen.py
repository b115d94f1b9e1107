"""
Read-only views over merged configuration data.

Merged values handed out by DeepChainMap share structure with the layers
they came from. Wrapping them keeps callers from editing a layer by
accident: nested dicts become FrozenMapping, lists become tuples.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing


class FrozenMapping(_abc.Mapping[str, _typing.Any]):
    """
    Read-only view of a dict.

    Nested values are frozen on access, so the whole structure is
    immutable through the view.

    Example:
        >>> view = FrozenMapping({"WETH": {"decimals": 18}})
        >>> view["WETH"]["decimals"]
        18
        >>> view["WETH"]["decimals"] = 6  # TypeError
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Mapping[str, _typing.Any]) -> None:
        # Dicts are wrapped, not copied
        self._data = data if isinstance(data, dict) else dict(data)

    def __getitem__(self, key: str) -> _typing.Any:
        return freeze(self._data[key])

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with the same content."""
        if isinstance(other, _abc.Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")

    def thaw(self) -> dict[str, _typing.Any]:
        """Return an independent, mutable deep copy of the wrapped data."""
        return _copy.deepcopy(self._data)


def freeze(value: _typing.Any) -> _typing.Any:
    """
    Wrap mutable containers in read-only equivalents.

    - Mapping → FrozenMapping
    - list → tuple (items frozen recursively)
    - anything else → unchanged

    Example:
        >>> freeze({"a": [1, {"b": 2}]})
        FrozenMapping({'a': [1, {'b': 2}]})
        >>> freeze([1, 2])
        (1, 2)
    """
    if isinstance(value, FrozenMapping):
        return value
    if isinstance(value, _abc.Mapping):
        return FrozenMapping(value)
    if isinstance(value, list):
        return tuple(freeze(item) for item in value)
    return value
