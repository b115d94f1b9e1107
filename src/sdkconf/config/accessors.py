"""Typed read access to one section of the effective configuration.

Every entity domain (tokens, ...) gets a SectionAccessor subclass naming
its section and its pydantic schema. Lookups go through the merged view
on every call, so overrides and resets are visible immediately.

Unknown identifiers are never an error: every getter returns None,
which is distinct from any configured value (including 0 and "").
"""

import collections.abc as _abc
import typing as _typing

import sdkconf.config.types as types
import sdkconf.utils as utils

_T = _typing.TypeVar("_T", bound=types.ConfigBase)


class SectionAccessor(_typing.Generic[_T]):
    """
    Read-only access to the records of one configuration section.

    Subclasses set `section` (the top-level key) and `schema` (the
    pydantic model for one record).
    """

    section: _typing.ClassVar[str]
    schema: type[_T]

    def __init__(self, dcm: utils.DeepChainMap) -> None:
        self._dcm = dcm

    def get_attribute(self, identifier: str, attribute: str) -> _typing.Any:
        """
        Get one merged attribute of one record.

        Returns:
            The value, or None if the record or attribute is not configured.
        """
        return self._dcm.get_path((self.section, identifier, attribute))

    def get(self, identifier: str) -> _T | None:
        """
        Get the whole merged record as a typed model.

        Attributes outside the schema are kept in `model_extra`.

        Returns:
            The record, or None if the identifier is unknown.
        """
        record = self._dcm.get_path((self.section, identifier))
        if not isinstance(record, utils.deep_chain_map.FrozenMapping):
            return None
        return self.schema.model_validate(record.thaw())

    def unknown_attributes(self, identifier: str) -> dict[str, _typing.Any]:
        """
        Attributes of one merged record that the schema does not declare.

        Reads the raw record, so a known attribute holding a value of the
        wrong type does not stop the others from being reported.
        """
        record = self._dcm.get_path((self.section, identifier))
        if not isinstance(record, utils.deep_chain_map.FrozenMapping):
            return {}
        known = self.schema.model_fields
        return {key: value for key, value in record.thaw().items() if key not in known}

    def identifiers(self) -> list[str]:
        """Identifiers known in any layer, sorted."""
        records = self._dcm.get_path((self.section,))
        if not isinstance(records, _abc.Mapping):
            return []
        return sorted(records)

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        return isinstance(self._dcm.get_path((self.section, identifier)), _abc.Mapping)


class TokenConfiguration(SectionAccessor[types.TokenConfig]):
    """
    Token attributes by symbol.

    Example:
        >>> store.tokens.get_decimals("USDC")
        6
        >>> store.tokens.get_decimals("NOPE") is None
        True
    """

    section = "tokens"
    schema = types.TokenConfig

    def get_decimals(self, symbol: str) -> int | None:
        """Decimals of a token, or None if not configured."""
        return self.get_attribute(symbol, "decimals")

    def get_address(self, symbol: str) -> str | None:
        """Contract address of a token, or None if not configured."""
        return self.get_attribute(symbol, "address")

    def get_name(self, symbol: str) -> str | None:
        """Display name of a token, or None if not configured."""
        return self.get_attribute(symbol, "name")

    def symbols(self) -> list[str]:
        """All configured token symbols, sorted."""
        return self.identifiers()
