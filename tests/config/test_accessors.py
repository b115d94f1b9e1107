"""Tests for typed section accessors."""

import pydantic as _pydantic
import pytest as _pytest

import sdkconf.config as config


class TestTokenConfiguration:
    """store.tokens getters."""

    def test_known_token_attributes(self, store: config.ConfigurationStore) -> None:
        tokens = store.tokens

        assert tokens.get_decimals("TokenA") == 18
        assert tokens.get_name("TokenA") == "Token A"
        assert tokens.get_address("TokenB") == "0x00000000000000000000000000000000000000b0"

    @_pytest.mark.parametrize("symbol", ["Unknown", "", "tokena", "TokenA ", "δ"])
    def test_unknown_token_is_absent_everywhere(
        self, store: config.ConfigurationStore, symbol: str
    ) -> None:
        """Every getter returns None for a symbol in neither layer."""
        tokens = store.tokens

        assert tokens.get_decimals(symbol) is None
        assert tokens.get_address(symbol) is None
        assert tokens.get_name(symbol) is None
        assert tokens.get(symbol) is None
        assert symbol not in tokens

    def test_missing_attribute_is_absent(self, store: config.ConfigurationStore) -> None:
        """A known token without an address reports None for it."""
        assert store.tokens.get_address("TokenA") is None

    def test_zero_decimals_distinct_from_absent(
        self, store: config.ConfigurationStore
    ) -> None:
        """0 decimals is a real value, not the absent marker."""
        store.update_configuration({"tokens": {"Zero": {"decimals": 0}}})

        assert store.tokens.get_decimals("Zero") == 0
        assert store.tokens.get_decimals("Zero") is not None

    def test_get_returns_typed_record(self, store: config.ConfigurationStore) -> None:
        """get() merges both layers into a TokenConfig."""
        store.update_configuration({"tokens": {"TokenA": {"address": "0xa", "color": "red"}}})

        record = store.tokens.get("TokenA")

        assert isinstance(record, config.TokenConfig)
        assert record.decimals == 18
        assert record.address == "0xa"
        assert record.name == "Token A"
        assert record.get_extra_fields() == {"color": "red"}

    def test_symbols_lists_both_layers(self, store: config.ConfigurationStore) -> None:
        store.update_configuration({"tokens": {"AAA": {"decimals": 1}}})

        assert store.tokens.symbols() == ["AAA", "TokenA", "TokenB"]
        assert "AAA" in store.tokens

        store.reset_configuration()
        assert store.tokens.symbols() == ["TokenA", "TokenB"]

    def test_accessor_sees_updates_immediately(
        self, store: config.ConfigurationStore
    ) -> None:
        """An accessor held before an update observes it (no caching)."""
        tokens = store.tokens

        store.update_configuration({"tokens": {"TokenA": {"decimals": 2}}})

        assert tokens.get_decimals("TokenA") == 2

    def test_get_agrees_with_attribute_getter(
        self, store: config.ConfigurationStore
    ) -> None:
        """A numeric string stays a string and is not coerced by get()."""
        store.update_configuration({"tokens": {"TokenA": {"decimals": "18"}}})

        assert store.tokens.get_decimals("TokenA") == "18"
        with _pytest.raises(_pydantic.ValidationError):
            store.tokens.get("TokenA")

    def test_unknown_attributes_of_one_record(
        self, store: config.ConfigurationStore
    ) -> None:
        store.update_configuration({"tokens": {"TokenA": {"decimals": "many", "decimal": 6}}})

        assert store.tokens.unknown_attributes("TokenA") == {"decimal": 6}
        assert store.tokens.unknown_attributes("TokenB") == {}
        assert store.tokens.unknown_attributes("NOPE") == {}

    def test_non_string_membership(self, store: config.ConfigurationStore) -> None:
        assert 18 not in store.tokens


class TestSectionAccessor:
    """SectionAccessor is reusable for other entity domains."""

    def test_custom_section(self) -> None:
        """A subclass only names its section and schema."""

        class PoolConfig(config.ConfigBase):
            fee: int | None = None

        class PoolConfiguration(config.SectionAccessor[PoolConfig]):
            section = "pools"
            schema = PoolConfig

        store = config.ConfigurationStore({"pools": {"A-B": {"fee": 30}}})
        pools = PoolConfiguration(store._dcm)

        assert pools.get_attribute("A-B", "fee") == 30
        assert pools.get("A-B") == PoolConfig(fee=30)

        store.update_configuration({"pools": {"A-B": {"fee": 5}}})
        assert pools.get_attribute("A-B", "fee") == 5
        assert pools.get("B-C") is None

    def test_missing_section(self) -> None:
        """A store without a tokens section has no tokens at all."""
        store = config.ConfigurationStore({"other": {}})

        assert store.tokens.symbols() == []
        assert store.tokens.get_decimals("TokenA") is None

        store.update_configuration({"tokens": {"TokenA": {"decimals": 4}}})
        assert store.tokens.get_decimals("TokenA") == 4
