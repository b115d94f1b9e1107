"""Configuration type definitions for sdkconf.

Pydantic models describing one entity record per configuration section.
They give accessors a typed view of a merged record; they are never used
to reject input.

- TokenConfig: decimals, address, name

Design decision: All types use `extra="allow"` and every field is
optional. Overrides may carry any attribute, and a record may define only
some of them. Known fields are strict: a record built with `get()` holds
exactly the stored values (no "18" -> 18 coercion), the same values the
single-attribute getters return. Use `get_extra_fields()` to audit
unknown attributes.
"""

import typing as _typing

import pydantic as _pydantic

# =============================================================================
# Base class with introspection
# =============================================================================


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all entity config types.

    Unknown fields are preserved in `model_extra` rather than dropped,
    so typos in override files can be found with `get_extra_fields()`.
    """

    model_config = _pydantic.ConfigDict(extra="allow", frozen=True, strict=True)

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}

    def has_extra_fields(self) -> bool:
        """Check if this record has any unrecognized fields."""
        return bool(self.model_extra)


# =============================================================================
# Tokens
# =============================================================================


class TokenConfig(ConfigBase):
    """
    Known attributes of one token.

    YAML section: tokens.<symbol>.*
    """

    decimals: int | None = None
    """Number of decimals used by the token contract."""

    address: str | None = None
    """Contract address of the token."""

    name: str | None = None
    """Human-readable token name."""
