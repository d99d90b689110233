"""Lookup input models.

AddressInput carries the fields that decide whether a lookup is addressable
(street-based or free-form) along with credentials and the candidate count.
AddressInputOptional carries fields the provider accepts but never requires.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class _LookupFields(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """Treat blank strings as absent so "not provided" has one spelling."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class AddressInput(_LookupFields):
    """Required-group input for a single street-address lookup.

    A lookup is addressable with street + city + state, street + zipcode,
    or free-form text alone.
    """

    auth_id: str | None = Field(
        default=None,
        description="Account auth id (falls back to client credentials when absent)",
        validation_alias=AliasChoices("auth_id", "auth-id"),
    )
    auth_token: str | None = Field(
        default=None,
        description="Account auth token (falls back to client credentials when absent)",
        validation_alias=AliasChoices("auth_token", "auth-token"),
    )
    street: str | None = Field(default=None, description="Street line, e.g. '1600 Amphitheatre Pkwy'")
    city: str | None = Field(default=None, description="City name")
    state: str | None = Field(default=None, description="State name or abbreviation")
    zipcode: str | None = Field(default=None, description="ZIP or ZIP+4")
    freeform: str | None = Field(
        default=None,
        description="Entire address in one string (no country)",
        validation_alias=AliasChoices("freeform", "free_form"),
    )
    candidates: int | None = Field(
        default=1,
        description="Maximum number of candidates to return (clamped to 1-10 on the wire, None means 1)",
    )

    @property
    def has_auth(self) -> bool:
        """True when both auth id and auth token are present."""
        return bool(self.auth_id and self.auth_token)

    @property
    def has_street_address(self) -> bool:
        """True when street plus city/state or zipcode is present."""
        if not self.street:
            return False
        return bool((self.city and self.state) or self.zipcode)


class AddressInputOptional(_LookupFields):
    """Optional input fields for a street-address lookup."""

    addressee: str | None = Field(default=None, description="Recipient, firm or company name")
    input_id: str | None = Field(default=None, description="Caller id echoed back in the output")
    lastline: str | None = Field(default=None, description="City, state and ZIP combined")
    secondary: str | None = Field(default=None, description="Apartment, suite or office number")
    street2: str | None = Field(default=None, description="Extra delivery information")
    urbanization: str | None = Field(default=None, description="Puerto Rico urbanization")
