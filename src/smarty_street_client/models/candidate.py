"""Response models for street-address candidates.

Each candidate is one standardized match for an input. The flat fields
identify the input and carry the formatted delivery lines; the nested
groups hold parsed components, postal/geographic metadata and delivery
point validation analysis. All models are frozen once parsed.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from smarty_street_client.models.enums import DpvMatchCode


class _ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class Components(_ResponseModel):
    """Parsed parts of the standardized address."""

    urbanization: str | None = Field(
        default=None,
        description="Puerto Rico urbanization name",
        validation_alias=AliasChoices("urbanization", "Urbanization"),
    )
    primary_number: str | None = Field(default=None, description="House, PO Box or building number")
    street_name: str | None = Field(default=None, description="Name of the street")
    street_predirection: str | None = Field(default=None, description="Directional before the name")
    street_postdirection: str | None = Field(default=None, description="Directional after the name")
    street_suffix: str | None = Field(default=None, description="Abbreviated street suffix")
    secondary_number: str | None = Field(default=None, description="Apartment or suite number")
    secondary_designator: str | None = Field(default=None, description="Apartment or suite label")
    extra_secondary_number: str | None = None
    extra_secondary_designator: str | None = None
    pmb_designator: str | None = Field(default=None, description="Private mailbox label")
    pmb_number: str | None = Field(default=None, description="Private mailbox number")
    city_name: str | None = Field(default=None, description="USPS preferred city name")
    default_city_name: str | None = None
    state_abbreviation: str | None = None
    zipcode: str | None = Field(default=None, description="5-digit ZIP")
    plus4_code: str | None = Field(default=None, description="ZIP+4 add-on")
    delivery_point: str | None = None
    delivery_point_check_digit: str | None = None

    @property
    def full_zipcode(self) -> str | None:
        """ZIP+4 when the add-on is known, otherwise the 5-digit ZIP."""
        if self.zipcode and self.plus4_code:
            return f"{self.zipcode}-{self.plus4_code}"
        return self.zipcode


class Metadata(_ResponseModel):
    """Postal and geographic metadata for a candidate."""

    record_type: str | None = None
    zip_type: str | None = None
    county_fips: str | None = None
    county_name: str | None = None
    carrier_route: str | None = None
    congressional_district: str | None = None
    building_default_indicator: str | None = None
    rdi: str | None = Field(default=None, description="Residential delivery indicator")
    elot_sequence: str | None = None
    elot_sort: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    precision: str | None = None
    time_zone: str | None = None
    utc_offset: float | None = None
    dst: bool | None = None

    @property
    def coordinates(self) -> tuple[float, float] | None:
        """(latitude, longitude) when both are present."""
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)


class Analysis(_ResponseModel):
    """Delivery point validation codes."""

    dpv_match_code: str | None = None
    dpv_footnotes: str | None = None
    dpv_cmra: str | None = None
    dpv_vacant: str | None = None
    active: str | None = None
    ews_match: str | None = None
    footnotes: str | None = None
    lacslink_code: str | None = Field(
        default=None,
        validation_alias=AliasChoices("lacslink_code", "lackslink_code"),
    )
    lacslink_indicator: str | None = None
    suitelink_match: str | None = None

    @property
    def dpv_match(self) -> DpvMatchCode | None:
        """The DPV match code as an enum, or None if unrecognized."""
        try:
            return DpvMatchCode(self.dpv_match_code or "")
        except ValueError:
            return None


class AddressCandidate(_ResponseModel):
    """One standardized-address match returned for an input."""

    input_id: str | None = None
    input_index: int = 0
    candidate_index: int = 0
    addressee: str | None = None
    delivery_line_1: str | None = None
    delivery_line_2: str | None = None
    last_line: str | None = None
    delivery_point_barcode: str | None = None
    components: Components = Field(default_factory=Components)
    metadata: Metadata = Field(default_factory=Metadata)
    analysis: Analysis = Field(default_factory=Analysis)

    @property
    def is_deliverable(self) -> bool:
        """True when DPV confirmed the primary number."""
        match = self.analysis.dpv_match
        return match is not None and match.is_confirmed

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return self.model_dump(mode="json")
