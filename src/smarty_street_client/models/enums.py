"""Transport field names and response code enumerations."""

from __future__ import annotations

from enum import Enum


class InputField(str, Enum):
    """Field names accepted by the street-address endpoint, in wire order."""

    STREET = "street"
    CITY = "city"
    STATE = "state"
    ZIPCODE = "zipcode"
    CANDIDATES = "candidates"
    ADDRESSEE = "addressee"
    INPUT_ID = "input_id"
    LASTLINE = "lastline"
    SECONDARY = "secondary"
    STREET2 = "street2"
    URBANIZATION = "urbanization"


# Optional fields in the order they are appended to a request
OPTIONAL_FIELDS: list[str] = [
    InputField.ADDRESSEE.value,
    InputField.INPUT_ID.value,
    InputField.LASTLINE.value,
    InputField.SECONDARY.value,
    InputField.STREET2.value,
    InputField.URBANIZATION.value,
]

AUTH_ID_PARAM = "auth-id"
AUTH_TOKEN_PARAM = "auth-token"


class DpvMatchCode(str, Enum):
    """Delivery Point Validation match codes from the analysis block."""

    CONFIRMED = "Y"
    NOT_CONFIRMED = "N"
    SECONDARY_IGNORED = "S"
    SECONDARY_MISSING = "D"
    NOT_APPLICABLE = ""

    @property
    def is_confirmed(self) -> bool:
        """True when the primary number was confirmed deliverable."""
        return self in (
            DpvMatchCode.CONFIRMED,
            DpvMatchCode.SECONDARY_IGNORED,
            DpvMatchCode.SECONDARY_MISSING,
        )
