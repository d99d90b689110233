"""Lookup input, response and error models.

Re-exports all public symbols so callers can import from
``smarty_street_client.models`` directly.
"""

from __future__ import annotations

from smarty_street_client.core import ValidationResult
from smarty_street_client.models.candidate import (
    AddressCandidate,
    Analysis,
    Components,
    Metadata,
)
from smarty_street_client.models.enums import (
    AUTH_ID_PARAM,
    AUTH_TOKEN_PARAM,
    OPTIONAL_FIELDS,
    DpvMatchCode,
    InputField,
)
from smarty_street_client.models.errors import (
    PACKAGE_NAME,
    AddressValidationError,
    ApiStatusError,
    AuthenticationError,
    BadRequestError,
    DecodeError,
    LengthMismatchError,
    PaymentRequiredError,
    RequestTooLargeError,
    SmartyStreetError,
    TooManyRequestsError,
    TransportError,
    UnauthorizedError,
)
from smarty_street_client.models.inputs import AddressInput, AddressInputOptional
from smarty_street_client.models.results import LookupResult

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "SmartyStreetError",
    "AddressValidationError",
    "AuthenticationError",
    "LengthMismatchError",
    "TransportError",
    "DecodeError",
    "ApiStatusError",
    "BadRequestError",
    "UnauthorizedError",
    "PaymentRequiredError",
    "RequestTooLargeError",
    "TooManyRequestsError",
    # Enums and constants
    "InputField",
    "OPTIONAL_FIELDS",
    "AUTH_ID_PARAM",
    "AUTH_TOKEN_PARAM",
    "DpvMatchCode",
    # Inputs
    "AddressInput",
    "AddressInputOptional",
    # Response
    "AddressCandidate",
    "Components",
    "Metadata",
    "Analysis",
    # Results
    "LookupResult",
    # Re-exported from core
    "ValidationResult",
]
