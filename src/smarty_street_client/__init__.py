"""smarty-street-client: a typed client for the SmartyStreets US Street API.

This package provides:
- Input models with the provider's addressing rules (street + city + state,
  street + zipcode, or free-form text)
- GET and batch POST request serialization
- Typed, immutable response candidates with components, metadata and analysis
- Errors returned as values on LookupResult, or raised on demand
- A typer CLI and optional pandas helpers

Quick Start:
    >>> from smarty_street_client import AddressInput, SmartyStreetClient
    >>> client = SmartyStreetClient(auth_id="...", auth_token="...")
    >>> result = client.lookup(
    ...     AddressInput(street="1600 Amphitheatre Pkwy", city="Mountain View", state="CA")
    ... )
    >>> if result.is_valid:
    ...     print(result.candidates[0].delivery_line_1)
    ... else:
    ...     print(result.error)

    # Batch lookups go out as one POST
    >>> result = client.lookup_batch(
    ...     [
    ...         AddressInput(freeform="1 Infinite Loop, Cupertino CA"),
    ...         AddressInput(street="350 5th Ave", zipcode="10118"),
    ...     ]
    ... )
    >>> result.for_input(1)
"""

from __future__ import annotations

from smarty_street_client.client import SmartyStreetClient, get_client, lookup, lookup_batch
from smarty_street_client.config import SmartyStreetConfig
from smarty_street_client.core import BaseValidator, ValidationIssue, ValidationResult
from smarty_street_client.models import (
    PACKAGE_NAME,
    AddressCandidate,
    AddressInput,
    AddressInputOptional,
    AddressValidationError,
    Analysis,
    ApiStatusError,
    AuthenticationError,
    BadRequestError,
    Components,
    DecodeError,
    DpvMatchCode,
    InputField,
    LengthMismatchError,
    LookupResult,
    Metadata,
    PaymentRequiredError,
    RequestTooLargeError,
    SmartyStreetError,
    TooManyRequestsError,
    TransportError,
    UnauthorizedError,
)
from smarty_street_client.request import (
    Credentials,
    build_batch,
    build_optional_params,
    build_query,
    clamp_candidates,
)
from smarty_street_client.response import classify_status, parse_response
from smarty_street_client.validation import AddressInputValidator, is_valid_input

__version__ = "0.1.0"
__package_name__ = "smarty-street-client"

__all__ = [
    # Version
    "__version__",
    "PACKAGE_NAME",
    # Primary interface
    "SmartyStreetClient",
    "SmartyStreetConfig",
    "get_client",
    "lookup",
    "lookup_batch",
    # Inputs
    "AddressInput",
    "AddressInputOptional",
    "InputField",
    "Credentials",
    # Response
    "AddressCandidate",
    "Components",
    "Metadata",
    "Analysis",
    "DpvMatchCode",
    "LookupResult",
    # Request building
    "build_query",
    "build_optional_params",
    "build_batch",
    "clamp_candidates",
    # Response parsing
    "parse_response",
    "classify_status",
    # Validation
    "AddressInputValidator",
    "BaseValidator",
    "ValidationIssue",
    "ValidationResult",
    "is_valid_input",
    # Errors
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
]
