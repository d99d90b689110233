"""Request serialization for the street-address endpoint.

Inputs are flattened into ordered (name, value) pairs. GET requests encode
the pairs as a query string; POST requests send one JSON object per input
inside a JSON array. Free-form text travels in the same ``street`` field as a
discrete street line, so only one of them is ever serialized.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from smarty_street_client.models import (
    AUTH_ID_PARAM,
    AUTH_TOKEN_PARAM,
    OPTIONAL_FIELDS,
    AddressInput,
    AddressInputOptional,
    AddressValidationError,
    AuthenticationError,
    InputField,
    LengthMismatchError,
    ValidationResult,
)
from smarty_street_client.validation import AddressInputValidator

logger = logging.getLogger(__name__)

MIN_CANDIDATES = 1
MAX_CANDIDATES = 10

Params = list[tuple[str, str]]

_validator = AddressInputValidator()


@dataclass(frozen=True)
class Credentials:
    """An auth-id/auth-token pair."""

    auth_id: str
    auth_token: str

    def as_params(self) -> Params:
        """Query parameters that authenticate a request."""
        return [(AUTH_ID_PARAM, self.auth_id), (AUTH_TOKEN_PARAM, self.auth_token)]


def clamp_candidates(count: int | None) -> int:
    """Confine a requested candidate count to the provider's 1-10 range.

    Values of zero or below (and None) default to 1.
    """
    if count is None or count < MIN_CANDIDATES:
        return MIN_CANDIDATES
    return min(count, MAX_CANDIDATES)


def _raise_for_validation(validation: ValidationResult, message: str) -> None:
    if validation.is_valid:
        return
    raise AddressValidationError.create(
        message,
        {"issues": [issue.to_dict() for issue in validation.errors]},
    )


def select_address_params(address: AddressInput) -> Params:
    """Serialize the addressing fields of an input.

    Street-based addressing wins when it is complete; otherwise free-form
    text is sent as the street. City and state are only sent together.

    Raises:
        AddressValidationError: If the input is not addressable.
    """
    validation = _validator.validate(address)
    _raise_for_validation(validation, "; ".join(validation.messages()))

    if not address.has_street_address:
        return [(InputField.STREET.value, address.freeform or "")]

    params: Params = [(InputField.STREET.value, address.street or "")]
    if address.city and address.state:
        params.append((InputField.CITY.value, address.city))
        params.append((InputField.STATE.value, address.state))
    if address.zipcode:
        params.append((InputField.ZIPCODE.value, address.zipcode))
    return params


def build_address_params(address: AddressInput) -> Params:
    """Serialize addressing fields followed by the clamped candidate count."""
    params = select_address_params(address)
    params.append((InputField.CANDIDATES.value, str(clamp_candidates(address.candidates))))
    return params


def build_optional_params(optional: AddressInputOptional | None) -> Params:
    """Serialize the optional fields that are present, in wire order."""
    if optional is None:
        return []
    params: Params = []
    for name in OPTIONAL_FIELDS:
        value = getattr(optional, name)
        if value is not None:
            params.append((name, value))
    return params


def encode_params(params: Params) -> str:
    """Percent-encode pairs into a query string (spaces become '+')."""
    return urlencode(params)


def build_query(
    address: AddressInput,
    optional: AddressInputOptional | None = None,
    credentials: Credentials | None = None,
) -> str:
    """Build the full GET query string for one lookup.

    Args:
        address: Addressing input.
        optional: Optional fields, or None.
        credentials: Credentials to lead the query with, or None to omit them.

    Returns:
        Encoded query string without the leading '?'.

    Raises:
        AddressValidationError: If the input is not addressable.
    """
    params: Params = credentials.as_params() if credentials else []
    params.extend(build_address_params(address))
    params.extend(build_optional_params(optional))
    return encode_params(params)


def build_entry(
    address: AddressInput,
    optional: AddressInputOptional | None = None,
) -> dict[str, Any]:
    """Build the JSON object for one POST entry.

    Raises:
        AddressValidationError: If the input is not addressable.
    """
    entry: dict[str, Any] = dict(select_address_params(address))
    entry[InputField.CANDIDATES.value] = clamp_candidates(address.candidates)
    entry.update(build_optional_params(optional))
    return entry


def build_batch(
    addresses: Sequence[AddressInput],
    optionals: Sequence[AddressInputOptional | None] | None = None,
) -> list[dict[str, Any]]:
    """Build the JSON array body for a POST lookup.

    ``optionals`` must be None or exactly as long as ``addresses``; a None
    entry inside it means that input has no optional fields. Every input is
    validated before any error is raised so the error lists all of them.

    Raises:
        LengthMismatchError: If the two sequences differ in length.
        AddressValidationError: If the batch is empty or any input is invalid.
    """
    if optionals is not None and len(optionals) != len(addresses):
        raise LengthMismatchError.create(
            "Lengths of inputs and optional inputs should be equal OR optional inputs should be None",
            {"inputs": len(addresses), "optionals": len(optionals)},
        )
    if not addresses:
        raise AddressValidationError.create("Batch must contain at least one input", {"issues": []})

    validation = _validator.validate_many(addresses)
    if not validation.is_valid:
        logger.debug("Batch rejected: %d of %d inputs invalid", len(validation.errors), len(addresses))
    _raise_for_validation(
        validation,
        "Invalid batch request: " + "; ".join(validation.messages()),
    )
    return [
        build_entry(address, optionals[index] if optionals is not None else None)
        for index, address in enumerate(addresses)
    ]


def resolve_credentials(
    addresses: Sequence[AddressInput],
    fallback: Credentials | None = None,
) -> Credentials:
    """Pick credentials from the first input carrying both auth fields.

    Args:
        addresses: Inputs to search.
        fallback: Credentials used when no input carries any.

    Raises:
        AuthenticationError: If no complete credential pair is available.
    """
    for address in addresses:
        if address.has_auth:
            return Credentials(address.auth_id or "", address.auth_token or "")
    if fallback is not None:
        return fallback
    raise AuthenticationError.create("Authentication parameters required")
