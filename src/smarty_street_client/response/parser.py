"""Response interpretation for the street-address endpoint."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from smarty_street_client.models import (
    AddressCandidate,
    ApiStatusError,
    BadRequestError,
    DecodeError,
    PaymentRequiredError,
    RequestTooLargeError,
    TooManyRequestsError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, tuple[type[ApiStatusError], str]] = {
    400: (BadRequestError, "Bad Request (Malformed Payload)"),
    401: (UnauthorizedError, "Unauthorized"),
    402: (PaymentRequiredError, "Payment Required"),
    413: (RequestTooLargeError, "Request Entity Too Large"),
    429: (TooManyRequestsError, "Too Many Requests"),
}

_candidate_list = TypeAdapter(list[AddressCandidate])


def classify_status(status_code: int) -> ApiStatusError | None:
    """Map an HTTP status code to an error.

    Returns None for 200. Codes without a dedicated class produce a generic
    ApiStatusError rather than passing silently.
    """
    if status_code == 200:
        return None
    error_cls, message = _STATUS_ERRORS.get(
        status_code, (ApiStatusError, f"Unexpected status code {status_code}")
    )
    return error_cls.create(message, {"status_code": status_code})  # type: ignore[return-value]


def decode_candidates(body: str | bytes, status_code: int = 200) -> list[AddressCandidate]:
    """Decode a JSON array body into candidates, preserving array order.

    ``status_code`` is recorded on the DecodeError so callers can tell a bad
    body from a request that never reached the API.

    Raises:
        DecodeError: If the body is not valid JSON or not an array of candidates.
    """
    try:
        candidates = _candidate_list.validate_json(body)
    except ValidationError as exc:
        raise DecodeError.from_validation_error(exc, {"status_code": status_code}) from exc
    logger.debug("Decoded %d candidates", len(candidates))
    return candidates


def parse_response(status_code: int, body: str | bytes) -> list[AddressCandidate]:
    """Interpret a response from the street-address endpoint.

    Args:
        status_code: HTTP status code.
        body: Raw response body.

    Returns:
        Candidates in the order the API returned them.

    Raises:
        ApiStatusError: For any non-200 status.
        DecodeError: If a 200 body cannot be decoded.
    """
    error = classify_status(status_code)
    if error is not None:
        logger.warning("Street-address API returned %d: %s", status_code, error)
        raise error
    return decode_candidates(body, status_code)
