from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

import httpx

from smarty_street_client.config import SmartyStreetConfig
from smarty_street_client.core import ValidationIssue, ValidationResult
from smarty_street_client.models import (
    AddressCandidate,
    AddressInput,
    AddressInputOptional,
    AddressValidationError,
    ApiStatusError,
    DecodeError,
    LookupResult,
    SmartyStreetError,
    TransportError,
)
from smarty_street_client.request import (
    Credentials,
    build_batch,
    build_query,
    encode_params,
    resolve_credentials,
)
from smarty_street_client.response import parse_response

logger = logging.getLogger(__name__)


class SmartyStreetClient:
    """Synchronous client for the US street-address endpoint.

    Single lookups are sent as GET requests; batches are POSTed as a JSON
    array. Pass ``transport`` to route requests somewhere other than the
    network (e.g. ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        auth_id: Optional[str] = None,
        auth_token: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[SmartyStreetConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config or SmartyStreetConfig()
        self.base_url = base_url or self._config.base_url
        self._timeout = self._config.timeout if timeout is None else timeout

        if auth_id and auth_token:
            self._credentials: Optional[Credentials] = Credentials(auth_id, auth_token)
        else:
            self._credentials = self._config.credentials

        self._client = httpx.Client(timeout=self._timeout, transport=transport)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> SmartyStreetClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, method: str, query: str, body: Optional[list[dict[str, Any]]] = None) -> httpx.Response:
        url = f"{self.base_url}?{query}"
        logger.debug("%s %s", method, self.base_url)
        try:
            if body is None:
                return self._client.get(url)
            return self._client.post(
                url,
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise TransportError.create(str(exc), {"method": method}) from exc

    def get_candidates(
        self,
        address: AddressInput,
        optional: Optional[AddressInputOptional] = None,
    ) -> list[AddressCandidate]:
        """Look up one address with a GET request.

        Raises:
            SmartyStreetError: On invalid input, missing credentials,
                transport failure, non-200 status or an undecodable body.
        """
        credentials = resolve_credentials([address], self._credentials)
        query = build_query(address, optional, credentials)
        response = self._send("GET", query)
        return parse_response(response.status_code, response.content)

    def post_candidates(
        self,
        addresses: Sequence[AddressInput],
        optionals: Optional[Sequence[Optional[AddressInputOptional]]] = None,
    ) -> list[AddressCandidate]:
        """Look up a batch of addresses with a single POST request.

        Raises:
            SmartyStreetError: On invalid input, length mismatch, missing
                credentials, transport failure, non-200 status or an
                undecodable body.
        """
        body = build_batch(addresses, optionals)
        credentials = resolve_credentials(addresses, self._credentials)
        response = self._send("POST", encode_params(credentials.as_params()), body)
        return parse_response(response.status_code, response.content)

    def lookup(
        self,
        address: AddressInput,
        optional: Optional[AddressInputOptional] = None,
    ) -> LookupResult:
        """Look up one address, returning errors as values."""
        try:
            candidates = self.get_candidates(address, optional)
        except SmartyStreetError as exc:
            return _error_result(exc)
        return LookupResult(candidates=candidates, status_code=200)

    def lookup_batch(
        self,
        addresses: Sequence[AddressInput],
        optionals: Optional[Sequence[Optional[AddressInputOptional]]] = None,
    ) -> LookupResult:
        """Look up a batch of addresses, returning errors as values."""
        try:
            candidates = self.post_candidates(addresses, optionals)
        except SmartyStreetError as exc:
            return _error_result(exc)
        return LookupResult(candidates=candidates, status_code=200)


def _error_result(error: SmartyStreetError) -> LookupResult:
    validation: Optional[ValidationResult] = None
    status_code: Optional[int] = None

    if isinstance(error, AddressValidationError):
        validation = ValidationResult(is_valid=False)
        for issue in error.issues:
            validation.errors.append(ValidationIssue(**issue))
    elif isinstance(error, (ApiStatusError, DecodeError)):
        status_code = error.status_code

    logger.debug("Lookup failed (%s): %s", error.type, error)
    return LookupResult(error=error, status_code=status_code, validation=validation)


_default_client: Optional[SmartyStreetClient] = None


def get_client(
    *,
    base_url: Optional[str] = None,
    auth_id: Optional[str] = None,
    auth_token: Optional[str] = None,
) -> SmartyStreetClient:
    """Get the shared client, rebuilding it when overrides are given."""
    global _default_client

    if _default_client is None or any(v is not None for v in (base_url, auth_id, auth_token)):
        _default_client = SmartyStreetClient(
            base_url=base_url,
            auth_id=auth_id,
            auth_token=auth_token,
        )
    return _default_client


def lookup(
    address: AddressInput,
    optional: Optional[AddressInputOptional] = None,
    *,
    client: Optional[SmartyStreetClient] = None,
) -> LookupResult:
    """Convenience wrapper around ``SmartyStreetClient.lookup``."""
    return (client or get_client()).lookup(address, optional)


def lookup_batch(
    addresses: Sequence[AddressInput],
    optionals: Optional[Sequence[Optional[AddressInputOptional]]] = None,
    *,
    client: Optional[SmartyStreetClient] = None,
) -> LookupResult:
    """Convenience wrapper around ``SmartyStreetClient.lookup_batch``."""
    return (client or get_client()).lookup_batch(addresses, optionals)
