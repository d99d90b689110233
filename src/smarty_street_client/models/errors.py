"""Error classes for street-address lookups.

Every error raised by this package is a ``SmartyStreetError``, which inherits
from PydanticCustomError so it carries a machine-readable ``type`` code and a
``context`` dict tagged with the package name. Subclasses narrow the error
kind so callers can catch exactly what they care about.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "smarty_street_client"


class SmartyStreetError(PydanticCustomError):
    """Base error for smarty_street_client.

    Construct instances through :meth:`create` so the type code and package
    context are filled in consistently.
    """

    error_type: ClassVar[str] = "smarty_street_error"

    @classmethod
    def create(cls, message: str, context: dict[str, Any] | None = None) -> SmartyStreetError:
        """Build an error of this class with package context.

        Args:
            message: Error message.
            context: Additional context merged into the error context.

        Returns:
            Instance of ``cls``.
        """
        return cls(cls.error_type, message, {"package": PACKAGE_NAME, **(context or {})})

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict[str, Any] | None = None
    ) -> SmartyStreetError:
        """Wrap a pydantic.ValidationError (or any exception) as this class.

        Args:
            error: The exception to wrap.
            context: Additional context to include.

        Returns:
            Instance of ``cls`` whose message summarizes the wrapped errors.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            message = "; ".join(e.get("msg", str(e)) for e in error.errors())
        else:
            message = str(error)
        return cls.create(message, context)


class AddressValidationError(SmartyStreetError):
    """Input fields do not form a valid street-based or free-form address."""

    error_type: ClassVar[str] = "address_validation"

    @property
    def issues(self) -> list[dict[str, Any]]:
        """Per-field (and per-entry, for batches) issues behind this error."""
        return list((self.context or {}).get("issues", []))


class AuthenticationError(SmartyStreetError):
    """No complete auth-id/auth-token pair was supplied."""

    error_type: ClassVar[str] = "authentication"


class LengthMismatchError(SmartyStreetError):
    """Batch inputs and optional inputs have different lengths."""

    error_type: ClassVar[str] = "length_mismatch"


class TransportError(SmartyStreetError):
    """The HTTP request could not be completed."""

    error_type: ClassVar[str] = "transport"


class DecodeError(SmartyStreetError):
    """A 200 response body could not be decoded into candidates."""

    error_type: ClassVar[str] = "decode"

    @property
    def status_code(self) -> int | None:
        """HTTP status code of the response whose body failed to decode."""
        return (self.context or {}).get("status_code")


class ApiStatusError(SmartyStreetError):
    """The API answered with a non-200 status code."""

    error_type: ClassVar[str] = "unexpected_status"

    @property
    def status_code(self) -> int | None:
        """HTTP status code that produced this error."""
        return (self.context or {}).get("status_code")


class BadRequestError(ApiStatusError):
    """400: the request payload was malformed."""

    error_type: ClassVar[str] = "bad_request"


class UnauthorizedError(ApiStatusError):
    """401: credentials were rejected."""

    error_type: ClassVar[str] = "unauthorized"


class PaymentRequiredError(ApiStatusError):
    """402: the account has no active subscription."""

    error_type: ClassVar[str] = "payment_required"


class RequestTooLargeError(ApiStatusError):
    """413: the request body exceeded the provider's size limit."""

    error_type: ClassVar[str] = "request_too_large"


class TooManyRequestsError(ApiStatusError):
    """429: the provider is throttling this account."""

    error_type: ClassVar[str] = "too_many_requests"
