from __future__ import annotations

from smarty_street_client.core import BaseValidator, ValidationResult
from smarty_street_client.models import AddressInput

STREET_INCOMPLETE_MESSAGE = (
    "Either street + city + state OR street + zipcode required if not using freeform addressing"
)
ADDRESS_MISSING_MESSAGE = "Street address OR freeform required"


class AddressInputValidator(BaseValidator[AddressInput]):
    """Checks that an input is addressable.

    Accepts street + city + state, street + zipcode, or free-form text.
    Only field presence is checked; the provider does the real matching.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "address_input"

    def validate(self, address: AddressInput) -> ValidationResult:
        """Validate the field combination of an input.

        Args:
            address: Input to validate.

        Returns:
            ValidationResult with at most one issue.
        """
        result = ValidationResult(is_valid=True)
        if address.has_street_address or address.freeform:
            return result

        if address.street:
            result.add_error("street", STREET_INCOMPLETE_MESSAGE, address.street)
        else:
            result.add_error("street", ADDRESS_MISSING_MESSAGE)
        return result


_default_validator = AddressInputValidator()


def is_valid_input(address: AddressInput) -> bool:
    """Return True if ``address`` can be submitted to the API."""
    return _default_validator.validate(address).is_valid
