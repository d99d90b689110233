from smarty_street_client.validation.validators import (
    ADDRESS_MISSING_MESSAGE,
    STREET_INCOMPLETE_MESSAGE,
    AddressInputValidator,
    is_valid_input,
)

__all__ = [
    "AddressInputValidator",
    "is_valid_input",
    "ADDRESS_MISSING_MESSAGE",
    "STREET_INCOMPLETE_MESSAGE",
]
