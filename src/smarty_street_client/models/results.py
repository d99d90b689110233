"""Result class for street-address lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from smarty_street_client.core import ValidationResult

if TYPE_CHECKING:
    from smarty_street_client.models.candidate import AddressCandidate


@dataclass
class LookupResult:
    """Outcome of a single or batch lookup.

    Errors are returned as values: ``error`` holds the SmartyStreetError that
    stopped the lookup, and ``candidates`` is empty in that case.
    """

    candidates: list[AddressCandidate] = field(default_factory=list)
    error: Exception | None = None
    status_code: int | None = None
    validation: ValidationResult | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the lookup completed and its inputs passed validation."""
        if self.error is not None:
            return False
        if self.validation is not None:
            return self.validation.is_valid
        return True

    @property
    def is_empty(self) -> bool:
        """True when the lookup succeeded but the provider found no match."""
        return self.is_valid and not self.candidates

    def raise_for_error(self) -> list[AddressCandidate]:
        """Raise the stored error, if any, otherwise return the candidates."""
        if self.error is not None:
            raise self.error
        return self.candidates

    def for_input(self, input_index: int) -> list[AddressCandidate]:
        """Get the candidates matched to the input at ``input_index``."""
        return [c for c in self.candidates if c.input_index == input_index]

    def to_records(self) -> list[dict[str, Any]]:
        """Convert candidates to JSON-ready dictionaries, preserving order."""
        return [c.to_dict() for c in self.candidates]
