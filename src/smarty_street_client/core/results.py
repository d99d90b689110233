"""Validation result containers.

These dataclasses collect field-level issues found while checking lookup
inputs. A single ValidationResult can aggregate issues from many inputs,
which is how batch requests report every invalid entry at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationIssue:
    """A single field-level validation problem."""

    field: str
    message: str
    value: Any = None
    # Position of the offending entry within a batch, if any
    index: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary (used for error context)."""
        return {
            "field": self.field,
            "message": self.message,
            "value": self.value,
            "index": self.index,
        }


@dataclass
class ValidationResult:
    """Outcome of validating one or more lookup inputs."""

    is_valid: bool = True
    errors: list[ValidationIssue] = field(default_factory=list)

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        index: int | None = None,
    ) -> None:
        """Record an issue and mark the result invalid.

        Args:
            field: Name of the offending field.
            message: Human-readable description.
            value: The problematic value (optional).
            index: Batch position of the entry (optional).
        """
        self.errors.append(ValidationIssue(field=field, message=message, value=value, index=index))
        self.is_valid = False

    def merge(self, other: ValidationResult, index: int | None = None) -> None:
        """Fold another result into this one.

        Args:
            other: Result to merge.
            index: If given, overrides the batch index of every merged issue.
        """
        for issue in other.errors:
            self.add_error(
                issue.field,
                issue.message,
                issue.value,
                index if index is not None else issue.index,
            )

    def messages(self) -> list[str]:
        """Get issue messages, prefixed with the batch index when known."""
        return [
            f"[{issue.index}] {issue.message}" if issue.index is not None else issue.message
            for issue in self.errors
        ]
