"""Validator base class shared by single and batch lookups."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from smarty_street_client.core.results import ValidationResult

T = TypeVar("T")


class BaseValidator(ABC, Generic[T]):
    """Checks one kind of request record.

    Subclasses implement ``validate`` for a single record; ``validate_many``
    runs it over a batch and tags every issue with the record's position.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in log messages."""
        ...

    @abstractmethod
    def validate(self, item: T) -> ValidationResult:
        """Return the issues found on ``item``."""
        ...

    def validate_many(self, items: Iterable[T]) -> ValidationResult:
        """Validate every item without stopping at the first failure.

        Args:
            items: Records in request order.

        Returns:
            One ValidationResult whose issues carry the index of the failing record.
        """
        combined = ValidationResult(is_valid=True)
        for index, item in enumerate(items):
            combined.merge(self.validate(item), index=index)
        return combined
