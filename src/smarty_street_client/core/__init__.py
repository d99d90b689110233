"""Domain-agnostic building blocks shared by the request and response layers.

Usage:
    from smarty_street_client.core import (
        BaseValidator,
        ValidationIssue,
        ValidationResult,
    )
"""

from __future__ import annotations

from smarty_street_client.core.results import ValidationIssue, ValidationResult
from smarty_street_client.core.validation import BaseValidator

__all__ = [
    "BaseValidator",
    "ValidationIssue",
    "ValidationResult",
]
