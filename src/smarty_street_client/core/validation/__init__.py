"""Generic validation infrastructure."""

from smarty_street_client.core.validation.base import BaseValidator

__all__ = ["BaseValidator"]
