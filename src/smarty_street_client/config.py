from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from smarty_street_client.request import Credentials

DEFAULT_BASE_URL = "https://api.smartystreets.com/street-address"


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    return float(value)


@dataclass
class SmartyStreetConfig:
    """Connection settings for the street-address API.

    Each field defaults from the environment so deployments can configure the
    client without code changes.
    """

    base_url: str = field(
        default_factory=lambda: os.getenv("SMARTY_STREET_URL", DEFAULT_BASE_URL)
    )
    auth_id: Optional[str] = field(default_factory=lambda: os.getenv("SMARTY_AUTH_ID") or None)
    auth_token: Optional[str] = field(
        default_factory=lambda: os.getenv("SMARTY_AUTH_TOKEN") or None
    )
    timeout: float = field(default_factory=lambda: _env_float("SMARTY_TIMEOUT", 10.0))

    @property
    def credentials(self) -> Optional[Credentials]:
        """Configured credentials, or None unless both parts are set."""
        if self.auth_id and self.auth_token:
            return Credentials(self.auth_id, self.auth_token)
        return None
