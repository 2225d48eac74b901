"""DigitalOcean provider configuration.

Immutable configuration dataclass for the DigitalOcean provider.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

from dropletsync.core.exceptions import CredentialError

# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class DigitalOcean:
    """DigitalOcean provider configuration.

    Example:
        >>> from dropletsync.providers.digitalocean import DigitalOcean
        >>> config = DigitalOcean(token_env="DO_TEAM_TOKEN")

    Args:
        token: API token. Takes precedence over ``token_env``.
        token_env: Environment variable holding the token. Default: DIGITALOCEAN_TOKEN.
    """

    token: str | None = None
    token_env: str = "DIGITALOCEAN_TOKEN"

    @property
    def type(self) -> Literal["digitalocean"]:
        return "digitalocean"

    def resolve_token(self) -> str:
        """Return the explicit token or the one found in ``token_env``.

        Raises:
            CredentialError: If neither is set.
        """
        token = self.token or os.environ.get(self.token_env)
        if not token:
            raise CredentialError(
                "DigitalOcean API token not found. "
                f"Set it in the provider config or the {self.token_env} environment variable."
            )
        return token


# =============================================================================
# Exports
# =============================================================================

__all__ = ["DigitalOcean"]
