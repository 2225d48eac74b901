"""Async client for the DigitalOcean droplet API.

Uses pydo.aio for async operations. Returns TypedDicts directly.
This is the provider RPC boundary of the reconciliation core: one
outbound call per method, no retries, no caching.
"""

from __future__ import annotations

from typing import Any, Protocol, cast

from azure.core.exceptions import ResourceNotFoundError
from pydo.aio import Client as PyDOClient

from dropletsync.observability.logger import logger

from .types import DropletCreateRequest, DropletResponse

log = logger.bind(component="digitalocean-client")


class DigitalOceanError(Exception):
    """Error from DigitalOcean API."""


class DropletNotFoundError(DigitalOceanError):
    """The requested droplet does not exist."""

    def __init__(self, droplet_id: int) -> None:
        self.droplet_id = droplet_id
        super().__init__(f"droplet {droplet_id} not found")


def is_not_found(error: Exception) -> bool:
    """Whether a pydo/azure-core error is an HTTP 404, judged by status only."""
    if isinstance(error, ResourceNotFoundError):
        return True
    return getattr(error, "status_code", None) == 404


class DropletAPI(Protocol):
    """Outbound provider boundary used by the external client."""

    async def create_droplet(self, request: DropletCreateRequest) -> DropletResponse: ...

    async def get_droplet(self, droplet_id: int) -> DropletResponse: ...

    async def delete_droplet(self, droplet_id: int) -> None: ...

    async def close(self) -> None: ...


class DigitalOceanClient:
    """Async droplet client using pydo.aio.

    Example:
        async with DigitalOceanClient(token) as client:
            droplet = await client.get_droplet(123456)
    """

    def __init__(self, token: str, *, client: PyDOClient | None = None) -> None:
        self._client: PyDOClient | None = client or PyDOClient(token=token)

    async def __aenter__(self) -> DigitalOceanClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._client:
            await self._client.close()
            self._client = None

    @property
    def client(self) -> PyDOClient:
        if not self._client:
            raise RuntimeError("Client is closed.")
        return self._client

    # =========================================================================
    # Droplet Management
    # =========================================================================

    async def create_droplet(self, request: DropletCreateRequest) -> DropletResponse:
        """Create a single droplet.

        Raises:
            DigitalOceanError: On any API failure or an empty response.
        """
        droplets = self.client.droplets
        try:
            result = await droplets.create(body=dict(request))
        except Exception as e:
            raise DigitalOceanError(f"Failed to create droplet: {e}") from e

        droplet = result.get("droplet") if result else None
        if not droplet:
            raise DigitalOceanError("Failed to create droplet: empty response")
        log.debug("Created droplet {id} ({name})", id=droplet["id"], name=droplet.get("name"))
        return cast(DropletResponse, droplet)

    async def get_droplet(self, droplet_id: int) -> DropletResponse:
        """Get droplet details.

        Raises:
            DropletNotFoundError: If the droplet does not exist.
            DigitalOceanError: On any other API failure.
        """
        droplets = self.client.droplets
        try:
            result = await droplets.get(droplet_id=droplet_id)
        except Exception as e:
            if is_not_found(e):
                raise DropletNotFoundError(droplet_id) from e
            raise DigitalOceanError(f"Failed to get droplet: {e}") from e

        droplet = result.get("droplet") if result else None
        if not droplet:
            raise DropletNotFoundError(droplet_id)
        return cast(DropletResponse, droplet)

    async def delete_droplet(self, droplet_id: int) -> None:
        """Destroy a droplet.

        Raises:
            DropletNotFoundError: If the droplet does not exist.
            DigitalOceanError: On any other API failure.
        """
        droplets = self.client.droplets
        try:
            await droplets.destroy(droplet_id=droplet_id)
        except Exception as e:
            if is_not_found(e):
                raise DropletNotFoundError(droplet_id) from e
            raise DigitalOceanError(f"Failed to delete droplet: {e}") from e


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "DigitalOceanClient",
    "DigitalOceanError",
    "DropletAPI",
    "DropletNotFoundError",
    "is_not_found",
]
