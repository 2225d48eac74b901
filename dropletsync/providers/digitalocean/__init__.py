"""DigitalOcean droplet reconciliation.

Example:
    from dropletsync.providers.digitalocean import ConfigCredentials, DropletConnector

    connector = DropletConnector(credentials=ConfigCredentials(), store=store)

    async with await connector.connect(record) as external:
        observation = await external.observe(record)
"""

from dropletsync.providers.digitalocean.client import (
    DigitalOceanClient,
    DigitalOceanError,
    DropletAPI,
    DropletNotFoundError,
)
from dropletsync.providers.digitalocean.config import DigitalOcean
from dropletsync.providers.digitalocean.credentials import ConfigCredentials, EnvCredentials
from dropletsync.providers.digitalocean.external import DropletConnector, DropletExternal

__all__ = [
    "ConfigCredentials",
    "DigitalOcean",
    "DigitalOceanClient",
    "DigitalOceanError",
    "DropletAPI",
    "DropletConnector",
    "DropletExternal",
    "DropletNotFoundError",
    "EnvCredentials",
]
