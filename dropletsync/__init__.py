"""dropletsync - keep declarative droplet records in sync with DigitalOcean.

Example:

    from dropletsync import DropletConnector, EnvCredentials, apply_patch

    connector = DropletConnector(credentials=EnvCredentials(), store=store)

    async with await connector.connect(record) as external:
        observation = await external.observe(record)
        record = apply_patch(record, observation.patch)
        if not observation.resource_exists:
            creation = await external.create(record)
            record = apply_patch(record, creation.patch)
"""

from dropletsync.api import (
    Condition,
    DeletionPolicy,
    Droplet,
    DropletObservation,
    DropletParameters,
    DropletPatch,
    DropletSpec,
    DropletStatus,
    ExternalCreation,
    ExternalDeletion,
    ExternalObservation,
    ExternalUpdate,
    ObjectMeta,
    ProviderConfigRef,
    apply_patch,
)
from dropletsync.core.exceptions import (
    ConfigurationError,
    CreateError,
    CredentialError,
    DeleteError,
    DropletSyncError,
    ExternalError,
    IdentityTransitionError,
    ObserveError,
    UpdateError,
    WrongKindError,
)
from dropletsync.observability.logging import LogConfig
from dropletsync.providers.digitalocean import (
    ConfigCredentials,
    DigitalOcean,
    DropletConnector,
    DropletExternal,
    EnvCredentials,
)

__version__ = "0.1.0"

__all__ = [
    "Condition",
    "ConfigCredentials",
    "ConfigurationError",
    "CreateError",
    "CredentialError",
    "DeleteError",
    "DeletionPolicy",
    "DigitalOcean",
    "Droplet",
    "DropletConnector",
    "DropletExternal",
    "DropletObservation",
    "DropletParameters",
    "DropletPatch",
    "DropletSpec",
    "DropletStatus",
    "DropletSyncError",
    "EnvCredentials",
    "ExternalCreation",
    "ExternalDeletion",
    "ExternalError",
    "ExternalObservation",
    "ExternalUpdate",
    "IdentityTransitionError",
    "LogConfig",
    "ObjectMeta",
    "ObserveError",
    "ProviderConfigRef",
    "UpdateError",
    "WrongKindError",
    "apply_patch",
]
