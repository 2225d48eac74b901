"""Reconciliation core for DigitalOcean droplets.

The engine calls ``DropletConnector.connect`` once per pass and then
``observe`` followed by ``create`` or ``delete`` on the returned client:

    engine -> connect -> observe -> {create | delete} -> engine applies patch

Droplets cannot be changed after creation, so ``update`` is a no-op and
observe always reports an existing droplet as up to date.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from dropletsync.api.conditions import Condition, available, creating, deleting
from dropletsync.api.external import CredentialResolver, RecordStore
from dropletsync.api.identity import Assigned, PendingNumeric, Unassigned, assign
from dropletsync.api.model import (
    DROPLET_KIND,
    Droplet,
    DropletPatch,
    ExternalCreation,
    ExternalDeletion,
    ExternalObservation,
    ExternalUpdate,
)
from dropletsync.core.exceptions import (
    CreateError,
    CredentialError,
    DeleteError,
    IdentityTransitionError,
    ObserveError,
    UpdateError,
    WrongKindError,
)
from dropletsync.observability.logger import logger

from .client import DigitalOceanClient, DropletAPI, DropletNotFoundError
from .droplet import (
    STATUS_ACTIVE,
    STATUS_NEW,
    generate_create_request,
    late_initialize,
    observation_from,
)

ERR_GET_DROPLET = "cannot get droplet"
ERR_CREATE_FAILED = "creation of Droplet resource has failed"
ERR_DELETE_FAILED = "deletion of Droplet resource has failed"
ERR_UPDATE = "cannot update managed Droplet resource"

log = logger.bind(component="droplet")

type ClientFactory = Callable[[str], DropletAPI]


def _as_droplet(record: Any) -> Droplet:
    match record:
        case Droplet(kind="Droplet"):
            return record
        case _:
            raise WrongKindError(DROPLET_KIND, record)


# =============================================================================
# Connector
# =============================================================================


class DropletConnector:
    """Builds a DropletExternal bound to the record's credentials.

    Args:
        credentials: Resolves ``spec.provider_config_ref`` to an API token.
        store: Record store used to persist late-initialized parameters.
        client_factory: Builds the provider client from a token.
    """

    def __init__(
        self,
        credentials: CredentialResolver,
        store: RecordStore,
        client_factory: ClientFactory = DigitalOceanClient,
    ) -> None:
        self._credentials = credentials
        self._store = store
        self._client_factory = client_factory

    async def connect(self, record: Droplet) -> DropletExternal:
        cr = _as_droplet(record)
        ref = cr.spec.provider_config_ref
        try:
            token = await self._credentials.resolve(ref)
        except CredentialError:
            raise
        except Exception as e:
            raise CredentialError(f"cannot get credentials from provider config '{ref.name}': {e}") from e

        return DropletExternal(self._client_factory(token), self._store)


# =============================================================================
# External Client
# =============================================================================


class DropletExternal:
    """Observe, create, update and delete one droplet for one pass."""

    def __init__(self, client: DropletAPI, store: RecordStore) -> None:
        self._client = client
        self._store = store

    async def __aenter__(self) -> DropletExternal:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.close()

    async def observe(self, record: Droplet) -> ExternalObservation:
        cr = _as_droplet(record)

        match cr.identity:
            case Unassigned():
                return ExternalObservation(resource_exists=False)
            case PendingNumeric(name=name):
                # Placeholder name, the provider ID is not known yet.
                log.debug("Droplet {name} has no provider ID yet", name=name)
                return ExternalObservation(resource_exists=False)
            case Assigned(id=droplet_id):
                pass

        try:
            observed = await self._client.get_droplet(droplet_id)
        except DropletNotFoundError:
            log.info("Droplet {id} not found", id=droplet_id)
            return ExternalObservation(resource_exists=False)
        except Exception as e:
            raise ObserveError(f"{ERR_GET_DROPLET}: {e}") from e

        for_provider = None
        params = late_initialize(cr.spec.for_provider, observed)
        if params != cr.spec.for_provider:
            updated = replace(cr, spec=replace(cr.spec, for_provider=params))
            try:
                await self._store.update(updated)
            except Exception as e:
                raise UpdateError(f"{ERR_UPDATE}: {e}") from e
            log.debug("Late-initialized droplet {id} parameters", id=droplet_id)
            for_provider = params

        at_provider = observation_from(observed)

        conditions: tuple[Condition, ...] = ()
        if at_provider.status == STATUS_NEW:
            conditions = (creating(),)
        elif at_provider.status == STATUS_ACTIVE:
            conditions = (available(),)

        # Droplets cannot be updated, so they are always up to date.
        return ExternalObservation(
            resource_exists=True,
            resource_up_to_date=True,
            patch=DropletPatch(
                for_provider=for_provider,
                at_provider=at_provider,
                conditions=conditions,
            ),
        )

    async def create(self, record: Droplet) -> ExternalCreation:
        cr = _as_droplet(record)
        patch = DropletPatch(conditions=(creating(),))

        identity = cr.identity
        if isinstance(identity, Assigned):
            raise IdentityTransitionError(
                f"droplet {cr.metadata.name} is already bound to provider ID {identity.id}"
            )

        name = cr.metadata.external_name or cr.metadata.name
        request = generate_create_request(name, cr.spec.for_provider)

        try:
            droplet = await self._client.create_droplet(request)
        except Exception as e:
            raise CreateError(f"{ERR_CREATE_FAILED}: {e}", patch=patch) from e
        if not droplet:
            raise CreateError(f"{ERR_CREATE_FAILED}: empty response", patch=patch)

        assigned = assign(identity, droplet["id"])
        log.info("Created droplet {name} with ID {id}", name=name, id=assigned.id)

        return ExternalCreation(
            external_name_assigned=True,
            patch=replace(patch, external_name=str(assigned.id)),
        )

    async def update(self, record: Droplet) -> ExternalUpdate:
        # Droplets cannot be updated.
        return ExternalUpdate()

    async def delete(self, record: Droplet) -> ExternalDeletion:
        cr = _as_droplet(record)
        patch = DropletPatch(conditions=(deleting(),))

        droplet_id = cr.status.at_provider.id
        if droplet_id is None and isinstance(cr.identity, Assigned):
            droplet_id = cr.identity.id
        if droplet_id is None:
            log.debug("Droplet {name} was never created, nothing to delete", name=cr.metadata.name)
            return ExternalDeletion(patch=patch)

        try:
            await self._client.delete_droplet(droplet_id)
        except DropletNotFoundError:
            log.debug("Droplet {id} already gone", id=droplet_id)
        except Exception as e:
            raise DeleteError(f"{ERR_DELETE_FAILED}: {e}", patch=patch) from e
        else:
            log.info("Deleted droplet {id}", id=droplet_id)

        return ExternalDeletion(patch=patch)


__all__ = [
    "ClientFactory",
    "DropletConnector",
    "DropletExternal",
]
