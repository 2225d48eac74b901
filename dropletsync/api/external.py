from typing import Protocol, Self, runtime_checkable

from dropletsync.api.model import (
    Droplet,
    ExternalCreation,
    ExternalDeletion,
    ExternalObservation,
    ExternalUpdate,
    ProviderConfigRef,
)


@runtime_checkable
class CredentialResolver(Protocol):
    """Turns a record's provider-config reference into an API token."""

    async def resolve(self, ref: ProviderConfigRef) -> str: ...


@runtime_checkable
class RecordStore(Protocol):
    """Declarative store that owns the records.

    The core only calls it to persist late-initialized parameters during
    Observe; everything else flows back to the engine as patches.
    """

    async def update(self, record: Droplet) -> None: ...


@runtime_checkable
class ExternalClient(Protocol):
    """Lifecycle operations against one external resource.

    Bound to a single credential for the duration of one reconciliation
    pass. Every operation takes an immutable record snapshot and returns
    a result carrying the patch the engine must apply.
    """

    async def observe(self, record: Droplet) -> ExternalObservation:
        """Report whether the external resource exists and is up to date.

        Parameters
        ----------
        record
            Current desired-state record.

        Returns
        -------
        ExternalObservation
            ``resource_exists=False`` tells the engine to call ``create``.
        """
        ...

    async def create(self, record: Droplet) -> ExternalCreation:
        """Create the external resource.

        Only called after ``observe`` reported ``resource_exists=False``.
        ``external_name_assigned=True`` means the engine must persist the
        patched external name before anything else.
        """
        ...

    async def update(self, record: Droplet) -> ExternalUpdate:
        ...

    async def delete(self, record: Droplet) -> ExternalDeletion:
        """Delete the external resource. Safe to call more than once."""
        ...

    async def close(self) -> None: ...

    async def __aenter__(self) -> Self: ...

    async def __aexit__(self, *exc: object) -> None: ...


@runtime_checkable
class ExternalConnector(Protocol):
    """Produces an ExternalClient for one reconciliation pass."""

    async def connect(self, record: Droplet) -> ExternalClient: ...
