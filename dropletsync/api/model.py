"""Desired-state record for a DigitalOcean droplet, and operation results.

Records are immutable snapshots. Operations never mutate them; they return a
``DropletPatch`` that the engine applies with ``apply_patch``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Literal

from dropletsync.api.conditions import Condition, set_conditions
from dropletsync.api.identity import ExternalIdentity, parse_identity

DROPLET_KIND: Literal["Droplet"] = "Droplet"

type DropletStatusValue = Literal["new", "active", "off", "archive"] | str


class DeletionPolicy(StrEnum):
    """What happens to the droplet when its record is deleted.

    Consumed by the engine only.
    """

    DELETE = "Delete"
    ORPHAN = "Orphan"


@dataclass(frozen=True, slots=True)
class ObjectMeta:
    name: str
    external_name: str = ""


@dataclass(frozen=True, slots=True)
class ProviderConfigRef:
    name: str = "default"


@dataclass(frozen=True, slots=True)
class DropletParameters:
    """Desired state of a droplet.

    Required fields are always set by the user. Optional fields left as
    ``None`` are provider-defaulted and filled in by late initialization.
    An empty tuple is an explicit value, not an unset one.

    Args:
        image: Image slug or ID (e.g. "ubuntu-20-04-x64").
        region: Region slug (e.g. "nyc1").
        size: Size slug (e.g. "s-1vcpu-1gb").
        backups: Enable automated backups (creation-time only).
        ipv6: Enable IPv6.
        monitoring: Install the DigitalOcean monitoring agent.
        private_networking: Deprecated, superseded by ``vpc_uuid``.
        with_droplet_agent: Install the web console agent.
        ssh_keys: IDs or fingerprints of SSH keys to embed.
        tags: Tag names to apply.
        volumes: Block storage volume IDs to attach.
        vpc_uuid: VPC to place the droplet in.
    """

    image: str
    region: str
    size: str
    backups: bool | None = None
    ipv6: bool | None = None
    monitoring: bool | None = None
    private_networking: bool | None = None
    with_droplet_agent: bool | None = None
    ssh_keys: tuple[str, ...] | None = None
    tags: tuple[str, ...] | None = None
    volumes: tuple[str, ...] | None = None
    vpc_uuid: str | None = None


@dataclass(frozen=True, slots=True)
class DropletObservation:
    id: int | None = None
    creation_timestamp: str = ""
    status: DropletStatusValue = ""


@dataclass(frozen=True, slots=True)
class DropletSpec:
    for_provider: DropletParameters
    provider_config_ref: ProviderConfigRef = field(default_factory=ProviderConfigRef)
    deletion_policy: DeletionPolicy = DeletionPolicy.DELETE


@dataclass(frozen=True, slots=True)
class DropletStatus:
    at_provider: DropletObservation = field(default_factory=DropletObservation)
    conditions: tuple[Condition, ...] = ()


@dataclass(frozen=True, slots=True)
class Droplet:
    metadata: ObjectMeta
    spec: DropletSpec
    status: DropletStatus = field(default_factory=DropletStatus)
    kind: Literal["Droplet"] = DROPLET_KIND

    @property
    def identity(self) -> ExternalIdentity:
        return parse_identity(self.metadata.external_name)


# =============================================================================
# Patches
# =============================================================================


@dataclass(frozen=True, slots=True)
class DropletPatch:
    """Field updates produced by one operation. ``None`` means untouched."""

    external_name: str | None = None
    for_provider: DropletParameters | None = None
    at_provider: DropletObservation | None = None
    conditions: tuple[Condition, ...] = ()

    @property
    def empty(self) -> bool:
        return (
            self.external_name is None
            and self.for_provider is None
            and self.at_provider is None
            and not self.conditions
        )


def apply_patch(record: Droplet, patch: DropletPatch) -> Droplet:
    """Return ``record`` with ``patch`` applied."""
    metadata = record.metadata
    if patch.external_name is not None:
        metadata = replace(metadata, external_name=patch.external_name)

    spec = record.spec
    if patch.for_provider is not None:
        spec = replace(spec, for_provider=patch.for_provider)

    status = record.status
    if patch.at_provider is not None:
        status = replace(status, at_provider=patch.at_provider)
    if patch.conditions:
        status = replace(status, conditions=set_conditions(status.conditions, *patch.conditions))

    return replace(record, metadata=metadata, spec=spec, status=status)


# =============================================================================
# Operation Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ExternalObservation:
    resource_exists: bool
    resource_up_to_date: bool = False
    patch: DropletPatch = field(default_factory=DropletPatch)


@dataclass(frozen=True, slots=True)
class ExternalCreation:
    external_name_assigned: bool
    patch: DropletPatch = field(default_factory=DropletPatch)


@dataclass(frozen=True, slots=True)
class ExternalUpdate:
    patch: DropletPatch = field(default_factory=DropletPatch)


@dataclass(frozen=True, slots=True)
class ExternalDeletion:
    patch: DropletPatch = field(default_factory=DropletPatch)


__all__ = [
    "DROPLET_KIND",
    "DeletionPolicy",
    "Droplet",
    "DropletObservation",
    "DropletParameters",
    "DropletPatch",
    "DropletSpec",
    "DropletStatus",
    "ExternalCreation",
    "ExternalDeletion",
    "ExternalObservation",
    "ExternalUpdate",
    "ObjectMeta",
    "ProviderConfigRef",
    "apply_patch",
]
