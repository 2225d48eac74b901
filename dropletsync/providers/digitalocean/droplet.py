"""Mapping between droplet records and DigitalOcean API payloads."""

from __future__ import annotations

from dataclasses import replace

from dropletsync.api.model import DropletObservation, DropletParameters

from .types import DropletCreateRequest, DropletResponse

STATUS_NEW = "new"
STATUS_ACTIVE = "active"
STATUS_OFF = "off"
STATUS_ARCHIVE = "archive"


def generate_create_request(name: str, params: DropletParameters) -> DropletCreateRequest:
    """Build the create body for ``params``.

    Fields map 1:1. Unset optional fields are left out so the provider
    applies its own defaults; array fields pass through as lists.
    """
    request: DropletCreateRequest = {
        "name": name,
        "region": params.region,
        "size": params.size,
        "image": params.image,
    }

    if params.backups is not None:
        request["backups"] = params.backups
    if params.ipv6 is not None:
        request["ipv6"] = params.ipv6
    if params.monitoring is not None:
        request["monitoring"] = params.monitoring
    if params.private_networking is not None:
        request["private_networking"] = params.private_networking
    if params.with_droplet_agent is not None:
        request["with_droplet_agent"] = params.with_droplet_agent
    if params.ssh_keys is not None:
        request["ssh_keys"] = list(params.ssh_keys)
    if params.volumes is not None:
        request["volumes"] = list(params.volumes)
    if params.tags is not None:
        request["tags"] = list(params.tags)
    if params.vpc_uuid is not None:
        request["vpc_uuid"] = params.vpc_uuid

    return request


def late_initialize(params: DropletParameters, observed: DropletResponse) -> DropletParameters:
    """Fill unset optional parameters from the observed droplet.

    Only fields that are ``None`` in ``params`` are touched; anything the
    user set, including empty tuples and ``False``, is kept as is.
    ``ssh_keys`` and ``with_droplet_agent`` are not reported back by the
    API and are never late-initialized.
    """
    features = set(observed.get("features", []))

    def _flag(current: bool | None, feature: str) -> bool | None:
        if current is not None or "features" not in observed:
            return current
        return feature in features

    def _strings(current: tuple[str, ...] | None, key: str) -> tuple[str, ...] | None:
        if current is not None:
            return current
        values = observed.get(key)  # type: ignore[misc]
        return tuple(str(v) for v in values) if values else None

    return replace(
        params,
        backups=_flag(params.backups, "backups"),
        ipv6=_flag(params.ipv6, "ipv6"),
        monitoring=_flag(params.monitoring, "monitoring"),
        private_networking=_flag(params.private_networking, "private_networking"),
        tags=_strings(params.tags, "tags"),
        volumes=_strings(params.volumes, "volume_ids"),
        vpc_uuid=params.vpc_uuid if params.vpc_uuid is not None else observed.get("vpc_uuid") or None,
    )


def observation_from(observed: DropletResponse) -> DropletObservation:
    return DropletObservation(
        id=observed["id"],
        creation_timestamp=observed.get("created_at", ""),
        status=observed.get("status", ""),
    )


__all__ = [
    "STATUS_ACTIVE",
    "STATUS_ARCHIVE",
    "STATUS_NEW",
    "STATUS_OFF",
    "generate_create_request",
    "late_initialize",
    "observation_from",
]
