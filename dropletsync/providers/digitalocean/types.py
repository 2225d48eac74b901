"""DigitalOcean API payload types.

TypedDicts for droplet API requests and responses - no conversion needed.
"""

from __future__ import annotations

from typing import NotRequired, TypedDict

# =============================================================================
# Response Types
# =============================================================================


class RegionInfo(TypedDict):
    slug: str
    name: NotRequired[str]


class ImageInfo(TypedDict):
    id: NotRequired[int]
    slug: NotRequired[str | None]
    name: NotRequired[str]


class NetworkV4(TypedDict):
    ip_address: str
    type: str  # public, private


class Networks(TypedDict):
    v4: NotRequired[list[NetworkV4]]
    v6: NotRequired[list[dict[str, str]]]


class DropletResponse(TypedDict):
    """Droplet object from the DigitalOcean API."""

    id: int
    name: str
    status: str  # new, active, off, archive
    created_at: NotRequired[str]
    size_slug: NotRequired[str]
    region: NotRequired[RegionInfo]
    image: NotRequired[ImageInfo]
    features: NotRequired[list[str]]  # backups, ipv6, monitoring, private_networking
    backup_ids: NotRequired[list[int]]
    volume_ids: NotRequired[list[str]]
    tags: NotRequired[list[str]]
    vpc_uuid: NotRequired[str]
    networks: NotRequired[Networks]


# =============================================================================
# Request Types
# =============================================================================


class DropletCreateRequest(TypedDict, total=False):
    """Body of ``POST /v2/droplets`` for a single droplet."""

    name: str
    region: str
    size: str
    image: str
    ssh_keys: list[str]
    backups: bool
    ipv6: bool
    monitoring: bool
    private_networking: bool
    with_droplet_agent: bool
    volumes: list[str]
    tags: list[str]
    vpc_uuid: str


__all__ = [
    "DropletCreateRequest",
    "DropletResponse",
    "ImageInfo",
    "NetworkV4",
    "Networks",
    "RegionInfo",
]
