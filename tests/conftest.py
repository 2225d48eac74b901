from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from dropletsync.api.model import (
    Droplet,
    DropletParameters,
    DropletSpec,
    ObjectMeta,
    ProviderConfigRef,
)
from dropletsync.providers.digitalocean.client import DigitalOceanError, DropletNotFoundError
from dropletsync.providers.digitalocean.types import DropletCreateRequest, DropletResponse


class FakeDropletAPI:
    """In-memory DropletAPI that records every call."""

    def __init__(self, next_id: int = 123456) -> None:
        self.droplets: dict[int, DropletResponse] = {}
        self.calls: list[tuple[str, object]] = []
        self.next_id = next_id
        self.fail_with: Exception | None = None
        self.closed = False

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def put(self, droplet: DropletResponse) -> None:
        self.droplets[droplet["id"]] = droplet

    async def create_droplet(self, request: DropletCreateRequest) -> DropletResponse:
        self.calls.append(("create", request))
        self._maybe_fail()
        droplet: DropletResponse = {
            "id": self.next_id,
            "name": request["name"],
            "status": "new",
            "created_at": "2020-03-04T05:06:07Z",
        }
        self.droplets[self.next_id] = droplet
        self.next_id += 1
        return droplet

    async def get_droplet(self, droplet_id: int) -> DropletResponse:
        self.calls.append(("get", droplet_id))
        self._maybe_fail()
        if droplet_id not in self.droplets:
            raise DropletNotFoundError(droplet_id)
        return self.droplets[droplet_id]

    async def delete_droplet(self, droplet_id: int) -> None:
        self.calls.append(("delete", droplet_id))
        self._maybe_fail()
        if self.droplets.pop(droplet_id, None) is None:
            raise DropletNotFoundError(droplet_id)

    async def close(self) -> None:
        self.closed = True


@dataclass
class FakeStore:
    updates: list[Droplet] = field(default_factory=list)
    fail_with: Exception | None = None

    async def update(self, record: Droplet) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.updates.append(record)


@dataclass
class FakeCredentials:
    token: str = "dop_v1_test"
    fail_with: Exception | None = None
    seen: list[ProviderConfigRef] = field(default_factory=list)

    async def resolve(self, ref: ProviderConfigRef) -> str:
        self.seen.append(ref)
        if self.fail_with is not None:
            raise self.fail_with
        return self.token


def make_droplet(
    name: str = "my-droplet",
    external_name: str = "",
    **params: object,
) -> Droplet:
    defaults: dict[str, object] = {
        "image": "ubuntu-20-04",
        "region": "nyc1",
        "size": "s-1vcpu-1gb",
    }
    defaults.update(params)
    return Droplet(
        metadata=ObjectMeta(name=name, external_name=external_name),
        spec=DropletSpec(for_provider=DropletParameters(**defaults)),  # type: ignore[arg-type]
    )


@pytest.fixture
def api() -> FakeDropletAPI:
    return FakeDropletAPI()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def credentials() -> FakeCredentials:
    return FakeCredentials()


@pytest.fixture
def api_error() -> DigitalOceanError:
    return DigitalOceanError("Failed: HTTP 500 internal error")
