"""Full droplet lifecycle driven the way a reconciliation engine would."""

from __future__ import annotations

import pytest

from dropletsync.api.conditions import READY, get_condition
from dropletsync.api.identity import Assigned, Unassigned
from dropletsync.api.model import apply_patch
from dropletsync.providers.digitalocean.external import DropletConnector
from tests.conftest import FakeCredentials, FakeDropletAPI, FakeStore, make_droplet

pytestmark = [pytest.mark.e2e, pytest.mark.timeout(30)]


@pytest.mark.asyncio
async def test_create_observe_delete():
    api = FakeDropletAPI()
    store = FakeStore()
    connector = DropletConnector(FakeCredentials(), store, client_factory=lambda _: api)
    record = make_droplet()
    assert record.identity == Unassigned()

    async with await connector.connect(record) as external:
        observation = await external.observe(record)
        assert observation.resource_exists is False

        creation = await external.create(record)
        assert creation.external_name_assigned is True
        record = apply_patch(record, creation.patch)
        assert record.metadata.external_name == "123456"
        assert record.identity == Assigned(123456)
        assert get_condition(record.status.conditions, READY).reason == "Creating"

    async with await connector.connect(record) as external:
        observation = await external.observe(record)
        record = apply_patch(record, observation.patch)
        assert get_condition(record.status.conditions, READY).reason == "Creating"

    api.droplets[123456] = {**api.droplets[123456], "status": "active"}

    async with await connector.connect(record) as external:
        observation = await external.observe(record)
        assert observation.resource_exists is True
        assert observation.resource_up_to_date is True
        record = apply_patch(record, observation.patch)
        assert get_condition(record.status.conditions, READY).reason == "Available"
        assert record.status.at_provider.id == 123456

        deletion = await external.delete(record)
        record = apply_patch(record, deletion.patch)
        assert get_condition(record.status.conditions, READY).reason == "Deleting"

        await external.delete(record)

        observation = await external.observe(record)
        assert observation.resource_exists is False

    assert [c for c in api.calls if c[0] == "delete"] == [("delete", 123456), ("delete", 123456)]
    assert api.closed

