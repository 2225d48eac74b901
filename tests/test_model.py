from datetime import UTC, datetime

import pytest

from dropletsync.api.conditions import available, creating
from dropletsync.api.identity import Assigned, PendingNumeric, Unassigned
from dropletsync.api.model import (
    DeletionPolicy,
    DropletObservation,
    DropletPatch,
    ProviderConfigRef,
    apply_patch,
)
from tests.conftest import make_droplet

pytestmark = [pytest.mark.unit]

T0 = datetime(2024, 1, 1, tzinfo=UTC)


class TestDropletDefaults:
    def test_defaults(self):
        d = make_droplet()
        assert d.kind == "Droplet"
        assert d.spec.provider_config_ref == ProviderConfigRef("default")
        assert d.spec.deletion_policy is DeletionPolicy.DELETE
        assert d.status.at_provider.id is None
        assert d.status.conditions == ()

    @pytest.mark.parametrize(
        ("external_name", "expected"),
        [("", Unassigned()), ("web", PendingNumeric("web")), ("99", Assigned(99))],
    )
    def test_identity(self, external_name, expected):
        assert make_droplet(external_name=external_name).identity == expected


class TestApplyPatch:
    def test_empty_patch_is_noop(self):
        d = make_droplet()
        assert DropletPatch().empty
        assert apply_patch(d, DropletPatch()) == d

    def test_sets_external_name(self):
        d = apply_patch(make_droplet(), DropletPatch(external_name="123"))
        assert d.metadata.external_name == "123"
        assert d.metadata.name == "my-droplet"

    def test_sets_observation(self):
        obs = DropletObservation(id=1, creation_timestamp="t", status="active")
        d = apply_patch(make_droplet(), DropletPatch(at_provider=obs))
        assert d.status.at_provider == obs

    def test_merges_conditions(self):
        d = apply_patch(make_droplet(), DropletPatch(conditions=(creating(T0),)))
        d = apply_patch(d, DropletPatch(conditions=(available(T0),)))
        assert d.status.conditions == (available(T0),)

    def test_does_not_mutate_original(self):
        original = make_droplet()
        apply_patch(original, DropletPatch(external_name="123"))
        assert original.metadata.external_name == ""
