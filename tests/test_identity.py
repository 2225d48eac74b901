import pytest

from dropletsync.api.identity import (
    Assigned,
    PendingNumeric,
    Unassigned,
    assign,
    parse_identity,
    render_identity,
)
from dropletsync.core.exceptions import IdentityTransitionError

pytestmark = [pytest.mark.unit]


class TestParseIdentity:
    def test_empty_is_unassigned(self):
        assert parse_identity("") == Unassigned()

    def test_numeric_is_assigned(self):
        assert parse_identity("123456") == Assigned(123456)

    def test_name_is_pending(self):
        assert parse_identity("web-1") == PendingNumeric("web-1")

    @pytest.mark.parametrize("value", ["\u0661\u0662\u0663", "\uff11\uff12\uff13"])
    def test_non_ascii_digits_stay_pending(self, value):
        assert parse_identity(value) == PendingNumeric(value)
        assert render_identity(parse_identity(value)) == value

    @pytest.mark.parametrize("value", ["0", "-5", "12a", " 12", "1.5"])
    def test_non_positive_or_malformed_stays_pending(self, value):
        assert parse_identity(value) == PendingNumeric(value)


class TestRenderIdentity:
    def test_roundtrip_assigned(self):
        assert render_identity(Assigned(42)) == "42"

    def test_unassigned_renders_empty(self):
        assert render_identity(Unassigned()) == ""

    def test_pending_renders_name(self):
        assert render_identity(PendingNumeric("web-1")) == "web-1"


class TestAssign:
    def test_unassigned_to_assigned(self):
        assert assign(Unassigned(), 7) == Assigned(7)

    def test_pending_to_assigned(self):
        assert assign(PendingNumeric("web-1"), 7) == Assigned(7)

    def test_same_id_is_idempotent(self):
        assert assign(Assigned(7), 7) == Assigned(7)

    def test_reassigning_different_id_raises(self):
        with pytest.raises(IdentityTransitionError, match="already assigned to 7"):
            assign(Assigned(7), 8)

    @pytest.mark.parametrize("bad_id", [0, -1])
    def test_non_positive_id_raises(self, bad_id):
        with pytest.raises(IdentityTransitionError, match="must be positive"):
            assign(Unassigned(), bad_id)

    def test_assigned_never_reverts_to_non_numeric(self):
        for state in (Unassigned(), PendingNumeric("x"), Assigned(3)):
            result = assign(state, 3)
            assert render_identity(result).isdecimal()
