from datetime import UTC, datetime, timedelta

import pytest

from dropletsync.api.conditions import (
    READY,
    SYNCED,
    Condition,
    available,
    creating,
    deleting,
    get_condition,
    set_conditions,
    unavailable,
)

pytestmark = [pytest.mark.unit]

T0 = datetime(2024, 1, 1, tzinfo=UTC)
T1 = T0 + timedelta(minutes=5)


class TestConstructors:
    def test_creating(self):
        c = creating(T0)
        assert (c.type, c.status, c.reason) == ("Ready", "False", "Creating")
        assert c.last_transition_time == T0

    def test_available(self):
        c = available(T0)
        assert (c.type, c.status, c.reason) == ("Ready", "True", "Available")

    def test_deleting(self):
        c = deleting(T0)
        assert (c.type, c.status, c.reason) == ("Ready", "False", "Deleting")

    def test_unavailable(self):
        c = unavailable(T0)
        assert (c.type, c.status, c.reason) == ("Ready", "False", "Unavailable")

    def test_default_timestamp_is_utc_now(self):
        c = creating()
        assert c.last_transition_time.tzinfo is UTC


class TestSetConditions:
    def test_appends_new_type(self):
        result = set_conditions((), creating(T0))
        assert result == (creating(T0),)

    def test_replaces_same_type(self):
        result = set_conditions((creating(T0),), available(T1))
        assert result == (available(T1),)

    def test_equal_condition_keeps_original_timestamp(self):
        result = set_conditions((available(T0),), available(T1))
        assert result[0].last_transition_time == T0

    def test_keeps_other_types_and_order(self):
        synced = Condition(SYNCED, "True", "ReconcileSuccess", T0)
        result = set_conditions((synced, creating(T0)), available(T1))
        assert result == (synced, available(T1))

    def test_no_new_conditions_is_identity(self):
        existing = (available(T0),)
        assert set_conditions(existing) == existing

    def test_message_difference_replaces(self):
        a = Condition(SYNCED, "False", "ReconcileError", T0, message="boom")
        b = Condition(SYNCED, "False", "ReconcileError", T1, message="bang")
        assert set_conditions((a,), b) == (b,)


class TestGetCondition:
    def test_found(self):
        assert get_condition((available(T0),), READY) == available(T0)

    def test_missing(self):
        assert get_condition((available(T0),), SYNCED) is None
