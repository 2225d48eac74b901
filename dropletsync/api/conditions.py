"""Typed, timestamped status conditions attached to a record.

At most one condition of each type applies to a record at any time.
The core only produces ``Ready`` conditions; ``Synced`` belongs to the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Literal

type ConditionType = Literal["Ready", "Synced"]
type ConditionStatus = Literal["True", "False", "Unknown"]
type ConditionReason = Literal[
    "Available",
    "Creating",
    "Deleting",
    "ReconcileSuccess",
    "ReconcileError",
    "Unavailable",
]

READY: ConditionType = "Ready"
SYNCED: ConditionType = "Synced"


@dataclass(frozen=True, slots=True)
class Condition:
    type: ConditionType
    status: ConditionStatus
    reason: ConditionReason
    last_transition_time: datetime
    message: str = ""

    def equal(self, other: Condition) -> bool:
        """Compare everything except the transition timestamp."""
        return (
            self.type == other.type
            and self.status == other.status
            and self.reason == other.reason
            and self.message == other.message
        )


def _now() -> datetime:
    return datetime.now(UTC)


def creating(now: datetime | None = None) -> Condition:
    """The external resource is being created."""
    return Condition(READY, "False", "Creating", now or _now())


def available(now: datetime | None = None) -> Condition:
    """The external resource is ready for use."""
    return Condition(READY, "True", "Available", now or _now())


def unavailable(now: datetime | None = None) -> Condition:
    """The external resource is not currently available."""
    return Condition(READY, "False", "Unavailable", now or _now())


def deleting(now: datetime | None = None) -> Condition:
    """The external resource is being deleted."""
    return Condition(READY, "False", "Deleting", now or _now())


def set_conditions(
    existing: tuple[Condition, ...], *new: Condition,
) -> tuple[Condition, ...]:
    """Merge ``new`` conditions into ``existing``, keyed by condition type.

    A condition equal to the one already present (ignoring the timestamp)
    keeps the original entry, so its last transition time survives.
    Replaced types keep their position; unseen types are appended.
    """
    result = list(existing)
    for cond in new:
        for i, current in enumerate(result):
            if current.type != cond.type:
                continue
            if not current.equal(cond):
                result[i] = cond
            break
        else:
            result.append(cond)
    return tuple(result)


def get_condition(
    conditions: tuple[Condition, ...], ctype: ConditionType,
) -> Condition | None:
    return next((c for c in conditions if c.type == ctype), None)


__all__ = [
    "READY",
    "SYNCED",
    "Condition",
    "ConditionReason",
    "ConditionStatus",
    "ConditionType",
    "available",
    "creating",
    "deleting",
    "get_condition",
    "set_conditions",
    "unavailable",
]
