"""External identity of a record.

The external name moves through three states:

    Unassigned          -> nothing set, the resource was never created
    PendingNumeric(name)-> a user-chosen, non-numeric name used at creation
    Assigned(id)        -> the provider-assigned numeric ID

Only ``Unassigned -> Assigned`` and ``PendingNumeric -> Assigned`` are valid
transitions (plus re-assigning the same ID). Once assigned, an identity never
goes back to a non-numeric value.
"""

from __future__ import annotations

from dataclasses import dataclass

from dropletsync.core.exceptions import IdentityTransitionError


@dataclass(frozen=True, slots=True)
class Unassigned:
    pass


@dataclass(frozen=True, slots=True)
class PendingNumeric:
    name: str


@dataclass(frozen=True, slots=True)
class Assigned:
    id: int


type ExternalIdentity = Unassigned | PendingNumeric | Assigned


def parse_identity(external_name: str) -> ExternalIdentity:
    """Classify an external name string.

    >>> parse_identity("")
    Unassigned()
    >>> parse_identity("web-1")
    PendingNumeric(name='web-1')
    >>> parse_identity("123456")
    Assigned(id=123456)
    """
    if not external_name:
        return Unassigned()
    if external_name.isascii() and external_name.isdecimal() and int(external_name) > 0:
        return Assigned(int(external_name))
    return PendingNumeric(external_name)


def render_identity(identity: ExternalIdentity) -> str:
    match identity:
        case Unassigned():
            return ""
        case PendingNumeric(name=name):
            return name
        case Assigned(id=droplet_id):
            return str(droplet_id)


def assign(current: ExternalIdentity, droplet_id: int) -> Assigned:
    """Move ``current`` to ``Assigned(droplet_id)``.

    Raises:
        IdentityTransitionError: If the ID is not positive, or the identity
            already points at a different droplet.
    """
    if droplet_id <= 0:
        raise IdentityTransitionError(f"provider IDs must be positive, got {droplet_id}")

    match current:
        case Unassigned() | PendingNumeric():
            return Assigned(droplet_id)
        case Assigned(id=existing) if existing == droplet_id:
            return current
        case Assigned(id=existing):
            raise IdentityTransitionError(
                f"identity already assigned to {existing}, refusing to reassign to {droplet_id}"
            )


__all__ = [
    "Assigned",
    "ExternalIdentity",
    "PendingNumeric",
    "Unassigned",
    "assign",
    "parse_identity",
    "render_identity",
]
