"""Custom exception hierarchy for dropletsync.

All dropletsync-specific exceptions inherit from DropletSyncError, enabling
engines to catch every reconciliation failure with a single except clause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dropletsync.api.model import DropletPatch


class DropletSyncError(Exception):
    """Base exception for all dropletsync errors."""


class WrongKindError(DropletSyncError):
    """Raised when an operation receives a record of an unexpected kind."""

    def __init__(self, expected: str, actual: object) -> None:
        self.expected = expected
        self.actual = actual
        kind = getattr(actual, "kind", type(actual).__name__)
        super().__init__(f"managed resource is not a {expected} resource (got {kind})")


class ConfigurationError(DropletSyncError):
    """Raised for invalid configuration or missing required settings."""


class CredentialError(DropletSyncError):
    """Raised when the provider API token cannot be resolved."""


class IdentityTransitionError(DropletSyncError):
    """Raised when an external identity would move along an undefined transition."""


class ExternalError(DropletSyncError):
    """Failure of an operation against the external resource.

    Carries the patch accumulated before the failure (e.g. the in-progress
    condition) so the engine can still persist it.
    """

    def __init__(self, message: str, patch: DropletPatch | None = None) -> None:
        self.patch = patch
        super().__init__(message)


class ObserveError(ExternalError):
    """Raised when the external droplet cannot be observed."""


class CreateError(ExternalError):
    """Raised when the external droplet cannot be created."""


class DeleteError(ExternalError):
    """Raised when the external droplet cannot be deleted."""


class UpdateError(ExternalError):
    """Raised when the late-initialized record cannot be persisted."""


__all__ = [
    "ConfigurationError",
    "CreateError",
    "CredentialError",
    "DeleteError",
    "DropletSyncError",
    "ExternalError",
    "IdentityTransitionError",
    "ObserveError",
    "UpdateError",
    "WrongKindError",
]
