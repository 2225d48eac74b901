"""Record model, conditions, identity and engine-facing protocols."""

from .conditions import Condition as Condition
from .conditions import ConditionType as ConditionType
from .conditions import available, creating, deleting, get_condition, set_conditions, unavailable
from .external import CredentialResolver, ExternalClient, ExternalConnector, RecordStore
from .identity import Assigned as Assigned
from .identity import ExternalIdentity as ExternalIdentity
from .identity import PendingNumeric as PendingNumeric
from .identity import Unassigned as Unassigned
from .identity import assign, parse_identity, render_identity
from .model import DROPLET_KIND as DROPLET_KIND
from .model import DeletionPolicy as DeletionPolicy
from .model import Droplet as Droplet
from .model import DropletObservation as DropletObservation
from .model import DropletParameters as DropletParameters
from .model import DropletPatch as DropletPatch
from .model import DropletSpec as DropletSpec
from .model import DropletStatus as DropletStatus
from .model import ExternalCreation as ExternalCreation
from .model import ExternalDeletion as ExternalDeletion
from .model import ExternalObservation as ExternalObservation
from .model import ExternalUpdate as ExternalUpdate
from .model import ObjectMeta as ObjectMeta
from .model import ProviderConfigRef as ProviderConfigRef
from .model import apply_patch

__all__ = [
    "Assigned",
    "Condition",
    "ConditionType",
    "CredentialResolver",
    "DROPLET_KIND",
    "DeletionPolicy",
    "Droplet",
    "DropletObservation",
    "DropletParameters",
    "DropletPatch",
    "DropletSpec",
    "DropletStatus",
    "ExternalClient",
    "ExternalConnector",
    "ExternalCreation",
    "ExternalDeletion",
    "ExternalIdentity",
    "ExternalObservation",
    "ExternalUpdate",
    "ObjectMeta",
    "PendingNumeric",
    "ProviderConfigRef",
    "RecordStore",
    "Unassigned",
    "apply_patch",
    "assign",
    "available",
    "creating",
    "deleting",
    "get_condition",
    "parse_identity",
    "render_identity",
    "set_conditions",
    "unavailable",
]
