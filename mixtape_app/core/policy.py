"""Access policy for mixtapes.

Pure functions deciding, for a (mixtape, requester) pair, which operations
are allowed. The requester id is None for anonymous requests.

The `ensure_*` helpers raise the matching error from
mixtape_app.core.errors and are what the service calls before touching the
store.
"""

from typing import Any, Dict, Optional

from .errors import AuthenticationError, AuthorizationError
from .models import Mixtape

# Fields only the owner may change (document / wire keys).
OWNER_ONLY_FIELDS = frozenset({"title", "isPublic", "collaborators", "createdBy"})


def is_owner(mixtape: Mixtape, requester_id: Optional[str]) -> bool:
    return requester_id is not None and requester_id == mixtape.created_by


def is_collaborator(mixtape: Mixtape, requester_id: Optional[str]) -> bool:
    return requester_id is not None and requester_id in mixtape.collaborators


def can_read(mixtape: Mixtape, requester_id: Optional[str]) -> bool:
    return (
        mixtape.is_public
        or is_owner(mixtape, requester_id)
        or is_collaborator(mixtape, requester_id)
    )


def can_write(mixtape: Mixtape, requester_id: Optional[str]) -> bool:
    return is_owner(mixtape, requester_id) or is_collaborator(mixtape, requester_id)


def can_delete(mixtape: Mixtape, requester_id: Optional[str]) -> bool:
    return is_owner(mixtape, requester_id)


def filter_mutable_fields(
    mixtape: Mixtape,
    requester_id: Optional[str],
    proposed_update: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Return the subset of `proposed_update` the requester may apply.

    - owner        : everything passes through unchanged
    - anybody else : OWNER_ONLY_FIELDS are removed

    The input mapping is never mutated; a new dict is returned.
    """
    if is_owner(mixtape, requester_id):
        return dict(proposed_update)

    return {
        key: value
        for key, value in proposed_update.items()
        if key not in OWNER_ONLY_FIELDS
    }


def ensure_readable(mixtape: Mixtape, requester_id: Optional[str]) -> None:
    if not can_read(mixtape, requester_id):
        raise AuthorizationError("Access denied to this mixtape")


def ensure_writable(mixtape: Mixtape, requester_id: Optional[str]) -> None:
    if requester_id is None:
        raise AuthenticationError()
    if not can_write(mixtape, requester_id):
        raise AuthorizationError("You do not have permission to update this mixtape")


def ensure_deletable(mixtape: Mixtape, requester_id: Optional[str]) -> None:
    if requester_id is None:
        raise AuthenticationError()
    if not can_delete(mixtape, requester_id):
        raise AuthorizationError("You do not have permission to delete this mixtape")
