"""Public façade for the mixtape_app.core package.

This module exposes the domain models, error taxonomy, access policy and
logging helpers. Other packages should import these cross-cutting concerns
from this façade instead of the internal submodules.
"""

from .errors import (
    AuthenticationError,
    AuthorizationError,
    MixtapeAppError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from .logging_config import configure_logging
from .logging_utils import log_error, log_info, log_step, log_success, log_warning
from .models import (
    Mixtape,
    MixtapeCreate,
    MixtapeUpdate,
    MusicService,
    Track,
    UserProfile,
)
from .policy import (
    OWNER_ONLY_FIELDS,
    can_delete,
    can_read,
    can_write,
    ensure_deletable,
    ensure_readable,
    ensure_writable,
    filter_mutable_fields,
    is_collaborator,
    is_owner,
)

__all__ = [
    "configure_logging",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "MixtapeAppError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UpstreamError",
    "Mixtape",
    "MixtapeCreate",
    "MixtapeUpdate",
    "MusicService",
    "Track",
    "UserProfile",
    "OWNER_ONLY_FIELDS",
    "is_owner",
    "is_collaborator",
    "can_read",
    "can_write",
    "can_delete",
    "filter_mutable_fields",
    "ensure_readable",
    "ensure_writable",
    "ensure_deletable",
]
