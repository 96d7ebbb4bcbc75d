"""Error taxonomy shared by the service, gateway and HTTP layers.

Each error carries the HTTP status it maps to at the request-handler
boundary; see mixtape_app.api.errors for the translation to JSON payloads.
"""


class MixtapeAppError(Exception):
    """Base class for all expected application errors."""

    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MixtapeAppError):
    """A required field is missing or a value is malformed."""

    status_code = 400
    default_message = "Invalid request"


class AuthenticationError(MixtapeAppError):
    """Missing, invalid or expired credential."""

    status_code = 401
    default_message = "Authentication required"


class AuthorizationError(MixtapeAppError):
    """Authenticated (or anonymous) requester is not allowed to do this.

    Kept distinct from NotFoundError: the resource exists but is not
    visible or writable for this requester.
    """

    status_code = 403
    default_message = "Access denied"


class NotFoundError(MixtapeAppError):
    status_code = 404
    default_message = "Not found"


class UpstreamError(MixtapeAppError):
    """Identity provider, document store or music API failure."""

    status_code = 502
    default_message = "Upstream service failed"
