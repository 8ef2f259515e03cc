"""Domain errors raised by services and mapped to HTTP responses in main."""


class IdeaFlowError(Exception):
    """Base class for errors with a stable kind and HTTP status."""

    status_code = 500
    kind = "internal_error"
    default_message = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)


class ValidationError(IdeaFlowError):
    """Malformed, missing or oversized input."""

    status_code = 400
    kind = "validation_error"
    default_message = "Invalid request"


class AuthenticationRequired(IdeaFlowError):
    """No resolvable identity where one is mandatory.

    Idea routes answer 400 (a session ID would do); the profile route
    answers 401 because only an account credential is accepted there.
    """

    status_code = 401
    kind = "authentication_required"
    default_message = "Authentication required"


class InvalidCredentials(IdeaFlowError):
    """Login failed. Same message for unknown email and wrong password."""

    status_code = 401
    kind = "invalid_credentials"
    default_message = "Invalid email or password"


class NotFoundOrForbidden(IdeaFlowError):
    """Target is absent or owned by someone else; the two are not told apart."""

    status_code = 404
    kind = "not_found"
    default_message = "Not found"


class Conflict(IdeaFlowError):
    """Uniqueness violation, e.g. an email that is already registered."""

    status_code = 400
    kind = "conflict"
    default_message = "Resource already exists"


class InternalError(IdeaFlowError):
    """Storage or unexpected failure."""
