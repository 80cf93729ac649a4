"""Error taxonomy for qaForum.

Every error carries a human-readable message and the HTTP status the API
answers with. Errors are raised where they are detected and turned into
responses by the handlers registered in `qaforum.api.app`.
"""


class QAForumError(Exception):
    """Base error with an HTTP status code."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(QAForumError):
    """Missing or malformed input."""
    status_code = 400


class NotFoundError(QAForumError):
    """Requested resource does not exist."""
    status_code = 404


class AuthError(QAForumError):
    """Missing, malformed, invalid or expired credentials."""
    status_code = 401


class InvalidTokenError(AuthError):
    """Token signature or claims could not be verified."""


class TokenExpiredError(AuthError):
    """Token was valid but its lifetime has elapsed."""


class PermissionDeniedError(QAForumError):
    """Authenticated user is not allowed to touch the resource."""
    status_code = 403


class DependencyError(QAForumError):
    """Document store or email delivery failure."""
    status_code = 500


class CredentialHashingError(DependencyError):
    """Password could not be hashed."""


class EmailDeliveryError(DependencyError):
    """Outbound email could not be sent."""


class NotImplementedFeatureError(QAForumError):
    """Route exists but the feature is still under development."""
    status_code = 501


class ConfigurationError(Exception):
    """Fatal configuration problem detected at startup."""
