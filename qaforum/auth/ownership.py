"""Resource ownership checks for mutating endpoints."""

from typing import Protocol

from qaforum.errors import PermissionDeniedError
from qaforum.models.identity import AuthenticatedUser


class Owned(Protocol):
    user_id: str


def is_owner(resource: Owned, authenticated_id: str) -> bool:
    """True if the resource was authored by `authenticated_id`."""
    return str(resource.user_id) == str(authenticated_id)


def ensure_owner(resource: Owned, identity: AuthenticatedUser, message: str) -> None:
    """Raise PermissionDeniedError unless `identity` owns `resource`."""
    if not is_owner(resource, identity.id):
        raise PermissionDeniedError(message)
