"""JWT token generation and validation for qaForum."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Protocol

import jwt
from fastapi import Request, Response

from qaforum.config import TokenConfig
from qaforum.errors import InvalidTokenError, TokenExpiredError
from qaforum.models.identity import AuthenticatedUser

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "access_token"
# The Authorization header is expected as "Bearer: <token>" (colon included).
BEARER_PREFIX = "Bearer:"


class Identity(Protocol):
    id: str
    name: str


class TokenService:
    """Issues, delivers and verifies signed access tokens."""

    def __init__(self, config: TokenConfig):
        self.config = config

    def issue(self, identity: Identity, now: Optional[datetime] = None) -> str:
        """Create a signed access token for a user.

        Args:
            identity: Object exposing `id` and `name`
            now: Issue time (defaults to current UTC time)

        Returns:
            Encoded JWT string carrying `id` and `name` claims
        """
        issued_at = now or datetime.utcnow()
        payload = {
            "id": str(identity.id),
            "name": identity.name,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.config.expires_in),
        }
        return jwt.encode(payload, self.config.secret_key, algorithm=self.config.algorithm)

    def verify(self, token: str) -> AuthenticatedUser:
        """Verify signature and expiry of an access token.

        Args:
            token: JWT string

        Returns:
            The identity claims of the token

        Raises:
            TokenExpiredError: If the token lifetime has elapsed
            InvalidTokenError: If the signature or claims are invalid
        """
        try:
            payload = jwt.decode(token, self.config.secret_key, algorithms=[self.config.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired.") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e) or "Invalid token.") from e

        user_id = payload.get("id")
        if not user_id:
            raise InvalidTokenError("Token payload is missing the user id.")
        return AuthenticatedUser(id=str(user_id), name=payload.get("name") or "")

    def deliver(self, user: Identity, response: Response) -> Dict:
        """Set the access token cookie on `response` and build the login body.

        The cookie lifetime is configured separately from the token lifetime.
        """
        token = self.issue(user)
        expires = datetime.now(timezone.utc) + timedelta(milliseconds=self.config.cookie_expires_in)
        response.set_cookie(
            key=ACCESS_TOKEN_COOKIE,
            value=token,
            httponly=True,
            secure=self.config.secure_cookie,
            expires=expires,
            path="/",
        )
        return {
            "success": True,
            "access_token": token,
            "data": {"id": user.id, "name": user.name},
        }

    def clear(self, response: Response) -> None:
        """Remove the access token cookie."""
        response.delete_cookie(
            key=ACCESS_TOKEN_COOKIE,
            path="/",
            httponly=True,
            secure=self.config.secure_cookie,
        )

    @staticmethod
    def has_bearer_prefix(request: Request) -> bool:
        """True if the Authorization header is present and starts with `Bearer:`."""
        authorization = request.headers.get("authorization")
        return bool(authorization) and authorization.startswith(BEARER_PREFIX)

    @staticmethod
    def extract_from_header(request: Request) -> Optional[str]:
        """Return the token part of the Authorization header, if any."""
        authorization = request.headers.get("authorization")
        if not authorization:
            return None
        parts = authorization.split(" ")
        if len(parts) < 2 or not parts[1]:
            return None
        return parts[1]
