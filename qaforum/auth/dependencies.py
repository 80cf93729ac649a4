"""FastAPI dependencies for authentication."""

from typing import Optional
from fastapi import Cookie, Depends, Request

from qaforum.auth.jwt import ACCESS_TOKEN_COOKIE, TokenService
from qaforum.config import Settings
from qaforum.errors import AuthError
from qaforum.models.identity import AuthenticatedUser


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    """Token service bound to the application's token configuration."""
    return request.app.state.token_service


def _looks_like_jwt(token: str) -> bool:
    # Compact JWS: header.payload.signature
    parts = token.split(".")
    return len(parts) == 3 and all(parts)


def get_current_user(
    request: Request,
    access_token: Optional[str] = Cookie(default=None, alias=ACCESS_TOKEN_COOKIE),
    token_service: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """Authenticate the request from its access token cookie.

    Args:
        request: Incoming request
        access_token: Value of the `access_token` cookie
        token_service: Token verifier
        settings: Application settings

    Returns:
        The verified identity (`id`, `name`)

    Raises:
        AuthError: If the token is missing (401) or malformed (400)
        TokenExpiredError, InvalidTokenError: If verification fails
    """
    token = access_token
    if not token and settings.accept_header_token and token_service.has_bearer_prefix(request):
        token = token_service.extract_from_header(request)

    if not token:
        raise AuthError("Please provide a token or authenticate.", 401)

    if not isinstance(token, str) or not _looks_like_jwt(token):
        raise AuthError("Invalid token format.", 400)

    return token_service.verify(token)
