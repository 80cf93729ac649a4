"""Registration, login, current user and logout endpoints."""

from fastapi import APIRouter, Depends, Response

from qaforum.api.dependencies import get_auth_service
from qaforum.api.models import LoginRequest, RegisterRequest
from qaforum.auth.dependencies import get_current_user, get_token_service
from qaforum.auth.jwt import TokenService
from qaforum.models.identity import AuthenticatedUser
from qaforum.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Create an account."""
    service.register(
        name=payload.name,
        username=payload.username,
        email=payload.email,
        password=payload.password,
    )
    return {"success": True, "message": "You have been registered. Now login."}


@router.post("/login")
def login(
    payload: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    token_service: TokenService = Depends(get_token_service),
):
    """Check credentials, then set the access token cookie and return the token."""
    user = service.login(email=payload.email, password=payload.password)
    return token_service.deliver(user, response)


@router.get("/me")
def me(
    identity: AuthenticatedUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    return {"success": True, "data": service.me(identity)}


@router.get("/logout", dependencies=[Depends(get_current_user)])
def logout(
    response: Response,
    token_service: TokenService = Depends(get_token_service),
):
    token_service.clear(response)
    return {"success": True, "message": "You have been logged out."}
