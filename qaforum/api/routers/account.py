"""Account maintenance endpoints."""

from fastapi import APIRouter, Depends

from qaforum.api.dependencies import get_account_service
from qaforum.api.models import ForgotPasswordRequest
from qaforum.errors import NotImplementedFeatureError
from qaforum.services.account import AccountService

router = APIRouter(prefix="/account", tags=["account"])

UNDER_DEVELOPMENT = "This feature is still under development."


@router.put("/forgotpassword")
def forgot_password(payload: ForgotPasswordRequest, service: AccountService = Depends(get_account_service)):
    """Generate a password-reset token and e-mail the reset link."""
    service.forgot_password(payload.email)
    return {"success": True, "message": "Email Sent To Your Email"}


@router.put("/resetpassword")
def reset_password():
    raise NotImplementedFeatureError(UNDER_DEVELOPMENT)


@router.put("/updateaccount")
def update_account():
    raise NotImplementedFeatureError(UNDER_DEVELOPMENT)
