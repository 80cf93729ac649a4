"""Public profile endpoint."""

from fastapi import APIRouter, Depends

from qaforum.api.dependencies import get_profile_service
from qaforum.services.profiles import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/{profile_id}")
def get_profile(profile_id: str, service: ProfileService = Depends(get_profile_service)):
    return {"success": True, "data": service.get_profile(profile_id)}
