"""Admin area placeholder."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/admin", response_class=PlainTextResponse)
def admin_panel():
    return "Admin"
