"""Identity carried by a verified access token."""

from pydantic import BaseModel


class AuthenticatedUser(BaseModel):
    """Claims decoded from a verified access token."""
    id: str
    name: str

    class Config:
        frozen = True
