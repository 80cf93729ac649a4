"""Password-reset record kept alongside every user."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ResetPasswordRecord(BaseModel):
    """One-to-one companion of a User holding the current reset token."""
    
    id: str = Field(..., description="Record identifier")
    user_id: str = Field(..., description="Owning user")
    reset_password_token: str = Field("", description="Active reset token, empty when none")
    reset_password_token_expire: datetime = Field(..., description="Expiry of the reset token")
    
    class Config:
        frozen = True
    
    def is_active(self, now: Optional[datetime] = None) -> bool:
        """True if a token is set and has not expired yet."""
        if not self.reset_password_token:
            return False
        now = now or datetime.utcnow()
        return self.reset_password_token_expire > now
