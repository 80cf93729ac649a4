"""User data model for qaForum."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """User role enumeration."""
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """Public view of a user (the password hash is never part of it)."""
    
    id: str = Field(..., description="User identifier (ObjectId hex)")
    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Unique e-mail address")
    role: UserRole = Field(UserRole.USER, description="Authorization role")
    title: Optional[str] = Field(None, description="Profile title")
    about: Optional[str] = Field(None, description="Free-form profile text")
    place: Optional[str] = Field(None, description="Location")
    website: Optional[str] = Field(None, description="Personal website URL")
    profile_image: str = Field("default.jpg", description="Profile image file name")
    blocked: bool = Field(False, description="Whether the account is blocked")
    created_at: datetime = Field(..., description="Registration timestamp")
    
    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        frozen = True
