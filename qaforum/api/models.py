"""Request models for the HTTP API.

Fields are optional so that missing values reach the services, which answer
with field-specific messages.
"""

from typing import Optional
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    name: Optional[str] = Field(None, description="Display name")
    username: Optional[str] = Field(None, description="Unique username")
    email: Optional[str] = Field(None, description="Unique e-mail address")
    password: Optional[str] = Field(None, description="Plaintext password (min 6 characters)")


class LoginRequest(BaseModel):
    """Request model for login."""
    email: Optional[str] = None
    password: Optional[str] = None


class ForgotPasswordRequest(BaseModel):
    email: Optional[str] = None


class QuestionRequest(BaseModel):
    """Request model for asking or editing a question."""
    title: Optional[str] = Field(None, description="At least 10 characters")
    content: Optional[str] = Field(None, description="At least 20 characters")


class AnswerRequest(BaseModel):
    """Request model for adding or editing an answer."""
    content: Optional[str] = Field(None, description="At least 10 characters")
