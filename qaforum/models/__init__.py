"""Data models for qaForum."""

from qaforum.models.user import User, UserRole
from qaforum.models.identity import AuthenticatedUser
from qaforum.models.reset_password import ResetPasswordRecord
from qaforum.models.question import Question
from qaforum.models.answer import Answer

__all__ = [
    "User",
    "UserRole",
    "AuthenticatedUser",
    "ResetPasswordRecord",
    "Question",
    "Answer",
]
