"""FastAPI providers for repositories and services."""

from fastapi import Depends
from pymongo.database import Database

from qaforum.auth.dependencies import get_settings
from qaforum.config import Settings
from qaforum.database.answer_repository import AnswerRepository
from qaforum.database.database import get_db
from qaforum.database.question_repository import QuestionRepository
from qaforum.database.reset_password_repository import ResetPasswordRepository
from qaforum.database.user_repository import UserRepository
from qaforum.integrations.email import EmailSender
from qaforum.services.account import AccountService
from qaforum.services.answers import AnswerService
from qaforum.services.auth import AuthService
from qaforum.services.profiles import ProfileService
from qaforum.services.questions import QuestionService


def get_email_sender(settings: Settings = Depends(get_settings)) -> EmailSender:
    return EmailSender(settings.email)


def get_auth_service(
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(UserRepository(db), ResetPasswordRepository(db), bcrypt_rounds=settings.bcrypt_rounds)


def get_account_service(
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
    email_sender: EmailSender = Depends(get_email_sender),
) -> AccountService:
    return AccountService(
        UserRepository(db),
        ResetPasswordRepository(db),
        email_sender,
        settings.reset_password_url,
    )


def get_profile_service(db: Database = Depends(get_db)) -> ProfileService:
    return ProfileService(UserRepository(db))


def get_question_service(db: Database = Depends(get_db)) -> QuestionService:
    return QuestionService(QuestionRepository(db), AnswerRepository(db))


def get_answer_service(db: Database = Depends(get_db)) -> AnswerService:
    return AnswerService(QuestionRepository(db), AnswerRepository(db))
