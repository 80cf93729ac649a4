"""Pytest fixtures and configuration for qaForum tests."""

import pytest
import mongomock
from fastapi.testclient import TestClient

from qaforum.api.app import create_app
from qaforum.api.dependencies import get_email_sender
from qaforum.auth.jwt import ACCESS_TOKEN_COOKIE, TokenService
from qaforum.auth.passwords import hash_password
from qaforum.config import Settings, TokenConfig
from qaforum.database.answer_repository import AnswerRepository
from qaforum.database.database import init_db
from qaforum.database.question_repository import QuestionRepository
from qaforum.database.reset_password_repository import ResetPasswordRepository
from qaforum.database.user_repository import UserRepository
from qaforum.errors import EmailDeliveryError

# HS256 keys shorter than 32 bytes trigger PyJWT warnings.
TEST_SECRET_KEY = "qaforum-test-secret-key-0123456789abcdef"
TEST_PASSWORD = "secret1"
# Lowest cost bcrypt accepts; keeps the suite fast.
TEST_BCRYPT_ROUNDS = 4


class RecordingEmailSender:
    """Collects outgoing mail instead of talking to SMTP."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send_email(self, to_email: str, subject: str, html_content: str) -> None:
        if self.fail:
            raise EmailDeliveryError("Email couldn't be sent")
        self.sent.append({"to": to_email, "subject": subject, "html": html_content})


@pytest.fixture
def token_config():
    return TokenConfig(
        secret_key=TEST_SECRET_KEY,
        expires_in=3600,
        cookie_expires_in=3600000,
        secure_cookie=False,
    )


@pytest.fixture
def token_service(token_config):
    return TokenService(token_config)


@pytest.fixture
def test_settings(token_config):
    return Settings(token=token_config, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture(scope="function")
def mongo_db():
    """In-memory MongoDB stand-in, created fresh for each test."""
    client = mongomock.MongoClient()
    db = client["qaforum_test"]
    init_db(db)
    try:
        yield db
    finally:
        client.close()


@pytest.fixture
def user_repository(mongo_db):
    return UserRepository(mongo_db)


@pytest.fixture
def reset_password_repository(mongo_db):
    return ResetPasswordRepository(mongo_db)


@pytest.fixture
def question_repository(mongo_db):
    return QuestionRepository(mongo_db)


@pytest.fixture
def answer_repository(mongo_db):
    return AnswerRepository(mongo_db)


@pytest.fixture
def make_user(user_repository, reset_password_repository):
    """Factory that stores a user (and its reset record) directly."""

    def _make(username="alice", email=None, name=None, password=TEST_PASSWORD):
        user = user_repository.create(
            name=name or username.title(),
            username=username,
            email=email or f"{username}@x.com",
            password_hash=hash_password(password, rounds=TEST_BCRYPT_ROUNDS),
        )
        reset_password_repository.create_for_user(user.id)
        return user

    return _make


@pytest.fixture
def alice(make_user):
    return make_user("alice")


@pytest.fixture
def bob(make_user):
    return make_user("bob")


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def test_client(test_settings, mongo_db, email_sender):
    """FastAPI test client backed by the in-memory database."""
    app = create_app(test_settings, database=mongo_db)
    app.dependency_overrides[get_email_sender] = lambda: email_sender

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def authenticate(test_client, token_service):
    """Put a valid access token for `user` into the client's cookie jar."""

    def _authenticate(user):
        test_client.cookies.clear()
        test_client.cookies.set(ACCESS_TOKEN_COOKIE, token_service.issue(user))

    return _authenticate
