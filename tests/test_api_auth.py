"""Integration tests for registration, login, current user and logout."""

from unittest.mock import patch

import pytest
from pymongo.errors import PyMongoError

from qaforum.database.reset_password_repository import ResetPasswordRepository
from qaforum.services.auth import AuthService

ALICE_REGISTRATION = {
    "name": "Alice",
    "username": "alice",
    "email": "alice@x.com",
    "password": "secret1",
}


class TestRegister:
    """Test POST /api/auth/register."""

    def test_register_success(self, test_client, user_repository, reset_password_repository):
        response = test_client.post("/api/auth/register", json=ALICE_REGISTRATION)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "You have been registered. Now login."}

        user = user_repository.get_by_email("alice@x.com")
        assert user is not None
        assert user.username == "alice"
        record = reset_password_repository.get_by_user(user.id)
        assert record is not None
        assert record.is_active() is False

    @pytest.mark.parametrize("missing,message", [
        ("name", "Please provide a name."),
        ("username", "Please provide a username value"),
        ("email", "Please provide an e-mail address."),
        ("password", "Please provide a password"),
    ])
    def test_missing_field(self, test_client, missing, message):
        payload = {k: v for k, v in ALICE_REGISTRATION.items() if k != missing}
        response = test_client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": message}

    def test_invalid_email(self, test_client):
        response = test_client.post("/api/auth/register", json={**ALICE_REGISTRATION, "email": "not-an-email"})
        assert response.status_code == 400
        assert response.json()["message"] == "Please provide a valid e-mail"

    def test_short_password(self, test_client):
        response = test_client.post("/api/auth/register", json={**ALICE_REGISTRATION, "password": "12345"})
        assert response.status_code == 400
        assert response.json()["message"] == "Please provide a password longer than 6 characters"

    def test_password_longer_than_bcrypt_limit(self, test_client, user_repository):
        response = test_client.post("/api/auth/register", json={**ALICE_REGISTRATION, "password": "p" * 80})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Please provide a password of at most 72 bytes"}
        assert user_repository.get_by_email("alice@x.com") is None

    def test_password_at_bcrypt_limit(self, test_client):
        response = test_client.post("/api/auth/register", json={**ALICE_REGISTRATION, "password": "p" * 72})
        assert response.status_code == 200

    def test_password_limit_counts_bytes(self, test_client):
        """Multi-byte characters count by their UTF-8 length."""
        response = test_client.post("/api/auth/register", json={**ALICE_REGISTRATION, "password": "é" * 40})
        assert response.status_code == 400

    @pytest.mark.parametrize("override", [{"email": "other@x.com"}, {"username": "alice2"}])
    def test_duplicate_user(self, test_client, override):
        assert test_client.post("/api/auth/register", json=ALICE_REGISTRATION).status_code == 200

        response = test_client.post("/api/auth/register", json={**ALICE_REGISTRATION, **override})
        assert response.status_code == 400
        assert response.json()["message"] == "That username or e-mail address is already in use."

    def test_user_removed_when_reset_record_fails(self, user_repository, reset_password_repository):
        """Registration leaves no user behind if its reset record cannot be created."""
        service = AuthService(user_repository, reset_password_repository, bcrypt_rounds=4)
        with patch.object(ResetPasswordRepository, "create_for_user", side_effect=PyMongoError("down")):
            with pytest.raises(PyMongoError):
                service.register(**ALICE_REGISTRATION)

        assert user_repository.get_by_email("alice@x.com") is None


class TestLogin:
    """Test POST /api/auth/login."""

    def test_login_sets_cookie(self, test_client):
        test_client.post("/api/auth/register", json=ALICE_REGISTRATION)

        response = test_client.post("/api/auth/login", json={"email": "alice@x.com", "password": "secret1"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["name"] == "Alice"
        assert body["access_token"]
        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"access_token={body['access_token']}")
        assert "HttpOnly" in cookie

    def test_cookie_authenticates_following_requests(self, test_client):
        test_client.post("/api/auth/register", json=ALICE_REGISTRATION)
        test_client.post("/api/auth/login", json={"email": "alice@x.com", "password": "secret1"})

        response = test_client.get("/api/auth/me")
        assert response.status_code == 200
        assert response.json()["data"]["email"] == "alice@x.com"

    def test_wrong_password(self, test_client):
        test_client.post("/api/auth/register", json=ALICE_REGISTRATION)

        response = test_client.post("/api/auth/login", json={"email": "alice@x.com", "password": "wrong"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Password is incorrect."}
        assert "set-cookie" not in response.headers

    def test_overlong_password_is_incorrect(self, test_client):
        test_client.post("/api/auth/register", json=ALICE_REGISTRATION)

        response = test_client.post("/api/auth/login", json={"email": "alice@x.com", "password": "p" * 80})

        assert response.status_code == 400
        assert response.json()["message"] == "Password is incorrect."

    def test_unknown_email(self, test_client):
        response = test_client.post("/api/auth/login", json={"email": "nobody@x.com", "password": "secret1"})
        assert response.status_code == 404
        assert response.json()["message"] == "There is no user with that e-mail address."

    def test_missing_credentials(self, test_client):
        response = test_client.post("/api/auth/login", json={"email": "alice@x.com"})
        assert response.status_code == 400
        assert response.json()["message"] == "Please provide a password to login"


class TestMe:
    """Test GET /api/auth/me."""

    def test_returns_user_without_password(self, test_client, authenticate, alice):
        authenticate(alice)
        response = test_client.get("/api/auth/me")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == alice.id
        assert data["username"] == "alice"
        assert data["role"] == "user"
        assert "password" not in data

    def test_deleted_user(self, test_client, authenticate, user_repository, alice):
        authenticate(alice)
        user_repository.delete(alice.id)

        response = test_client.get("/api/auth/me")
        assert response.status_code == 404
        assert response.json()["message"] == "There is no user with that id."


class TestLogout:
    """Test GET /api/auth/logout."""

    def test_logout_clears_cookie(self, test_client, authenticate, alice):
        authenticate(alice)
        response = test_client.get("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "You have been logged out."}
        assert "Max-Age=0" in response.headers["set-cookie"]

    def test_logout_requires_token(self, test_client):
        response = test_client.get("/api/auth/logout")
        assert response.status_code == 401
