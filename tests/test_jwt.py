"""Tests for access token issuing, verification and delivery."""

from datetime import datetime, timedelta

import jwt
import pytest
from fastapi import Response

from qaforum.auth.jwt import TokenService
from qaforum.config import TokenConfig
from qaforum.errors import InvalidTokenError, TokenExpiredError
from qaforum.models.identity import AuthenticatedUser

ALICE = AuthenticatedUser(id="65f000000000000000000001", name="Alice")


class TestIssueAndVerify:
    """Test TokenService.issue() and verify()."""

    def test_round_trip_keeps_identity(self, token_service):
        token = token_service.issue(ALICE)
        assert token_service.verify(token) == ALICE

    def test_claims_include_expiry(self, token_service, token_config):
        token = token_service.issue(ALICE, now=datetime.utcnow())
        payload = jwt.decode(token, token_config.secret_key, algorithms=["HS256"])
        assert payload["id"] == ALICE.id
        assert payload["name"] == "Alice"
        assert payload["exp"] - payload["iat"] == 3600

    def test_expired_token(self, token_service):
        token = token_service.issue(ALICE, now=datetime.utcnow() - timedelta(hours=2))
        with pytest.raises(TokenExpiredError) as exc_info:
            token_service.verify(token)
        assert exc_info.value.status_code == 401

    def test_token_signed_with_other_key(self, token_service):
        other = TokenService(TokenConfig(secret_key="another-secret-key-of-sufficient-length"))
        with pytest.raises(InvalidTokenError):
            token_service.verify(other.issue(ALICE))

    def test_tampered_token(self, token_service):
        header, payload, signature = token_service.issue(ALICE).split(".")
        tampered = ".".join([header, payload, signature[::-1]])
        with pytest.raises(InvalidTokenError):
            token_service.verify(tampered)

    def test_token_without_user_id(self, token_service, token_config):
        token = jwt.encode(
            {"name": "Alice", "exp": datetime.utcnow() + timedelta(hours=1)},
            token_config.secret_key,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            token_service.verify(token)


class TestDeliver:
    """Test TokenService.deliver() and clear()."""

    def test_sets_http_only_cookie_and_returns_body(self, token_service):
        response = Response()
        body = token_service.deliver(ALICE, response)

        assert body["success"] is True
        assert body["data"] == {"id": ALICE.id, "name": "Alice"}
        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"access_token={body['access_token']}")
        assert "HttpOnly" in cookie
        assert "Path=/" in cookie
        assert "Secure" not in cookie

    def test_secure_flag_outside_development(self, token_config):
        service = TokenService(TokenConfig(secret_key=token_config.secret_key, secure_cookie=True))
        response = Response()
        service.deliver(ALICE, response)
        assert "Secure" in response.headers["set-cookie"]

    def test_clear_expires_cookie(self, token_service):
        response = Response()
        token_service.clear(response)
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("access_token=")
        assert "Max-Age=0" in cookie
