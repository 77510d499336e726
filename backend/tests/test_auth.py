"""Tests for authentication and authorization."""

import pytest
from datetime import datetime, timezone, timedelta
from fastapi import HTTPException
from jose import jwt
from newsdesk.core.auth import (
    create_access_token,
    decode_token,
    ALGORITHM,
)
from newsdesk.core.config import settings


@pytest.mark.unit
class TestAuthentication:
    """Test authentication utilities."""

    def test_create_access_token(self, test_user):
        """Test creating access token."""
        token = create_access_token(data={"sub": test_user.id})

        assert isinstance(token, str)

        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        assert payload["sub"] == str(test_user.id)
        assert payload["type"] == "access"
        assert "exp" in payload
        assert "iat" in payload
        assert "jti" in payload

    def test_create_access_token_with_custom_expiry(self, test_user):
        """Test creating access token with custom expiration."""
        token = create_access_token(
            data={"sub": test_user.id}, expires_delta=timedelta(hours=2)
        )

        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        exp_time = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        iat_time = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)

        time_diff = (exp_time - iat_time).total_seconds()
        assert 7100 < time_diff < 7300

    def test_decode_token_valid(self, test_user):
        """Test decoding valid token."""
        token = create_access_token(data={"sub": test_user.id})
        payload = decode_token(token, token_type="access")

        assert payload["sub"] == str(test_user.id)
        assert payload["type"] == "access"

    def test_decode_token_wrong_type(self, test_user):
        """Test decoding token with wrong type."""
        token = create_access_token(data={"sub": test_user.id})

        with pytest.raises(HTTPException) as exc_info:
            decode_token(token, token_type="refresh")
        assert exc_info.value.status_code == 401

    def test_decode_token_expired(self, test_user):
        """Test decoding expired token."""
        token = create_access_token(
            data={"sub": test_user.id},
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(HTTPException) as exc_info:
            decode_token(token)
        assert exc_info.value.detail == "Token has expired"

    def test_decode_token_invalid(self):
        """Test decoding invalid token."""
        with pytest.raises(HTTPException):
            decode_token("invalid.token.here")


@pytest.mark.unit
class TestAuthorizationEndpoints:
    """Test authorization on protected endpoints."""

    def test_me_without_auth(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401

    def test_me_with_cookie(self, authenticated_client, test_user):
        response = authenticated_client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.json()["email"] == test_user.email

    def test_me_with_bearer_header(self, client, auth_headers, test_user):
        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["id"] == test_user.id

    def test_protected_endpoint_with_invalid_token(self, client):
        client.cookies.set("auth_token", "invalid_token")
        response = client.post(
            "/api/news-lists/", json={"name": "Test", "newspapers": [1]}
        )
        assert response.status_code == 401

    def test_inactive_user_is_rejected(self, authenticated_client, db_session, test_user):
        test_user.is_active = False
        db_session.commit()

        response = authenticated_client.get("/api/auth/me")
        assert response.status_code == 403


@pytest.mark.unit
class TestDevLogin:
    """Test the development sign-in endpoint."""

    def test_dev_login_creates_user_and_sets_cookie(self, client, db_session):
        from newsdesk.models.user import User

        response = client.post(
            "/api/auth/dev-login", json={"email": "redaktion@example.com"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == "redaktion@example.com"
        assert data["user"]["name"] == "redaktion"
        assert "auth_token=" in response.headers["set-cookie"]

        user = db_session.query(User).filter(User.email == "redaktion@example.com").first()
        assert user is not None
        assert decode_token(data["access_token"])["sub"] == str(user.id)

    def test_dev_login_reuses_existing_user(self, client, test_user, db_session):
        from newsdesk.models.user import User

        response = client.post("/api/auth/dev-login", json={"email": test_user.email})

        assert response.status_code == 200
        assert response.json()["user"]["id"] == test_user.id
        assert db_session.query(User).count() == 1

    def test_dev_login_disabled(self, client, monkeypatch):
        monkeypatch.setattr(settings, "DEV_MODE", False)

        response = client.post("/api/auth/dev-login", json={"email": "x@example.com"})

        assert response.status_code == 403

    def test_logout_clears_cookie(self, authenticated_client):
        response = authenticated_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert "auth_token" in response.headers.get("set-cookie", "")
