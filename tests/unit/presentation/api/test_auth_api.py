"""API tests for the authentication router and error handling."""

from datetime import timedelta
from unittest.mock import Mock
from urllib.parse import parse_qs, urlparse

import pytest
from fastapi.testclient import TestClient

from dinely.infrastructure.email import EmailService
from dinely.presentation.api.dependencies import get_email_service
from dinely_auth import JWTService
from dinely_config import get_settings

AUTH = "/api/v1/auth"
USERS = "/api/v1/users"
TEST_PASSWORD = "StrongPassword123!"  # NOQA: S105
NEW_PASSWORD = "AnotherStrongPassword456!"  # NOQA: S105


def _app_jwt_service() -> JWTService:
    """A token service sharing the app's signing keys."""
    return JWTService(get_settings().jwt_config())


class TestLogin:
    def test_login_returns_token_pair(self, client, register):
        user = register()

        response = client.post(
            f"{AUTH}/login",
            json={"email": "a@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == 15 * 60
        assert body["access_token"]
        assert body["refresh_token"]
        assert body["user"] == {
            "id": user["id"],
            "email": "a@example.com",
            "name": "John Doe",
            "phone": "+1234567890",
        }

    def test_wrong_password_returns_401(self, client, register):
        register()

        response = client.post(
            f"{AUTH}/login",
            json={"email": "a@example.com", "password": "WrongPassword!"},
        )

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Invalid email or password",
            "code": "UNAUTHORIZED",
        }

    @pytest.mark.parametrize("email", ["nobody@example.com", "not-an-email"])
    def test_unknown_or_malformed_email_returns_same_401(self, client, email):
        response = client.post(
            f"{AUTH}/login",
            json={"email": email, "password": TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_deactivated_account_returns_401(self, client, auth_headers):
        client.delete(f"{USERS}/profile", headers=auth_headers)

        response = client.post(
            f"{AUTH}/login",
            json={"email": "a@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"


class TestRefresh:
    def test_refresh_returns_new_pair(self, client, register, login):
        register()
        tokens = login()

        response = client.post(
            f"{AUTH}/refresh",
            json={"refresh_token": tokens["refresh_token"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["access_token"]
        assert body["refresh_token"]
        headers = {"Authorization": f"Bearer {body['access_token']}"}
        assert client.get(f"{USERS}/profile", headers=headers).status_code == 200

    def test_access_token_cannot_refresh(self, client, register, login):
        register()
        tokens = login()

        response = client.post(
            f"{AUTH}/refresh",
            json={"refresh_token": tokens["access_token"]},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_refresh_token_is_not_an_access_token(self, client, register, login):
        register()
        tokens = login()

        response = client.get(
            f"{USERS}/profile",
            headers={"Authorization": f"Bearer {tokens['refresh_token']}"},
        )

        assert response.status_code == 401

    def test_refresh_for_deactivated_user_returns_401(self, client, register, login):
        register()
        tokens = login()
        headers = {"Authorization": f"Bearer {tokens['access_token']}"}
        client.delete(f"{USERS}/profile", headers=headers)

        response = client.post(
            f"{AUTH}/refresh",
            json={"refresh_token": tokens["refresh_token"]},
        )

        assert response.status_code == 401


class TestTokenEndpoints:
    def test_verify_token_echoes_identity(self, client, register, login):
        user = register()
        headers = {"Authorization": f"Bearer {login()['access_token']}"}

        response = client.post(f"{AUTH}/verify-token", headers=headers)

        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "user": {"id": user["id"], "email": "a@example.com", "name": "John Doe"},
        }

    def test_verify_token_without_token_returns_401(self, client):
        response = client.post(f"{AUTH}/verify-token")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_logout(self, client, auth_headers):
        response = client.post(f"{AUTH}/logout", headers=auth_headers)

        assert response.status_code == 204

    def test_expired_access_token_returns_401(self, client, register):
        user = register()
        token = _app_jwt_service().create_access_token(
            user["id"],
            user["email"],
            user["name"],
            expires_delta=timedelta(seconds=-1),
        )

        response = client.get(
            f"{USERS}/profile",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401


class TestPasswords:
    def test_change_password(self, client, auth_headers, login):
        response = client.post(
            f"{AUTH}/change-password",
            headers=auth_headers,
            json={"current_password": TEST_PASSWORD, "new_password": NEW_PASSWORD},
        )

        assert response.status_code == 204
        login(password=NEW_PASSWORD)
        old = client.post(
            f"{AUTH}/login",
            json={"email": "a@example.com", "password": TEST_PASSWORD},
        )
        assert old.status_code == 401

    def test_change_password_wrong_current_returns_401(self, client, auth_headers):
        response = client.post(
            f"{AUTH}/change-password",
            headers=auth_headers,
            json={"current_password": "WrongPassword!", "new_password": NEW_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Current password is incorrect"

    def test_change_password_weak_new_returns_400(self, client, auth_headers):
        response = client.post(
            f"{AUTH}/change-password",
            headers=auth_headers,
            json={"current_password": TEST_PASSWORD, "new_password": "short"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    @pytest.mark.parametrize("email", ["a@example.com", "nobody@example.com"])
    def test_forgot_password_is_uniform(self, client, register, email):
        register()

        response = client.post(f"{AUTH}/forgot-password", json={"email": email})

        assert response.status_code == 202
        body = response.json()
        assert set(body) == {"message"}
        assert "token" not in body["message"].lower()

    def test_forgot_password_link_resets_password(
        self,
        app,
        client,
        register,
        login,
    ):
        register()
        email_service = Mock(spec=EmailService)
        app.dependency_overrides[get_email_service] = lambda: email_service

        response = client.post(
            f"{AUTH}/forgot-password",
            json={"email": "a@example.com"},
        )

        assert response.status_code == 202
        call = email_service.send_password_reset_email.call_args
        assert call.kwargs["to_email"] == "a@example.com"
        link = urlparse(call.kwargs["reset_link"])
        assert link.path == "/reset-password"
        token = parse_qs(link.query)["token"][0]

        reset = client.post(
            f"{AUTH}/reset-password",
            json={"token": token, "new_password": NEW_PASSWORD},
        )

        assert reset.status_code == 204
        login(password=NEW_PASSWORD)

    def test_forgot_password_for_unknown_email_sends_nothing(self, app, client):
        email_service = Mock(spec=EmailService)
        app.dependency_overrides[get_email_service] = lambda: email_service

        response = client.post(
            f"{AUTH}/forgot-password",
            json={"email": "nobody@example.com"},
        )

        assert response.status_code == 202
        email_service.send_password_reset_email.assert_not_called()

    def test_reset_password(self, client, register, login):
        user = register()
        token = _app_jwt_service().issue_password_reset_token(user["id"])

        response = client.post(
            f"{AUTH}/reset-password",
            json={"token": token, "new_password": NEW_PASSWORD},
        )

        assert response.status_code == 204
        login(password=NEW_PASSWORD)

    def test_reset_password_with_access_token_returns_401(
        self,
        client,
        register,
        login,
    ):
        register()
        tokens = login()

        response = client.post(
            f"{AUTH}/reset-password",
            json={"token": tokens["access_token"], "new_password": NEW_PASSWORD},
        )

        assert response.status_code == 401


class TestErrorHandling:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unhandled_exception_is_opaque(self, app):
        @app.get("/boom")
        async def boom():
            msg = "database password is hunter2"
            raise RuntimeError(msg)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An internal error occurred",
            "code": "INTERNAL_ERROR",
        }
        assert "hunter2" not in response.text
