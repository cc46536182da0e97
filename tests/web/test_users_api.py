"""End-to-end tests for signup, login, token refresh and logout."""

from datetime import timedelta

import pytest

from tasklist.utils import now

CREDENTIALS = {"email": "a@b.com", "password": "secret1"}


def signup(client, credentials=CREDENTIALS):
    response = client.post("/users", json=credentials)
    assert response.status_code == 200, response.text
    return response


def session_headers(response):
    return {"x-refresh-token": response.headers["x-refresh-token"], "_id": response.json()["id"]}


class TestSignup:
    """Tests for POST /users."""

    def test_signup_returns_token_pair(self, client):
        response = signup(client)

        assert response.headers["x-access-token"]
        assert response.headers["x-refresh-token"]
        assert response.json()["email"] == "a@b.com"
        assert "password_hash" not in response.json()
        assert "sessions" not in response.json()

    def test_access_token_identifies_new_user(self, client):
        response = signup(client)
        user_id = response.json()["id"]

        created = client.post(
            "/lists", json={"title": "Inbox"}, headers={"x-access-token": response.headers["x-access-token"]}
        )

        assert created.status_code == 200
        assert created.json()["user_id"] == user_id

    def test_duplicate_email_rejected(self, client):
        signup(client)
        response = client.post("/users", json={"email": "A@B.com", "password": "secret2"})
        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"
        assert "x-access-token" not in response.headers

    def test_invalid_password_rejected(self, client):
        response = client.post("/users", json={"email": "a@b.com", "password": "123"})
        assert response.status_code == 400


class TestLogin:
    """Tests for POST /users/login."""

    def test_login_after_signup_succeeds(self, client):
        signed_up = signup(client)

        response = client.post("/users/login", json=CREDENTIALS)

        assert response.status_code == 200
        assert response.json()["id"] == signed_up.json()["id"]
        assert response.headers["x-refresh-token"] != signed_up.headers["x-refresh-token"]
        lists = client.get("/lists", headers={"x-access-token": response.headers["x-access-token"]})
        assert lists.status_code == 200

    def test_wrong_password_issues_nothing(self, client, users_collection):
        signup(client)

        response = client.post("/users/login", json={"email": "a@b.com", "password": "wrong-password"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email or password", "type": "invalid_credentials"}
        assert "x-access-token" not in response.headers
        assert "x-refresh-token" not in response.headers
        assert len(users_collection.documents[0]["sessions"]) == 1

    def test_unknown_email_rejected(self, client):
        response = client.post("/users/login", json={"email": "nobody@b.com", "password": "secret1"})
        assert response.status_code == 400


class TestRefreshAccessToken:
    """Tests for GET /users/me/access-token."""

    def test_valid_session_mints_access_token(self, client):
        signed_up = signup(client)

        response = client.get("/users/me/access-token", headers=session_headers(signed_up))

        assert response.status_code == 200
        access_token = response.headers["x-access-token"]
        assert response.json() == {"accessToken": access_token}
        assert client.get("/lists", headers={"x-access-token": access_token}).status_code == 200

    def test_unknown_refresh_token_rejected(self, client):
        signed_up = signup(client)
        headers = {**session_headers(signed_up), "x-refresh-token": "not-a-session"}

        response = client.get("/users/me/access-token", headers=headers)

        assert response.status_code == 401
        assert response.json()["error"].startswith("User not found")

    def test_missing_headers_rejected(self, client):
        response = client.get("/users/me/access-token")
        assert response.status_code == 401

    def test_expired_session_rejected(self, client, users_collection):
        signed_up = signup(client)
        users_collection.documents[0]["sessions"][0]["expires_at"] = now() - timedelta(seconds=1)

        response = client.get("/users/me/access-token", headers=session_headers(signed_up))

        assert response.status_code == 401
        assert response.json() == {
            "error": "Refresh token has expired or the session is invalid",
            "type": "authentication_error",
        }


class TestLogout:
    """Tests for DELETE /users/me/session."""

    def test_logout_revokes_only_that_session(self, client):
        first = signup(client)
        second = client.post("/users/login", json=CREDENTIALS)

        response = client.delete("/users/me/session", headers=session_headers(first))

        assert response.status_code == 204
        assert client.get("/users/me/access-token", headers=session_headers(first)).status_code == 401
        assert client.get("/users/me/access-token", headers=session_headers(second)).status_code == 200


class TestAccessGuard:
    """Tests for routes protected by the access-token guard."""

    @pytest.mark.parametrize("headers", [{}, {"x-access-token": "garbage"}, {"x-access-token": "a.b.c"}])
    def test_bad_access_token_rejected(self, client, headers):
        response = client.get("/lists", headers=headers)
        assert response.status_code == 401
        assert response.json()["type"] == "authentication_error"

    def test_refresh_token_is_not_an_access_token(self, client):
        signed_up = signup(client)
        response = client.get("/lists", headers={"x-access-token": signed_up.headers["x-refresh-token"]})
        assert response.status_code == 401


class TestServer:
    """Tests for app-level wiring."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_cors_exposes_token_headers(self, client):
        response = client.post("/users", json=CREDENTIALS, headers={"Origin": "http://localhost:4200"})
        exposed = response.headers["access-control-expose-headers"].lower()
        assert "x-access-token" in exposed
        assert "x-refresh-token" in exposed
