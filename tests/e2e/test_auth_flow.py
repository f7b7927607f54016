"""End-to-end tests for authentication flow."""


class TestAuthFlow:
    """Register, log in, inspect the session and log out."""

    def test_register_sets_cookie(self, client):
        response = client.post(
            "/auth/register",
            json={
                "handle": "frodo",
                "email": "frodo@example.com",
                "password": "correct-horse-battery",
            },
        )

        assert response.status_code == 201
        assert response.json()["handle"] == "frodo"
        assert "auth_token" in response.headers.get("set-cookie", "")

    def test_cookie_session(self, client):
        """The cookie from registration is enough to call /auth/me."""
        client.post(
            "/auth/register",
            json={
                "handle": "frodo",
                "email": "frodo@example.com",
                "password": "correct-horse-battery",
            },
        )

        data = client.get("/auth/me").json()

        assert data["authenticated"] is True
        assert data["user"]["handle"] == "frodo"
        assert data["user"]["bag_count"] == 0

    def test_duplicate_handle(self, client, register):
        register("frodo")

        response = client.post(
            "/auth/register",
            json={
                "handle": "frodo",
                "email": "other@example.com",
                "password": "correct-horse-battery",
            },
        )

        assert response.status_code == 409

    def test_login(self, client, register):
        register("frodo")

        response = client.post(
            "/auth/login",
            json={"login": "frodo@example.com", "password": "correct-horse-battery"},
        )

        assert response.status_code == 200
        assert response.json()["handle"] == "frodo"

    def test_login_wrong_password(self, client, register):
        register("frodo")

        response = client.post(
            "/auth/login", json={"login": "frodo", "password": "wrong-password"}
        )

        assert response.status_code == 401

    def test_me_without_session(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_logout_clears_cookie(self, client):
        response = client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert "auth_token" in response.headers.get("set-cookie", "")
