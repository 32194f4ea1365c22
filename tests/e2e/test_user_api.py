"""End-to-end tests for user, auth and meta endpoints."""


class TestUserEndpoints:
    """User registration and lookup."""

    def test_register_and_fetch(self, register, client):
        register("alice")

        response = client.get("/users/uid-alice")

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alice"
        assert "password" not in body

    def test_duplicate_registration_conflicts(self, register, client):
        register("alice")

        response = client.post(
            "/users",
            json={
                "username": "alice",
                "email": "another@example.com",
                "password": "pw",
            },
        )

        assert response.status_code == 409

    def test_list_users_sorted(self, register, client):
        register("zed")
        register("amy")

        body = client.get("/users").json()

        assert [u["username"] for u in body["users"]] == ["amy", "zed"]

    def test_get_missing_user_returns_404(self, client):
        assert client.get("/users/nobody").status_code == 404

    def test_multibyte_password_too_long_for_bcrypt(self, client):
        response = client.post(
            "/users",
            json={
                "username": "zoe",
                "email": "zoe@example.com",
                "password": "é" * 40,
            },
        )

        assert response.status_code == 422
        assert client.get("/users").json()["total"] == 0

    def test_multibyte_password_within_limit(self, client):
        password = "é" * 36
        response = client.post(
            "/users",
            json={"username": "zoe", "email": "zoe@example.com", "password": password},
        )
        assert response.status_code == 201

        response = client.post(
            "/auth/login", json={"username": "zoe", "password": password}
        )

        assert response.status_code == 200


class TestAuthEndpoints:
    """Login, logout and session status."""

    def test_me_reports_logged_in_user(self, register):
        alice = register("alice")

        body = alice.get("/auth/me").json()

        assert body["authenticated"] is True
        assert body["user"]["username"] == "alice"

    def test_me_without_cookie(self, client):
        assert client.get("/auth/me").json() == {"authenticated": False, "user": None}

    def test_wrong_password_rejected(self, register, client):
        register("alice")

        response = client.post(
            "/auth/login", json={"username": "alice", "password": "wrong"}
        )

        assert response.status_code == 401
        assert "auth_token" not in response.cookies

    def test_overlong_login_password_rejected(self, register, client):
        register("alice")

        response = client.post(
            "/auth/login", json={"username": "alice", "password": "é" * 40}
        )

        assert response.status_code == 422

    def test_logout_clears_session(self, register):
        alice = register("alice")

        response = alice.post("/auth/logout")

        assert response.status_code == 200
        assert alice.get("/auth/me").json()["authenticated"] is False


class TestMetaEndpoints:
    """Fixed vocabularies and health."""

    def test_categories(self, client):
        body = client.get("/meta/categories").json()

        assert body["categories"] == [
            "Software Development",
            "Networking & Security",
            "Hardware & Gadgets",
            "Cloud Computing",
            "Tech News & Trends",
        ]

    def test_tags(self, client):
        tags = client.get("/meta/tags").json()["tags"]

        assert len(tags) == 10
        assert "UI/UX DESIGN" in tags

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
