"""HTTP tests for login, logout and the admin session gate."""

import pytest

from app.models import CaseStudy, ContactMessage, PortfolioItem


def _login(client, email, password):
    return client.post("/api/login", json={"email": email, "password": password})


class TestLogin:
    def test_default_admin_can_log_in(self, client, test_settings):
        response = _login(client, test_settings.ADMIN_EMAIL, test_settings.ADMIN_PASSWORD)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"]["id"] == "admin"
        assert body["user"]["email"] == test_settings.ADMIN_EMAIL
        assert body["user"]["firstName"] == "Admin"
        assert "hashedPassword" not in body["user"]
        assert "password" not in body["user"]

    def test_session_cookie_attributes(self, client, test_settings):
        response = _login(client, test_settings.ADMIN_EMAIL, test_settings.ADMIN_PASSWORD)
        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"{test_settings.SESSION_COOKIE_NAME}=")
        assert "HttpOnly" in cookie
        assert f"Max-Age={test_settings.SESSION_TTL_DAYS * 24 * 60 * 60}" in cookie
        assert "samesite=lax" in cookie.lower()

    def test_wrong_password_sets_no_cookie(self, client, test_settings):
        response = _login(client, test_settings.ADMIN_EMAIL, "wrong")

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"
        assert "set-cookie" not in response.headers
        assert client.get("/api/auth/user").status_code == 401

    def test_unknown_email(self, client):
        assert _login(client, "nobody@example.com", "whatever").status_code == 401

    @pytest.mark.parametrize("payload", [
        {},
        {"email": "admin@portfolio.com"},
        {"email": "not-an-email", "password": "x"},
    ])
    def test_malformed_body(self, client, payload):
        response = client.post("/api/login", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid data"
        assert response.json()["errors"]


class TestSession:
    def test_current_user(self, admin_client, test_settings):
        response = admin_client.get("/api/auth/user")
        assert response.status_code == 200
        assert response.json()["email"] == test_settings.ADMIN_EMAIL

    def test_logout_closes_session(self, admin_client):
        response = admin_client.post("/api/logout")
        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}
        assert admin_client.get("/api/admin/messages").status_code == 401

    def test_stolen_cookie_stops_working_after_logout(self, admin_client, test_settings):
        token = admin_client.cookies.get(test_settings.SESSION_COOKIE_NAME)
        admin_client.post("/api/logout")

        admin_client.cookies.set(test_settings.SESSION_COOKIE_NAME, token)
        assert admin_client.get("/api/admin/messages").status_code == 401

    def test_logout_without_session(self, client):
        response = client.post("/api/logout")
        assert response.status_code == 200
        assert client.post("/api/logout").status_code == 200

    def test_forged_cookie_is_rejected(self, client, test_settings):
        client.cookies.set(test_settings.SESSION_COOKIE_NAME, "forged-session-id")
        assert client.get("/api/admin/messages").status_code == 401


ADMIN_ROUTES = [
    ("get", "/api/admin/portfolio"),
    ("get", "/api/admin/portfolio/1"),
    ("post", "/api/admin/portfolio"),
    ("put", "/api/admin/portfolio/1"),
    ("delete", "/api/admin/portfolio/1"),
    ("get", "/api/admin/case-studies"),
    ("get", "/api/admin/case-studies/1"),
    ("post", "/api/admin/case-studies"),
    ("put", "/api/admin/case-studies/1"),
    ("delete", "/api/admin/case-studies/1"),
    ("get", "/api/admin/messages"),
    ("put", "/api/admin/messages/1/read"),
    ("delete", "/api/admin/messages/1"),
    ("get", "/api/admin/settings"),
    ("put", "/api/admin/settings"),
    ("get", "/api/auth/user"),
]


class TestAdminGate:
    @pytest.mark.parametrize("method, path", ADMIN_ROUTES)
    def test_requires_session(self, client, method, path):
        response = client.request(method.upper(), path)
        assert response.status_code == 401
        assert response.json() == {"message": "Authentication required"}

    def test_rejected_writes_change_nothing(self, client, row_count):
        created = client.post("/api/admin/portfolio", data={"title": "Site", "description": "d"})
        created_study = client.post("/api/admin/case-studies",
                                    data={"title": "T", "excerpt": "e", "content": "c"})
        setting = client.put("/api/admin/settings", json={"key": "name", "value": "Ada"})

        assert {created.status_code, created_study.status_code, setting.status_code} == {401}
        assert row_count(PortfolioItem) == 0
        assert row_count(CaseStudy) == 0
        assert row_count(ContactMessage) == 0
