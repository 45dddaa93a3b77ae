"""End-to-end checks of the console pages against a scripted backend."""

import json
import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mailconsole import create_app
from mailconsole.core.config import ConsoleSettings


class FakeBackend:
    """Just enough of the mail forwarding API to drive the console."""

    def __init__(self, password="admin123", token="tok-1"):
        self.password = password
        self.token = token
        self.domains = [{"id": 1, "name": "example.com", "created_at": "2024-05-01T09:00:00Z"}]
        self.accounts = []
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        if path == "/login":
            body = json.loads(request.content or b"{}")
            if body.get("password") != self.password:
                return httpx.Response(401, json={"error": "Invalid password"})
            return httpx.Response(200, json={"token": self.token})

        if request.headers.get("Authorization") != f"Bearer {self.token}":
            return httpx.Response(401, json={"error": "Unauthorized"})

        if path == "/domains" and request.method == "GET":
            return httpx.Response(200, json=self.domains)
        if path == "/domains" and request.method == "POST":
            return httpx.Response(500, json={"error": "domain exists"})
        if path == "/accounts" and request.method == "GET":
            return httpx.Response(200, json=self.accounts)
        if path == "/accounts" and request.method == "POST":
            account = {"id": len(self.accounts) + 1, "hit_count": 0, **json.loads(request.content)}
            self.accounts.append(account)
            return httpx.Response(200, json=account)
        if path == "/logs":
            return httpx.Response(
                200,
                json={
                    "data": [{"id": 7, "from": "a@x.org", "to": "b@example.com", "subject": "Hi", "status": "success"}],
                    "total": 41,
                    "page": int(request.url.params.get("page", 1)),
                },
            )
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture()
def backend():
    return FakeBackend()


@pytest.fixture()
def app(tmp_path, backend):
    settings = ConsoleSettings(
        DATA_DIR=tmp_path,
        API_BASE_URL="http://backend.test/api",
        DEFAULT_LOCALE="en",
    )
    return create_app(settings, transport=httpx.MockTransport(backend))


@pytest.fixture()
def client(app):
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.mark.parametrize("path", ["/", "/domains", "/accounts", "/logs"])
def test_protected_pages_redirect_to_login(client, backend, path):
    response = client.get(path)
    assert response.status_code == 302
    assert response.headers["location"] == "/login"
    # The guard decides locally; the backend is never asked.
    assert backend.requests == []


def test_login_page_is_public(client):
    response = client.get("/login")
    assert response.status_code == 200
    assert "Mail Generator Login" in response.text
    assert response.headers["Cache-Control"] == "no-store"


def test_login_then_domains(client, app):
    response = client.post("/login", data={"password": "admin123"})
    assert response.status_code == 303
    assert app.state.console.session.token == "tok-1"

    response = client.get("/")
    assert response.status_code == 302
    assert response.headers["location"] == "/domains"

    response = client.get("/domains")
    assert response.status_code == 200
    assert "example.com" in response.text


def test_wrong_password_shows_backend_error(client, app):
    response = client.post("/login", data={"password": "nope"}, follow_redirects=True)
    assert response.status_code == 200
    assert "Invalid password" in response.text
    assert app.state.console.session.token is None


def test_expired_token_is_evicted_and_redirected(client, app):
    app.state.console.session.sign_in("expired-token")

    response = client.get("/domains")
    assert response.status_code == 302
    assert response.headers["location"] == "/login"
    assert app.state.console.session.token is None

    login = client.get("/login")
    assert "Unauthorized" in login.text


def test_backend_error_is_notified_once(client, app):
    app.state.console.session.sign_in("tok-1")

    response = client.post("/domains", data={"name": "example.com"}, follow_redirects=True)
    assert response.status_code == 200
    assert "domain exists" in response.text
    assert app.state.console.session.token == "tok-1"

    again = client.get("/domains")
    assert "domain exists" not in again.text


def test_blank_domain_name_is_rejected_locally(client, app, backend):
    app.state.console.session.sign_in("tok-1")
    response = client.post("/domains", data={"name": "  "}, follow_redirects=True)
    assert "Required" in response.text
    assert all(r.method == "GET" for r in backend.requests)


def test_create_account(client, app, backend):
    app.state.console.session.sign_in("tok-1")
    response = client.post(
        "/accounts",
        data={"pattern": "^.*@example\\.com$", "forward_to": "me@gmail.com", "description": "catch-all"},
        follow_redirects=True,
    )
    assert response.status_code == 200
    assert "Account rule added" in response.text
    assert backend.accounts[0]["forward_to"] == "me@gmail.com"


def test_logs_are_paginated(client, app, backend):
    app.state.console.session.sign_in("tok-1")
    response = client.get("/logs?page=2")
    assert response.status_code == 200
    assert "a@x.org" in response.text
    assert "2 / 3" in response.text
    sent = backend.requests[-1]
    assert sent.url.params["page"] == "2"
    assert sent.url.params["pageSize"] == "20"


def test_logout_clears_session(client, app):
    app.state.console.session.sign_in("tok-1")
    response = client.get("/logout")
    assert response.status_code == 302
    assert response.headers["location"] == "/login"
    assert app.state.console.session.token is None
    assert client.get("/domains").headers["location"] == "/login"


def test_switch_locale(client, app):
    response = client.post("/locale", data={"locale": "zh", "next": "/login"})
    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert "邮件转发系统登录" in client.get("/login").text


def test_switch_locale_rejects_unknown_and_offsite_targets(client):
    assert client.post("/locale", data={"locale": "fr"}).status_code == 400
    response = client.post("/locale", data={"locale": "en", "next": "//evil.example"})
    assert response.headers["location"] == "/"


def test_backend_down_renders_error_page(tmp_path):
    def refused(request):
        raise httpx.ConnectError("connection refused", request=request)

    settings = ConsoleSettings(DATA_DIR=tmp_path, API_BASE_URL="http://backend.test/api", DEFAULT_LOCALE="en")
    app = create_app(settings, transport=httpx.MockTransport(refused))
    app.state.console.session.sign_in("tok-1")
    with TestClient(app, follow_redirects=False) as client:
        response = client.get("/accounts")
    assert response.status_code == 502
    assert "Request Failed" in response.text
    assert app.state.console.session.token == "tok-1"
