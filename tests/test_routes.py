"""
HTTP-level tests for the auth routes, using TestClient with the façade
overridden to an in-memory store.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

from auth.dependencies import get_auth_service
from auth.errors import DuplicateEmailError
from auth.service import AuthService

BASE = "/api/v1/auth"


def _register(client, name="Alice", email="a@x.com", password="Secret123!"):
    return client.post(f"{BASE}/register", json={"name": name, "email": email, "password": password})


def _login(client, email="a@x.com", password="Secret123!"):
    return client.post(f"{BASE}/login", json={"email": email, "password": password})


class TestRegisterRoute:
    def test_success_envelope(self, client):
        resp = _register(client)
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "status": 200}

    def test_validation_failure(self, client):
        resp = _register(client, email="nope")
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "status": 400, "message": "Email is not valid"}

    def test_padded_name_is_stripped(self, client, store):
        resp = _register(client, name=" " * 200 + "Alice")
        assert resp.status_code == 200
        (user,) = store.users.values()
        assert user.name == "Alice"

    def test_duplicate_rejected_at_insert(self, app, client, signer):
        store = AsyncMock()
        store.find_by_email.return_value = None
        store.create.side_effect = DuplicateEmailError()
        app.dependency_overrides[get_auth_service] = lambda: AuthService(store, signer, bcrypt_rounds=4)

        resp = _register(client)
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "status": 400, "message": "Email already exists"}

    def test_missing_fields_use_validation_message(self, client):
        resp = client.post(f"{BASE}/register", json={})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Name is required"

    def test_malformed_body(self, client):
        resp = client.post(
            f"{BASE}/register",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["success"] is False


class TestLoginRoute:
    def test_success_sets_http_only_cookie(self, client):
        _register(client)
        resp = _login(client)

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["data"]["user"]["email"] == "a@x.com"
        assert "password" not in body["data"]["user"]

        set_cookie = resp.headers["set-cookie"]
        assert set_cookie.startswith("access_token=")
        assert "httponly" in set_cookie.lower()

    def test_missing_fields(self, client):
        resp = client.post(f"{BASE}/login", json={"email": "a@x.com"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Email and password are required"

    def test_unknown_user(self, client):
        resp = _login(client, email="ghost@x.com")
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "status": 404, "message": "User not found"}

    def test_wrong_password_uses_envelope(self, client):
        _register(client)
        resp = _login(client, password="wrong")
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "status": 401, "message": "Incorrect password"}
        assert "set-cookie" not in resp.headers


class TestVerifyRoute:
    def test_no_cookie(self, client):
        resp = client.get(f"{BASE}/verify")
        assert resp.status_code == 400
        assert resp.json()["message"] == "Empty token!"

    def test_cookie_from_login(self, client):
        _register(client)
        _login(client)
        resp = client.get(f"{BASE}/verify")
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "status": 200, "message": "Token accepted"}

    def test_expired_cookie(self, client, signer):
        issued = datetime.now(timezone.utc) - timedelta(hours=1, minutes=1)
        client.cookies.set("access_token", signer.create_token("a@x.com", now=issued))
        resp = client.get(f"{BASE}/verify")
        assert resp.status_code == 403
        assert resp.json()["message"] == "Invalid or expired token"

    def test_tampered_cookie(self, client):
        client.cookies.set("access_token", "abc.def.ghi")
        assert client.get(f"{BASE}/verify").status_code == 403


class TestLogoutAndMe:
    def test_me_returns_public_account(self, client):
        _register(client)
        _login(client)
        resp = client.get(f"{BASE}/me")
        assert resp.status_code == 200
        user = resp.json()["data"]["user"]
        assert user["name"] == "Alice"
        assert "password" not in user

    def test_me_rejects_token_for_unknown_account(self, client, signer):
        client.cookies.set("access_token", signer.create_token("ghost@x.com"))
        assert client.get(f"{BASE}/me").status_code == 403

    def test_logout_clears_cookie(self, client):
        _register(client)
        _login(client)
        resp = client.post(f"{BASE}/logout")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Logged out"
        assert 'access_token=""' in resp.headers["set-cookie"]
        assert client.get(f"{BASE}/verify").status_code == 400


class TestScenario:
    def test_register_duplicate_login(self, client):
        assert _register(client, "Alice", "a@x.com", "Secret123!").status_code == 200

        dup = _register(client, "Alice2", "a@x.com", "Other456!")
        assert dup.status_code == 400
        assert dup.json()["message"] == "Email already exists"

        ok = _login(client, "a@x.com", "Secret123!")
        assert ok.status_code == 200
        assert "access_token" in ok.cookies

        bad = _login(client, "a@x.com", "wrong")
        assert bad.status_code == 401
        assert bad.json()["message"] == "Incorrect password"


class TestUnexpectedErrors:
    def test_store_outage_is_500_envelope(self, app, client):
        class BrokenService:
            async def register(self, *args):
                raise RuntimeError("database unavailable")

        app.dependency_overrides[get_auth_service] = lambda: BrokenService()
        resp = _register(client)
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "status": 500, "message": "Internal server error"}


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
        assert "X-Process-Time" in resp.headers
