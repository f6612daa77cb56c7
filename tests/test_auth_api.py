"""API tests for the session cookie, the token check and the role gate."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import jwt

from app.api.routes.auth import get_token_claims
from app.core.config import settings
from app.core.security import create_session_token, decode_session_token
from app.models import User
from tests.support import ApiTestCase


class TestIssueAndClearSession(ApiTestCase):
    """POST /jwt sets the HTTP-only cookie; POST /logout clears it."""

    def test_jwt_sets_http_only_cookie_for_one_day(self) -> None:
        resp = self.client.post("/jwt", json={"email": "amy@hall.test"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})
        cookie = resp.headers["set-cookie"].lower()
        self.assertTrue(cookie.startswith(f"{settings.AUTH_COOKIE_NAME}="))
        self.assertIn("httponly", cookie)
        self.assertIn("samesite=strict", cookie)
        self.assertIn(f"max-age={settings.JWT_EXPIRE_MINUTES * 60}", cookie)
        self.assertNotIn("; secure", cookie)

    def test_jwt_role_claim_comes_from_user_store(self) -> None:
        self.add_user("boss@hall.test", role="admin")
        self.client.post("/jwt", json={"email": "boss@hall.test", "role": "user"})
        token = self.client.cookies.get(settings.AUTH_COOKIE_NAME)
        payload = decode_session_token(token)
        self.assertEqual(payload["email"], "boss@hall.test")
        self.assertEqual(payload["role"], "admin")

    def test_cookie_from_jwt_authenticates_later_requests(self) -> None:
        self.add_user("amy@hall.test")
        self.client.post("/jwt", json={"email": "amy@hall.test"})
        resp = self.client.get("/users", params={"email": "amy@hall.test"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["email"], "amy@hall.test")

    def test_logout_expires_cookie(self) -> None:
        resp = self.client.post("/logout")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})
        cookie = resp.headers["set-cookie"].lower()
        self.assertIn("max-age=0", cookie)
        self.assertIn("httponly", cookie)


class TestAccessGuard(ApiTestCase):
    """Missing cookie -> 401; invalid or expired token -> 403; valid -> claims reach the handler."""

    def setUp(self) -> None:
        super().setUp()
        self.add_user("amy@hall.test")

    def test_no_cookie_is_401(self) -> None:
        resp = self.client.get("/users", params={"email": "amy@hall.test"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Unauthorized Access: No token"})

    def test_malformed_token_is_403(self) -> None:
        self.client.cookies.set(settings.AUTH_COOKIE_NAME, "garbage.token.value")
        resp = self.client.get("/users", params={"email": "amy@hall.test"})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"message": "Forbidden: Invalid token"})

    def test_expired_token_is_403_with_same_message(self) -> None:
        expired = jwt.encode(
            {"email": "amy@hall.test", "role": "user", "exp": datetime.now(UTC) - timedelta(seconds=5)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        self.client.cookies.set(settings.AUTH_COOKIE_NAME, expired)
        resp = self.client.get("/users", params={"email": "amy@hall.test"})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"message": "Forbidden: Invalid token"})

    def test_valid_token_passes(self) -> None:
        self.login_as("amy@hall.test")
        resp = self.client.get("/users", params={"email": "amy@hall.test"})
        self.assertEqual(resp.status_code, 200)

    def test_verifier_fault_is_500_not_pass_through(self) -> None:
        self.login_as("amy@hall.test")
        with patch("app.api.routes.auth.decode_session_token", side_effect=RuntimeError("boom")):
            resp = self.client.get("/users", params={"email": "amy@hall.test"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Internal Server Error"})

    def test_dependency_returns_decoded_claims(self) -> None:
        token = create_session_token({"email": "amy@hall.test", "role": "user"})
        claims = get_token_claims(token)
        self.assertEqual(claims.email, "amy@hall.test")
        self.assertEqual(claims.role, "user")


class TestRoleGate(ApiTestCase):
    """The gate re-reads the stored role on every request."""

    def setUp(self) -> None:
        super().setUp()
        self.admin_id = self.add_user("boss@hall.test", role="admin")
        self.user_id = self.add_user("amy@hall.test", role="user")

    def test_admin_is_admitted(self) -> None:
        self.login_as("boss@hall.test", role="admin")
        resp = self.client.get("/users/search", params={"keyword": "amy"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([u["email"] for u in resp.json()], ["amy@hall.test"])

    def test_wrong_role_is_403(self) -> None:
        self.login_as("amy@hall.test")
        resp = self.client.get("/users/search", params={"keyword": "amy"})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"message": "Access Denied: Role restricted"})

    def test_role_claim_in_token_is_not_trusted(self) -> None:
        self.login_as("amy@hall.test", role="admin")
        resp = self.client.get("/users/search", params={"keyword": "amy"})
        self.assertEqual(resp.status_code, 403)

    def test_unknown_user_is_404(self) -> None:
        self.login_as("ghost@hall.test", role="admin")
        resp = self.client.get("/users/search", params={"keyword": "amy"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "User not found"})

    def test_token_without_email_is_401(self) -> None:
        token = create_session_token({"role": "admin"})
        self.client.cookies.set(settings.AUTH_COOKIE_NAME, token)
        resp = self.client.get("/users/search", params={"keyword": "amy"})
        self.assertEqual(resp.status_code, 401)

    def test_role_change_applies_to_existing_token(self) -> None:
        amy_token = create_session_token({"email": "amy@hall.test", "role": "user"})
        self.client.cookies.set(settings.AUTH_COOKIE_NAME, amy_token)
        self.assertEqual(
            self.client.get("/users/search", params={"keyword": "a"}).status_code, 403
        )

        self.login_as("boss@hall.test", role="admin")
        resp = self.client.patch(f"/users/update-role/{self.user_id}", json={"role": "admin"})
        self.assertEqual(resp.status_code, 200)

        self.client.cookies.set(settings.AUTH_COOKIE_NAME, amy_token)
        self.assertEqual(
            self.client.get("/users/search", params={"keyword": "a"}).status_code, 200
        )

    def test_role_downgrade_applies_to_existing_token(self) -> None:
        boss_token = self.login_as("boss@hall.test", role="admin")
        with self.SessionTesting() as db:
            db.get(User, self.admin_id).role = "user"
            db.commit()
        self.client.cookies.set(settings.AUTH_COOKIE_NAME, boss_token)
        resp = self.client.get("/users/search", params={"keyword": "a"})
        self.assertEqual(resp.status_code, 403)


if __name__ == "__main__":
    unittest.main()
