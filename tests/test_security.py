"""Unit tests for session tokens, cookie flags and settings validation."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import jwt
from pydantic import ValidationError

from app.core.config import Settings, settings
from app.core.security import (
    create_session_token,
    decode_session_token,
    session_cookie_params,
)


class TestSessionToken(unittest.TestCase):
    def test_round_trip_keeps_claims_and_adds_expiry(self) -> None:
        token = create_session_token({"email": "a@hall.test", "role": "user"})
        payload = decode_session_token(token)
        self.assertEqual(payload["email"], "a@hall.test")
        self.assertEqual(payload["role"], "user")
        self.assertIn("iat", payload)
        self.assertEqual(
            payload["exp"] - payload["iat"], settings.JWT_EXPIRE_MINUTES * 60
        )

    def test_default_lifetime_is_one_day(self) -> None:
        self.assertEqual(Settings(_env_file=None).JWT_EXPIRE_MINUTES, 24 * 60)

    def test_expired_token_is_rejected(self) -> None:
        token = jwt.encode(
            {"email": "a@hall.test", "exp": datetime.now(UTC) - timedelta(minutes=1)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_session_token(token)

    def test_token_signed_with_other_secret_is_rejected(self) -> None:
        token = jwt.encode(
            {"email": "a@hall.test", "exp": datetime.now(UTC) + timedelta(hours=1)},
            "some-other-secret",
            algorithm="HS256",
        )
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_session_token(token)

    def test_garbage_is_rejected(self) -> None:
        with self.assertRaises(jwt.PyJWTError):
            decode_session_token("not-a-jwt")


class TestSessionCookieParams(unittest.TestCase):
    def test_dev_cookie_is_strict_and_not_secure(self) -> None:
        cfg = MagicMock()
        cfg.is_production = False
        self.assertEqual(
            session_cookie_params(cfg),
            {"httponly": True, "secure": False, "samesite": "strict"},
        )

    def test_prod_cookie_is_cross_site_and_secure(self) -> None:
        cfg = MagicMock()
        cfg.is_production = True
        self.assertEqual(
            session_cookie_params(cfg),
            {"httponly": True, "secure": True, "samesite": "none"},
        )


class TestSettingsValidation(unittest.TestCase):
    def test_prod_rejects_default_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, APP_ENV="prod", JWT_SECRET="change-me-in-production")

    def test_prod_accepts_custom_secret(self) -> None:
        cfg = Settings(_env_file=None, APP_ENV="prod", JWT_SECRET="a-real-secret")
        self.assertTrue(cfg.is_production)

    def test_rejects_non_postgres_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://localhost/hallpoint")

    def test_rejects_zero_threshold(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, PUBLISH_LIKE_THRESHOLD=0)


if __name__ == "__main__":
    unittest.main()
