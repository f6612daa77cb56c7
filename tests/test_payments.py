"""Tests for Stripe payment intents, payment recording and payment history."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from app.core.config import Settings
from app.core.errors import PaymentNotConfiguredError, PaymentProviderError
from app.models import Payment, User
from app.services.payments import create_payment_intent
from tests.support import ApiTestCase


def stripe_settings(**overrides) -> Settings:
    values = {"STRIPE_SECRET_KEY": "sk_test_123", "STRIPE_API_BASE_URL": "https://stripe.test/"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def mock_async_client(mock_client_cls: MagicMock, post: AsyncMock) -> MagicMock:
    client = MagicMock()
    client.post = post
    mock_client_cls.return_value.__aenter__.return_value = client
    return client


class TestCreatePaymentIntent(unittest.TestCase):
    def test_unconfigured_raises(self) -> None:
        for key in (None, "   "):
            with self.subTest(key=key):
                with self.assertRaises(PaymentNotConfiguredError) as ctx:
                    asyncio.run(create_payment_intent(500, stripe_settings(STRIPE_SECRET_KEY=key)))
                self.assertEqual(ctx.exception.status_code, 503)

    @patch("app.services.payments.httpx.AsyncClient")
    def test_returns_client_secret(self, mock_client_cls: MagicMock) -> None:
        response = MagicMock(status_code=200)
        response.json.return_value = {"id": "pi_1", "client_secret": "pi_1_secret_abc"}
        client = mock_async_client(mock_client_cls, AsyncMock(return_value=response))

        secret = asyncio.run(create_payment_intent(1999, stripe_settings()))

        self.assertEqual(secret, "pi_1_secret_abc")
        args, kwargs = client.post.call_args
        self.assertEqual(args[0], "https://stripe.test/v1/payment_intents")
        self.assertEqual(kwargs["data"]["amount"], "1999")
        self.assertEqual(kwargs["data"]["currency"], "usd")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer sk_test_123")

    @patch("app.services.payments.httpx.AsyncClient")
    def test_provider_error_status(self, mock_client_cls: MagicMock) -> None:
        response = MagicMock(status_code=402)
        response.json.return_value = {"error": {"message": "Your card was declined."}}
        mock_async_client(mock_client_cls, AsyncMock(return_value=response))

        with self.assertRaises(PaymentProviderError) as ctx:
            asyncio.run(create_payment_intent(1999, stripe_settings()))
        self.assertIn("402", ctx.exception.message)
        self.assertIn("declined", ctx.exception.message)
        self.assertEqual(ctx.exception.status_code, 502)

    @patch("app.services.payments.httpx.AsyncClient")
    def test_timeout(self, mock_client_cls: MagicMock) -> None:
        mock_async_client(mock_client_cls, AsyncMock(side_effect=httpx.ConnectTimeout("slow")))
        with self.assertRaises(PaymentProviderError) as ctx:
            asyncio.run(create_payment_intent(1999, stripe_settings()))
        self.assertEqual(ctx.exception.message, "Payment provider timed out.")

    @patch("app.services.payments.httpx.AsyncClient")
    def test_missing_client_secret(self, mock_client_cls: MagicMock) -> None:
        response = MagicMock(status_code=200)
        response.json.return_value = {"id": "pi_1"}
        mock_async_client(mock_client_cls, AsyncMock(return_value=response))
        with self.assertRaises(PaymentProviderError):
            asyncio.run(create_payment_intent(1999, stripe_settings()))


class TestPaymentsApi(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.add_user("amy@hall.test")
        self.login_as("amy@hall.test")

    def _pay(self, amount: float = 29.99, badge: str = "Gold"):
        return self.client.post(
            "/payments",
            json={
                "name": "Amy",
                "email": "amy@hall.test",
                "amount": amount,
                "paymentMethod": "card",
                "transactionId": "pi_1",
                "badge": badge,
            },
        )

    def test_record_sets_badge(self) -> None:
        resp = self._pay()
        self.assertEqual(resp.status_code, 200)
        self.assertIsInstance(resp.json()["insertedId"], int)
        with self.SessionTesting() as db:
            user = db.query(User).filter(User.email == "amy@hall.test").one()
            self.assertEqual(user.badge, "Gold")
            self.assertEqual(db.query(Payment).one().paid_for, "Gold")

    def test_history(self) -> None:
        self._pay(amount=9.99, badge="Silver")
        self._pay(amount=29.99, badge="Gold")
        body = self.client.get("/payments/user", params={"email": "amy@hall.test"}).json()
        self.assertEqual(body["total"], 2)
        self.assertEqual({p["paid_for"] for p in body["payments"]}, {"Silver", "Gold"})
        self.assertEqual(self.client.get("/payments/user").status_code, 400)

    def test_intent_without_stripe_key_is_503(self) -> None:
        with patch(
            "app.api.routes.payments.get_settings",
            return_value=stripe_settings(STRIPE_SECRET_KEY=None),
        ):
            resp = self.client.post("/create-payment-intent", json={"amountInCents": 1999})
        self.assertEqual(resp.status_code, 503)
        self.assertFalse(resp.json()["success"])

    def test_intent_rejects_tiny_amount(self) -> None:
        resp = self.client.post("/create-payment-intent", json={"amountInCents": 10})
        self.assertEqual(resp.status_code, 422)

    def test_intent_returns_client_secret(self) -> None:
        with (
            patch("app.api.routes.payments.get_settings", return_value=stripe_settings()),
            patch(
                "app.api.routes.payments.create_payment_intent",
                new=AsyncMock(return_value="pi_1_secret_abc"),
            ),
        ):
            resp = self.client.post("/create-payment-intent", json={"amountInCents": 1999})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"clientSecret": "pi_1_secret_abc"})


if __name__ == "__main__":
    unittest.main()
