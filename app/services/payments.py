"""Payments: Stripe payment intents and the membership payment history."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx
from sqlalchemy.orm import Session

from app.core.errors import PaymentNotConfiguredError, PaymentProviderError
from app.models import Payment, User
from app.schemas.payment import PaymentCreate

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def _is_stripe_configured(settings: "Settings") -> bool:
    if settings.STRIPE_SECRET_KEY is None:
        return False
    return bool(settings.STRIPE_SECRET_KEY.get_secret_value().strip())


async def create_payment_intent(amount_in_cents: int, settings: "Settings") -> str:
    """
    Create a card PaymentIntent on Stripe and return its client secret.

    Raises PaymentNotConfiguredError when STRIPE_SECRET_KEY is unset and
    PaymentProviderError when Stripe is unreachable or rejects the request.
    """
    if not _is_stripe_configured(settings):
        raise PaymentNotConfiguredError("Payments are not configured (STRIPE_SECRET_KEY is not set).")

    url = f"{settings.STRIPE_API_BASE_URL}/v1/payment_intents"
    form = {
        "amount": str(amount_in_cents),
        "currency": settings.STRIPE_CURRENCY,
        "payment_method_types[]": "card",
    }
    secret = settings.STRIPE_SECRET_KEY.get_secret_value()
    timeout = httpx.Timeout(settings.STRIPE_REQUEST_TIMEOUT_SEC)

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(
                url,
                data=form,
                headers={"Authorization": f"Bearer {secret}"},
            )
    except httpx.TimeoutException as e:
        logger.warning("Stripe payment intent timed out", extra={"amount_in_cents": amount_in_cents})
        raise PaymentProviderError("Payment provider timed out.", cause=e) from e
    except httpx.HTTPError as e:
        logger.warning("Stripe payment intent failed", extra={"amount_in_cents": amount_in_cents})
        raise PaymentProviderError("Payment provider is unreachable.", cause=e) from e

    if response.status_code >= 400:
        try:
            detail = response.json().get("error", {}).get("message") or ""
        except ValueError:
            detail = ""
        logger.warning(
            "Stripe rejected payment intent",
            extra={"status_code": response.status_code, "amount_in_cents": amount_in_cents},
        )
        message = f"Payment provider returned status {response.status_code}."
        if detail:
            message = f"{message} {detail[:200]}"
        raise PaymentProviderError(message)

    try:
        client_secret = response.json()["client_secret"]
    except (ValueError, KeyError, TypeError) as e:
        raise PaymentProviderError("Payment provider response is missing client_secret.", cause=e) from e
    logger.info("Stripe payment intent created", extra={"amount_in_cents": amount_in_cents})
    return client_secret


def record_payment(session: Session, body: PaymentCreate) -> Payment:
    """Store the payment and set the payer's membership badge in one transaction."""
    user = session.query(User).filter(User.email == body.email).first()
    if user is not None:
        user.badge = body.badge
    else:
        logger.warning("Payment recorded for unregistered email")
    payment = Payment(
        name=body.name,
        email=body.email,
        amount=body.amount,
        payment_method=body.payment_method,
        transaction_id=body.transaction_id,
        paid_for=body.badge,
        paid_at=datetime.now(UTC),
    )
    session.add(payment)
    session.commit()
    session.refresh(payment)
    logger.info("Payment recorded", extra={"payment_id": payment.id, "paid_for": body.badge})
    return payment


def list_payments(
    session: Session, email: str, offset: int, limit: int
) -> tuple[list[Payment], int]:
    """Payment history for email, newest first, and the total."""
    query = session.query(Payment).filter(Payment.email == email)
    total = query.count()
    payments = query.order_by(Payment.paid_at.desc(), Payment.id.desc()).offset(offset).limit(limit).all()
    return payments, total
