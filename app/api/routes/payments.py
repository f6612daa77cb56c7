"""Payment endpoints: Stripe payment intent, recording a payment, payment history."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.routes.auth import get_token_claims, require_user
from app.core.config import get_settings, settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser, TokenClaims
from app.schemas.payment import (
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentOut,
    PaymentRecordResponse,
    PaymentsPage,
)
from app.services.pagination import page_offset
from app.services.payments import create_payment_intent, list_payments, record_payment

router = APIRouter()


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def post_payment_intent(
    body: PaymentIntentRequest,
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> PaymentIntentResponse:
    """
    Create a Stripe card payment intent and return its client secret for the browser checkout.
    Requires STRIPE_SECRET_KEY.
    """
    client_secret = await create_payment_intent(body.amount_in_cents, get_settings())
    return PaymentIntentResponse(client_secret=client_secret)


@router.post("/payments", response_model=PaymentRecordResponse)
def post_payment(
    body: PaymentCreate,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> PaymentRecordResponse:
    """Record a confirmed payment and give the payer the purchased membership badge."""
    payment = record_payment(db, body)
    return PaymentRecordResponse(
        message="Payment recorded and user membership badge changed",
        inserted_id=payment.id,
    )


@router.get("/payments/user", response_model=PaymentsPage)
def get_user_payments(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_user)],
    email: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> PaymentsPage:
    if not email:
        raise HTTPException(status_code=400, detail="Email is required.")
    payments, total = list_payments(db, email, page_offset(page, limit), limit)
    return PaymentsPage(payments=[PaymentOut.model_validate(p) for p in payments], total=total)
