"""Pydantic schemas for payment intents and payment history."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PaymentIntentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Stripe works in the smallest currency unit; 50 cents is its minimum charge
    amount_in_cents: int = Field(..., alias="amountInCents", ge=50, le=99_999_999)


class PaymentIntentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(..., alias="clientSecret")


class PaymentCreate(BaseModel):
    """A confirmed payment; badge is the membership tier it buys."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(default="", max_length=255)
    email: str = Field(..., min_length=3, max_length=320)
    amount: float = Field(..., ge=0)
    payment_method: str = Field(default="", alias="paymentMethod", max_length=64)
    transaction_id: str = Field(default="", alias="transactionId", max_length=255)
    badge: str | None = Field(default=None, max_length=64)


class PaymentRecordResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    inserted_id: int = Field(..., alias="insertedId")


class PaymentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    email: str
    amount: float
    payment_method: str = Field(..., alias="paymentMethod")
    transaction_id: str = Field(..., alias="transactionId")
    paid_for: str | None = None
    paid_at: datetime | None = None


class PaymentsPage(BaseModel):
    payments: list[PaymentOut]
    total: int
