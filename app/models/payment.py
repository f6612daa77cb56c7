"""ORM model for recorded membership payments."""

from sqlalchemy import Column, DateTime, Float, Integer, String, func

from app.models.base import Base


class Payment(Base):
    """Payment history entry; paid_for is the membership badge that was bought."""

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, default="")
    email = Column(String(320), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    payment_method = Column(String(64), nullable=False, default="")
    transaction_id = Column(String(255), nullable=False, default="")
    paid_for = Column(String(64), nullable=True)
    paid_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
