"""ORM model for meal requests placed by users."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from app.models.base import Base

REQUEST_STATUS_PENDING = "pending"
REQUEST_STATUS_SERVING = "on serving"


class MealRequest(Base):
    """A user's request for a catalog meal. One request per (meal, user)."""

    __tablename__ = "meal_requests"
    __table_args__ = (
        UniqueConstraint("meal_id", "user_email", name="uq_meal_requests_meal_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    meal_id = Column(
        Integer,
        ForeignKey("meals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    meal_title = Column(String(255), nullable=False, default="")
    user_email = Column(String(320), nullable=False, index=True)
    user_name = Column(String(255), nullable=False, default="")
    status = Column(String(32), nullable=False, default=REQUEST_STATUS_PENDING, index=True)
    requested_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    meal = relationship("Meal", back_populates="requests")
