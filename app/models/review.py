"""ORM model for meal reviews."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meal_id = Column(
        Integer,
        ForeignKey("meals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    meal_title = Column(String(255), nullable=False, default="")
    user = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, index=True)
    comment = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)
    posted_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    meal = relationship("Meal", back_populates="reviews")
