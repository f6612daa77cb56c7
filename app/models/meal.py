"""ORM model for published (catalog) meals."""

from sqlalchemy import JSON, Column, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import relationship

from app.models.base import Base

# Descriptive attributes shared by published and upcoming meals.
MEAL_DESCRIPTIVE_FIELDS = (
    "title",
    "category",
    "cuisine",
    "image",
    "ingredients",
    "description",
    "price",
    "prep_time",
    "distributor_name",
    "distributor_email",
)


class Meal(Base):
    """A meal in the main catalog, available for requests and reviews."""

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    category = Column(String(64), nullable=False, index=True)
    cuisine = Column(String(64), nullable=False, default="")
    image = Column(String(2048), nullable=False, default="")
    ingredients = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False, default=0.0)
    prep_time = Column(String(64), nullable=False, default="")
    distributor_name = Column(String(255), nullable=False, default="")
    distributor_email = Column(String(320), nullable=False, default="", index=True)
    likes = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0)
    reviews_count = Column(Integer, nullable=False, default=0)
    posted_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    reviews = relationship(
        "Review",
        back_populates="meal",
        cascade="all, delete-orphan",
    )
    requests = relationship(
        "MealRequest",
        back_populates="meal",
        cascade="all, delete-orphan",
    )
