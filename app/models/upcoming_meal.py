"""ORM models for upcoming (candidate) meals and their likes."""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from app.models.base import Base

STATUS_UPCOMING = "upcoming"


class UpcomingMeal(Base):
    """
    Meal proposal waiting for likes before it is published to the catalog.

    likes mirrors the number of UpcomingMealLike rows; both change together.
    """

    __tablename__ = "upcoming_meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    category = Column(String(64), nullable=False)
    cuisine = Column(String(64), nullable=False)
    image = Column(String(2048), nullable=False)
    ingredients = Column(JSON, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    prep_time = Column(String(64), nullable=False)
    distributor_name = Column(String(255), nullable=False)
    distributor_email = Column(String(320), nullable=False)
    status = Column(String(32), nullable=False, default=STATUS_UPCOMING)
    likes = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0)
    reviews_count = Column(Integer, nullable=False, default=0)
    posted_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    votes = relationship(
        "UpcomingMealLike",
        back_populates="upcoming_meal",
        cascade="all, delete-orphan",
        order_by="UpcomingMealLike.id",
    )

    @property
    def liked_by(self) -> list[str]:
        return [vote.email for vote in self.votes]


class UpcomingMealLike(Base):
    """One like on an upcoming meal. (upcoming_meal_id, email) is unique."""

    __tablename__ = "upcoming_meal_likes"
    __table_args__ = (
        UniqueConstraint("upcoming_meal_id", "email", name="uq_upcoming_meal_likes_meal_email"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    upcoming_meal_id = Column(
        Integer,
        ForeignKey("upcoming_meals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    email = Column(String(320), nullable=False)
    liked_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    upcoming_meal = relationship("UpcomingMeal", back_populates="votes")
