"""Shared fixtures: in-memory SQLite session factory and an API test case wired to it."""

import unittest
from collections.abc import Generator
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.core.database import get_db
from app.core.security import create_session_token
from app.main import app
from app.models import Base, Meal, UpcomingMeal, User


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with every table created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def meal_fields(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "title": "Chicken Biryani",
        "category": "Lunch",
        "cuisine": "Bangladeshi",
        "image": "https://img.example/biryani.jpg",
        "ingredients": ["rice", "chicken", "spices"],
        "description": "Fragrant rice with chicken.",
        "price": 4.5,
        "prep_time": "40 min",
        "distributor_name": "Hall Admin",
        "distributor_email": "admin@hall.test",
    }
    fields.update(overrides)
    return fields


class DatabaseTestCase(unittest.TestCase):
    """Gives each test its own empty database."""

    def setUp(self) -> None:
        self.SessionTesting = make_session_factory()
        self.db: Session = self.SessionTesting()

    def tearDown(self) -> None:
        self.db.close()

    def add_user(self, email: str, role: str = "user", name: str = "") -> int:
        with self.SessionTesting() as db:
            user = User(email=email, name=name or email.split("@")[0], role=role)
            db.add(user)
            db.commit()
            return user.id

    def add_meal(self, **overrides: Any) -> int:
        extra = {k: overrides.pop(k) for k in ("likes", "reviews_count", "rating") if k in overrides}
        with self.SessionTesting() as db:
            meal = Meal(**meal_fields(**overrides), **extra)
            db.add(meal)
            db.commit()
            return meal.id

    def add_candidate(self, **overrides: Any) -> int:
        likes = overrides.pop("likes", 0)
        with self.SessionTesting() as db:
            candidate = UpcomingMeal(**meal_fields(**overrides), status="upcoming", likes=likes)
            db.add(candidate)
            db.commit()
            return candidate.id


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db yields sessions on the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.client.close()
        super().tearDown()

    def login_as(self, email: str, role: str = "user") -> str:
        """Put a freshly signed session token for email into the client's cookie jar."""
        token = create_session_token({"email": email, "role": role})
        self.client.cookies.set(settings.AUTH_COOKIE_NAME, token)
        return token
