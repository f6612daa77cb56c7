"""Initial schema: users, meals, upcoming meals with likes, reviews, meal requests, payments.

Revision ID: 20251017000000
Revises:
Create Date: 2025-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20251017000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("photo", sa.String(length=2048), nullable=True),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column("badge", sa.String(length=64), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "meals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=False),
        sa.Column("cuisine", sa.String(length=64), nullable=False),
        sa.Column("image", sa.String(length=2048), nullable=False),
        sa.Column("ingredients", sa.JSON(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("prep_time", sa.String(length=64), nullable=False),
        sa.Column("distributor_name", sa.String(length=255), nullable=False),
        sa.Column("distributor_email", sa.String(length=320), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("reviews_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "posted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_meals_title"), "meals", ["title"], unique=False)
    op.create_index(op.f("ix_meals_category"), "meals", ["category"], unique=False)
    op.create_index(
        op.f("ix_meals_distributor_email"), "meals", ["distributor_email"], unique=False
    )

    op.create_table(
        "upcoming_meals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=False),
        sa.Column("cuisine", sa.String(length=64), nullable=False),
        sa.Column("image", sa.String(length=2048), nullable=False),
        sa.Column("ingredients", sa.JSON(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("prep_time", sa.String(length=64), nullable=False),
        sa.Column("distributor_name", sa.String(length=255), nullable=False),
        sa.Column("distributor_email", sa.String(length=320), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="upcoming"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("reviews_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "posted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_upcoming_meals_title"), "upcoming_meals", ["title"], unique=False)

    op.create_table(
        "upcoming_meal_likes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("upcoming_meal_id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column(
            "liked_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["upcoming_meal_id"], ["upcoming_meals.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "upcoming_meal_id", "email", name="uq_upcoming_meal_likes_meal_email"
        ),
    )
    op.create_index(
        op.f("ix_upcoming_meal_likes_upcoming_meal_id"),
        "upcoming_meal_likes",
        ["upcoming_meal_id"],
        unique=False,
    )

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meal_id", sa.Integer(), nullable=False),
        sa.Column("meal_title", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("user", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column(
            "posted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["meal_id"], ["meals.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_reviews_meal_id"), "reviews", ["meal_id"], unique=False)
    op.create_index(op.f("ix_reviews_email"), "reviews", ["email"], unique=False)

    op.create_table(
        "meal_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meal_id", sa.Integer(), nullable=False),
        sa.Column("meal_title", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("user_email", sa.String(length=320), nullable=False),
        sa.Column("user_name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="pending"),
        sa.Column(
            "requested_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["meal_id"], ["meals.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("meal_id", "user_email", name="uq_meal_requests_meal_user"),
    )
    op.create_index(op.f("ix_meal_requests_meal_id"), "meal_requests", ["meal_id"], unique=False)
    op.create_index(
        op.f("ix_meal_requests_user_email"), "meal_requests", ["user_email"], unique=False
    )
    op.create_index(op.f("ix_meal_requests_status"), "meal_requests", ["status"], unique=False)

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("payment_method", sa.String(length=64), nullable=False, server_default=""),
        sa.Column("transaction_id", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("paid_for", sa.String(length=64), nullable=True),
        sa.Column(
            "paid_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_payments_email"), "payments", ["email"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_payments_email"), table_name="payments")
    op.drop_table("payments")
    op.drop_index(op.f("ix_meal_requests_status"), table_name="meal_requests")
    op.drop_index(op.f("ix_meal_requests_user_email"), table_name="meal_requests")
    op.drop_index(op.f("ix_meal_requests_meal_id"), table_name="meal_requests")
    op.drop_table("meal_requests")
    op.drop_index(op.f("ix_reviews_email"), table_name="reviews")
    op.drop_index(op.f("ix_reviews_meal_id"), table_name="reviews")
    op.drop_table("reviews")
    op.drop_index(
        op.f("ix_upcoming_meal_likes_upcoming_meal_id"), table_name="upcoming_meal_likes"
    )
    op.drop_table("upcoming_meal_likes")
    op.drop_index(op.f("ix_upcoming_meals_title"), table_name="upcoming_meals")
    op.drop_table("upcoming_meals")
    op.drop_index(op.f("ix_meals_distributor_email"), table_name="meals")
    op.drop_index(op.f("ix_meals_category"), table_name="meals")
    op.drop_index(op.f("ix_meals_title"), table_name="meals")
    op.drop_table("meals")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
