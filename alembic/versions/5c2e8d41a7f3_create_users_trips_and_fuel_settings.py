"""create users, trips and fuel settings history

Revision ID: 5c2e8d41a7f3
Revises:
Create Date: 2026-10-17 09:12:44.180512

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c2e8d41a7f3"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "trips",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("trip_time", sa.String(length=20), nullable=False, server_default=""),
        sa.Column("trip_id", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("app_name", sa.String(length=20), nullable=False, server_default="Other"),
        sa.Column("trip_type", sa.String(length=20), nullable=False, server_default="Passenger"),
        sa.Column("distance_km", sa.Float(), nullable=False, server_default="0"),
        sa.Column("amount_received", sa.Float(), nullable=False, server_default="0"),
        sa.Column("fees", sa.Float(), nullable=False, server_default="0"),
        sa.Column("fuel_cost", sa.Float(), nullable=False, server_default="0"),
        sa.Column("net_profit", sa.Float(), nullable=False, server_default="0"),
        sa.Column("notes", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_trips_id"), "trips", ["id"], unique=False)
    op.create_index(op.f("ix_trips_user_id"), "trips", ["user_id"], unique=False)
    op.create_index(op.f("ix_trips_date"), "trips", ["date"], unique=False)
    op.create_index(op.f("ix_trips_app_name"), "trips", ["app_name"], unique=False)

    op.create_table(
        "fuel_settings_history",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("fuel_efficiency_kmpl", sa.Float(), nullable=False),
        sa.Column("fuel_price_per_liter", sa.Float(), nullable=False),
        sa.Column("effective_from", sa.Date(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_fuel_settings_history_id"), "fuel_settings_history", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_fuel_settings_history_user_id"),
        "fuel_settings_history",
        ["user_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_fuel_settings_history_effective_from"),
        "fuel_settings_history",
        ["effective_from"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        op.f("ix_fuel_settings_history_effective_from"), table_name="fuel_settings_history"
    )
    op.drop_index(op.f("ix_fuel_settings_history_user_id"), table_name="fuel_settings_history")
    op.drop_index(op.f("ix_fuel_settings_history_id"), table_name="fuel_settings_history")
    op.drop_table("fuel_settings_history")

    op.drop_index(op.f("ix_trips_app_name"), table_name="trips")
    op.drop_index(op.f("ix_trips_date"), table_name="trips")
    op.drop_index(op.f("ix_trips_user_id"), table_name="trips")
    op.drop_index(op.f("ix_trips_id"), table_name="trips")
    op.drop_table("trips")

    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
