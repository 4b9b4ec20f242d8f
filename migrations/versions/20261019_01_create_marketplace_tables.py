"""create benefits, wallets and owned_benefits tables

Revision ID: 5c0f2a7d9e41
Revises: 
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5c0f2a7d9e41"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "benefits",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=500), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("in_stock", sa.Integer(), nullable=False),
        sa.Column("expiration_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.CheckConstraint("price >= 0", name="ck_benefits_price_non_negative"),
    )
    op.create_index("ix_benefits_name", "benefits", ["name"])
    op.create_index("ix_benefits_category", "benefits", ["category"])

    op.create_table(
        "wallets",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("token_balance", sa.Integer(), nullable=False),
        sa.Column("money_balance", sa.Numeric(12, 2), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.CheckConstraint("token_balance >= 0", name="ck_wallets_token_balance_non_negative"),
    )
    op.create_index("ix_wallets_user_id", "wallets", ["user_id"], unique=True)

    op.create_table(
        "owned_benefits",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("owner_id", sa.String(length=36), nullable=False),
        sa.Column("benefit_id", sa.String(length=36), nullable=False),
        sa.Column("purchased_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("expiration_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("price_paid", sa.Integer(), nullable=False),
        sa.Column("idempotency_key", sa.String(length=64)),
        sa.UniqueConstraint("owner_id", "idempotency_key", name="uq_owned_benefits_owner_idempotency_key"),
    )
    op.create_index("ix_owned_benefits_owner_id", "owned_benefits", ["owner_id"])
    op.create_index("ix_owned_benefits_benefit_id", "owned_benefits", ["benefit_id"])


def downgrade() -> None:
    op.drop_index("ix_owned_benefits_benefit_id", table_name="owned_benefits")
    op.drop_index("ix_owned_benefits_owner_id", table_name="owned_benefits")
    op.drop_table("owned_benefits")

    op.drop_index("ix_wallets_user_id", table_name="wallets")
    op.drop_table("wallets")

    op.drop_index("ix_benefits_category", table_name="benefits")
    op.drop_index("ix_benefits_name", table_name="benefits")
    op.drop_table("benefits")
