"""create economy tables

Revision ID: 3f9c2a71d5e0
Revises: 
Create Date: 2026-10-19 09:30:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c2a71d5e0"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("balance", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.CheckConstraint("balance >= 0", name="ck_accounts_balance_non_negative"),
    )

    op.create_table(
        "items",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("rarity", sa.String(length=20), nullable=False, server_default="COMMON"),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("attributes", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("price >= 0", name="ck_items_price_non_negative"),
        sa.UniqueConstraint("name", name="uq_items_name"),
    )
    op.create_index("ix_items_type", "items", ["type"])

    op.create_table(
        "inventory_entries",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("account_id", sa.String(length=36), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("item_id", sa.String(length=36), sa.ForeignKey("items.id"), nullable=False),
        sa.Column("item_type", sa.String(length=20), nullable=False),
        sa.Column("equipped", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("acquired_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("account_id", "item_id", name="uq_inventory_entries_account_item"),
    )
    op.create_index("ix_inventory_entries_account_id", "inventory_entries", ["account_id"])
    op.create_index(
        "uq_inventory_entries_equipped_type",
        "inventory_entries",
        ["account_id", "item_type"],
        unique=True,
        sqlite_where=sa.text("equipped = 1"),
        postgresql_where=sa.text("equipped"),
    )

    op.create_table(
        "purchases",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("account_id", sa.String(length=36), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("item_id", sa.String(length=36), sa.ForeignKey("items.id"), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_purchases_account_id", "purchases", ["account_id"])

    op.create_table(
        "gifts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("sender_id", sa.String(length=36), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("receiver_id", sa.String(length=36), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("kind", sa.String(length=20), nullable=False),
        sa.Column("amount", sa.Integer()),
        sa.Column("item_id", sa.String(length=36), sa.ForeignKey("items.id")),
        sa.Column("item_rarity", sa.String(length=20)),
        sa.Column("item_price", sa.Integer()),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="PENDING"),
        sa.Column("compensation_amount", sa.Integer()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("resolved_at", sa.DateTime(timezone=True)),
        sa.CheckConstraint(
            "status IN ('PENDING', 'ACCEPTED', 'REJECTED', 'RETURNED')",
            name="ck_gifts_status_valid",
        ),
        sa.CheckConstraint(
            "(kind = 'MONEY' AND amount > 0 AND item_id IS NULL)"
            " OR (kind <> 'MONEY' AND amount IS NULL AND item_id IS NOT NULL)",
            name="ck_gifts_payload_matches_kind",
        ),
    )
    op.create_index("ix_gifts_sender_id", "gifts", ["sender_id"])
    op.create_index("ix_gifts_receiver_id", "gifts", ["receiver_id"])
    op.create_index("ix_gifts_receiver_status", "gifts", ["receiver_id", "status"])


def downgrade() -> None:
    op.drop_index("ix_gifts_receiver_status", table_name="gifts")
    op.drop_index("ix_gifts_receiver_id", table_name="gifts")
    op.drop_index("ix_gifts_sender_id", table_name="gifts")
    op.drop_table("gifts")

    op.drop_index("ix_purchases_account_id", table_name="purchases")
    op.drop_table("purchases")

    op.drop_index("uq_inventory_entries_equipped_type", table_name="inventory_entries")
    op.drop_index("ix_inventory_entries_account_id", table_name="inventory_entries")
    op.drop_table("inventory_entries")

    op.drop_index("ix_items_type", table_name="items")
    op.drop_table("items")

    op.drop_table("accounts")
