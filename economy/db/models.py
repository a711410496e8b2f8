"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from economy.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (CheckConstraint("balance >= 0", name="balance_non_negative"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    balance = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    inventory = relationship("InventoryEntry", back_populates="account", cascade="all, delete-orphan")


class Item(Base):
    __tablename__ = "items"
    __table_args__ = (CheckConstraint("price >= 0", name="price_non_negative"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text)
    type = Column(String(20), nullable=False, index=True)
    rarity = Column(String(20), nullable=False, default="COMMON")
    price = Column(Integer, nullable=False)
    attributes = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class InventoryEntry(Base):
    __tablename__ = "inventory_entries"
    __table_args__ = (
        UniqueConstraint("account_id", "item_id", name="uq_inventory_entries_account_item"),
        Index(
            "uq_inventory_entries_equipped_type",
            "account_id",
            "item_type",
            unique=True,
            sqlite_where=text("equipped = 1"),
            postgresql_where=text("equipped"),
        ),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    account_id = Column(String(36), ForeignKey("accounts.id"), nullable=False, index=True)
    item_id = Column(String(36), ForeignKey("items.id"), nullable=False)
    item_type = Column(String(20), nullable=False)
    equipped = Column(Boolean, nullable=False, default=False)
    acquired_at = Column(DateTime(timezone=True), nullable=False)

    account = relationship("Account", back_populates="inventory")
    item = relationship("Item")


class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    account_id = Column(String(36), ForeignKey("accounts.id"), nullable=False, index=True)
    item_id = Column(String(36), ForeignKey("items.id"), nullable=False)
    price = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


class Gift(Base):
    __tablename__ = "gifts"
    __table_args__ = (
        CheckConstraint(
            "status IN ('PENDING', 'ACCEPTED', 'REJECTED', 'RETURNED')",
            name="status_valid",
        ),
        CheckConstraint(
            "(kind = 'MONEY' AND amount > 0 AND item_id IS NULL)"
            " OR (kind <> 'MONEY' AND amount IS NULL AND item_id IS NOT NULL)",
            name="payload_matches_kind",
        ),
        Index("ix_gifts_receiver_status", "receiver_id", "status"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    sender_id = Column(String(36), ForeignKey("accounts.id"), nullable=False, index=True)
    receiver_id = Column(String(36), ForeignKey("accounts.id"), nullable=False, index=True)
    kind = Column(String(20), nullable=False)
    amount = Column(Integer)
    item_id = Column(String(36), ForeignKey("items.id"))
    item_rarity = Column(String(20))
    item_price = Column(Integer)
    status = Column(String(20), nullable=False, default="PENDING")
    compensation_amount = Column(Integer)
    created_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    resolved_at = Column(DateTime(timezone=True))
