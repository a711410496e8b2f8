"""Domain models for gift escrow.

A gift payload is a tagged union keyed by kind: ``MoneyGift`` moves balance,
``ItemGift`` moves one inventory item. Once in escrow an item gift carries an
``EscrowedItem`` snapshot of the catalog definition taken at send time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from economy.modules.catalog.models import ItemType, Rarity


class GiftKind(str, Enum):
    MONEY = "MONEY"
    FRAME = "FRAME"
    BUBBLE = "BUBBLE"
    BACKGROUND = "BACKGROUND"

    @classmethod
    def for_item(cls, item_type: ItemType) -> "GiftKind":
        return cls(ItemType(item_type).value)

    @property
    def is_item(self) -> bool:
        return self is not GiftKind.MONEY


class GiftStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    RETURNED = "RETURNED"

    @property
    def is_terminal(self) -> bool:
        return self is not GiftStatus.PENDING


@dataclass(slots=True, frozen=True)
class MoneyGift:
    amount: int


@dataclass(slots=True, frozen=True)
class ItemGift:
    item_id: str


GiftRequest = Union[MoneyGift, ItemGift]


@dataclass(slots=True, frozen=True)
class EscrowedItem:
    item_id: str
    item_type: ItemType
    rarity: Optional[Rarity]
    price: int


GiftPayload = Union[MoneyGift, EscrowedItem]


@dataclass(slots=True, frozen=True)
class Gift:
    id: str
    sender_id: str
    receiver_id: str
    kind: GiftKind
    payload: GiftPayload
    status: GiftStatus
    created_at: datetime
    expires_at: datetime
    resolved_at: Optional[datetime] = None
    compensation_amount: Optional[int] = None

    def is_due(self, now: datetime) -> bool:
        return self.status is GiftStatus.PENDING and now > self.expires_at

    def involves(self, account_id: str) -> bool:
        return account_id in (self.sender_id, self.receiver_id)
