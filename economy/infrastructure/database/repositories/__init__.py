"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .gift_repository import SqlGiftRepository
from .inventory_repository import SqlInventoryRepository
from .item_repository import SqlItemRepository
from .purchase_repository import SqlPurchaseRepository

__all__ = [
    "SqlAccountRepository",
    "SqlGiftRepository",
    "SqlInventoryRepository",
    "SqlItemRepository",
    "SqlPurchaseRepository",
]
