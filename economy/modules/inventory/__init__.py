"""Inventory domain exports"""

from .exceptions import AlreadyOwnedError, InventoryError, NotOwnedError
from .models import InventoryEntry, OwnedItem
from .service import InventoryService

__all__ = [
    "AlreadyOwnedError",
    "InventoryEntry",
    "InventoryError",
    "InventoryService",
    "NotOwnedError",
    "OwnedItem",
]
