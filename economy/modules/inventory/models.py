"""Domain models for inventories."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from economy.modules.catalog.models import CatalogItem, ItemType


@dataclass(slots=True, frozen=True)
class InventoryEntry:
    id: str
    account_id: str
    item_id: str
    item_type: ItemType
    equipped: bool
    acquired_at: datetime


@dataclass(slots=True, frozen=True)
class OwnedItem:
    """An inventory entry joined with its catalog definition, for listings."""

    entry: InventoryEntry
    item: CatalogItem | None
