"""Domain models for store purchases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from economy.modules.catalog.models import CatalogItem


@dataclass(slots=True, frozen=True)
class Purchase:
    id: str
    account_id: str
    item_id: str
    price: int
    created_at: datetime


@dataclass(slots=True, frozen=True)
class StoreListing:
    item: CatalogItem
    owned: bool
    affordable: bool


@dataclass(slots=True, frozen=True)
class StoreFront:
    balance: int
    listings: list[StoreListing]
