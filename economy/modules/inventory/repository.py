"""Repository protocol for inventory entries."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from economy.db.models import InventoryEntry as InventoryEntryModel


class InventoryRepository(Protocol):
    async def get_entry(self, account_id: str, item_id: str) -> InventoryEntryModel | None:
        ...

    async def add_entry(
        self,
        *,
        account_id: str,
        item_id: str,
        item_type: str,
        acquired_at: datetime,
    ) -> InventoryEntryModel | None:
        """Insert an entry; return None when (account, item) already exists."""
        ...

    async def delete_entry(self, account_id: str, item_id: str) -> bool:
        ...

    async def clear_equipped(self, account_id: str, item_type: str) -> int:
        ...

    async def set_equipped(self, entry_id: str, equipped: bool) -> None:
        ...

    async def list_entries(self, account_id: str) -> Sequence[InventoryEntryModel]:
        ...
