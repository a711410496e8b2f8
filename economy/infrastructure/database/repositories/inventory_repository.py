"""SQLAlchemy implementation for inventory entries."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import delete, desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import InventoryEntry


class SqlInventoryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_entry(self, account_id: str, item_id: str) -> InventoryEntry | None:
        stmt = (
            select(InventoryEntry)
            .where(InventoryEntry.account_id == account_id, InventoryEntry.item_id == item_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def add_entry(
        self,
        *,
        account_id: str,
        item_id: str,
        item_type: str,
        acquired_at: datetime,
    ) -> InventoryEntry | None:
        entry = InventoryEntry(
            account_id=account_id,
            item_id=item_id,
            item_type=item_type,
            equipped=False,
            acquired_at=acquired_at,
        )
        try:
            async with self.session.begin_nested():
                self.session.add(entry)
                await self.session.flush()
        except IntegrityError:
            return None
        return entry

    async def delete_entry(self, account_id: str, item_id: str) -> bool:
        stmt = (
            delete(InventoryEntry)
            .where(InventoryEntry.account_id == account_id, InventoryEntry.item_id == item_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def clear_equipped(self, account_id: str, item_type: str) -> int:
        stmt = (
            update(InventoryEntry)
            .where(
                InventoryEntry.account_id == account_id,
                InventoryEntry.item_type == item_type,
                InventoryEntry.equipped.is_(True),
            )
            .values(equipped=False)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def set_equipped(self, entry_id: str, equipped: bool) -> None:
        stmt = (
            update(InventoryEntry)
            .where(InventoryEntry.id == entry_id)
            .values(equipped=equipped)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)

    async def list_entries(self, account_id: str) -> Sequence[InventoryEntry]:
        stmt = (
            select(InventoryEntry)
            .where(InventoryEntry.account_id == account_id)
            .order_by(desc(InventoryEntry.acquired_at))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
