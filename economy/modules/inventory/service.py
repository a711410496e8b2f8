"""Inventory domain service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import InventoryEntry as InventoryEntryModel
from economy.infrastructure.database.repositories.account_repository import SqlAccountRepository
from economy.infrastructure.database.repositories.inventory_repository import SqlInventoryRepository
from economy.modules.catalog import CatalogAdapter, ItemNotFoundError, ItemType, SqlCatalog
from economy.modules.common.clock import Clock, as_utc, utcnow
from economy.modules.ledger.exceptions import AccountNotFoundError
from economy.modules.ledger.repository import AccountRepository

from .exceptions import AlreadyOwnedError, NotOwnedError
from .models import InventoryEntry, OwnedItem
from .repository import InventoryRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InventoryService:
    """Item ownership and equip exclusivity, inside the caller's transaction."""

    repository: InventoryRepository
    accounts: AccountRepository
    catalog: CatalogAdapter
    clock: Clock = field(default=utcnow)

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        catalog: CatalogAdapter | None = None,
        clock: Clock = utcnow,
    ) -> "InventoryService":
        return cls(
            SqlInventoryRepository(session),
            SqlAccountRepository(session),
            catalog or SqlCatalog.with_session(session),
            clock,
        )

    async def owns(self, account_id: str, item_id: str) -> bool:
        return await self.repository.get_entry(account_id, item_id) is not None

    async def get_entry(self, account_id: str, item_id: str) -> InventoryEntry:
        entry = await self.repository.get_entry(account_id, item_id)
        if entry is None:
            raise NotOwnedError(account_id, item_id)
        return self._to_domain(entry)

    async def grant(self, account_id: str, item_id: str, item_type: ItemType | None = None) -> InventoryEntry:
        """Give ``item_id`` to ``account_id``; fails with AlreadyOwnedError instead of duplicating.

        ``item_type`` skips the catalog lookup when the caller already holds a
        snapshot of the item.
        """
        if item_type is None:
            item = await self.catalog.get_item(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)
            item_type = item.type
        if await self.accounts.get_account(account_id) is None:
            raise AccountNotFoundError(account_id)
        if await self.repository.get_entry(account_id, item_id) is not None:
            raise AlreadyOwnedError(account_id, item_id)

        entry = await self.repository.add_entry(
            account_id=account_id,
            item_id=item_id,
            item_type=ItemType(item_type).value,
            acquired_at=self.clock(),
        )
        if entry is None:
            # lost a race against a concurrent grant of the same item
            raise AlreadyOwnedError(account_id, item_id)
        logger.info("Granted item %s to account %s", item_id, account_id)
        return self._to_domain(entry)

    async def revoke(self, account_id: str, item_id: str) -> None:
        if not await self.repository.delete_entry(account_id, item_id):
            raise NotOwnedError(account_id, item_id)
        logger.info("Revoked item %s from account %s", item_id, account_id)

    async def equip(self, account_id: str, item_id: str) -> InventoryEntry:
        """Equip one item, unequipping every other entry of the same type."""
        await self.accounts.lock_account(account_id)
        entry = await self.repository.get_entry(account_id, item_id)
        if entry is None:
            raise NotOwnedError(account_id, item_id)
        if entry.equipped:
            return self._to_domain(entry)

        await self.repository.clear_equipped(account_id, entry.item_type)
        await self.repository.set_equipped(entry.id, True)
        entry = await self.repository.get_entry(account_id, item_id)
        logger.info("Account %s equipped %s item %s", account_id, entry.item_type, item_id)
        return self._to_domain(entry)

    async def unequip(self, account_id: str, item_id: str) -> InventoryEntry:
        await self.accounts.lock_account(account_id)
        entry = await self.repository.get_entry(account_id, item_id)
        if entry is None:
            raise NotOwnedError(account_id, item_id)
        if entry.equipped:
            await self.repository.set_equipped(entry.id, False)
            entry = await self.repository.get_entry(account_id, item_id)
        return self._to_domain(entry)

    async def list_entries(self, account_id: str) -> list[InventoryEntry]:
        rows = await self.repository.list_entries(account_id)
        return [self._to_domain(row) for row in rows]

    async def list_owned_items(self, account_id: str) -> list[OwnedItem]:
        entries = await self.list_entries(account_id)
        return [OwnedItem(entry=entry, item=await self.catalog.get_item(entry.item_id)) for entry in entries]

    @staticmethod
    def _to_domain(model: InventoryEntryModel) -> InventoryEntry:
        return InventoryEntry(
            id=model.id,
            account_id=model.account_id,
            item_id=model.item_id,
            item_type=ItemType(model.item_type),
            equipped=bool(model.equipped),
            acquired_at=as_utc(model.acquired_at),
        )
