"""Store transaction processor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from economy.db.models import Purchase as PurchaseModel
from economy.infrastructure.database.repositories.purchase_repository import SqlPurchaseRepository
from economy.infrastructure.database.session import Database
from economy.modules.catalog import CatalogFactory, ItemNotFoundError, sql_catalog_factory
from economy.modules.common.clock import Clock, as_utc, utcnow
from economy.modules.inventory import AlreadyOwnedError, InventoryService
from economy.modules.ledger import LedgerService

from .models import Purchase, StoreFront, StoreListing

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StoreService:
    """Exchanges balance for catalog items, all-or-nothing."""

    database: Database
    catalog_factory: CatalogFactory = field(default=sql_catalog_factory)
    clock: Clock = field(default=utcnow)

    async def purchase(self, account_id: str, item_id: str) -> Purchase:
        async with self.database.transaction() as session:
            catalog = self.catalog_factory(session)
            ledger = LedgerService.with_session(session)
            inventory = InventoryService.with_session(session, catalog, self.clock)

            item = await catalog.get_item(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)
            if await inventory.owns(account_id, item_id):
                raise AlreadyOwnedError(account_id, item_id)

            balance = await ledger.adjust(account_id, -item.price)
            await inventory.grant(account_id, item_id, item.type)
            record = await SqlPurchaseRepository(session).add_purchase(
                account_id=account_id,
                item_id=item_id,
                price=item.price,
                created_at=self.clock(),
            )
            purchase = self._to_domain(record)

        logger.info(
            "Account %s bought item %s for %s (balance %s)", account_id, item_id, item.price, balance
        )
        return purchase

    async def storefront(self, account_id: str) -> StoreFront:
        async with self.database.transaction() as session:
            catalog = self.catalog_factory(session)
            balance = await LedgerService.with_session(session).get_balance(account_id)
            inventory = InventoryService.with_session(session, catalog, self.clock)
            owned = {entry.item_id for entry in await inventory.list_entries(account_id)}
            items = await catalog.list_items()
        return StoreFront(
            balance=balance,
            listings=[
                StoreListing(item=item, owned=item.id in owned, affordable=item.price <= balance)
                for item in items
            ],
        )

    async def list_purchases(self, account_id: str, limit: int = 20, offset: int = 0) -> list[Purchase]:
        async with self.database.transaction() as session:
            rows = await SqlPurchaseRepository(session).list_purchases(account_id, limit, offset)
            return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_domain(model: PurchaseModel) -> Purchase:
        return Purchase(
            id=model.id,
            account_id=model.account_id,
            item_id=model.item_id,
            price=model.price,
            created_at=as_utc(model.created_at),
        )
