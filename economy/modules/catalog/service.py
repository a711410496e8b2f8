"""SQL-backed catalog adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import Item as ItemModel
from economy.infrastructure.database.repositories.item_repository import SqlItemRepository

from .models import CatalogItem, CatalogItemInput, ItemType, Rarity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SqlCatalog:
    """Reads item definitions from the ``items`` table through the caller's session."""

    repository: SqlItemRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "SqlCatalog":
        return cls(SqlItemRepository(session))

    async def get_item(self, item_id: str) -> CatalogItem | None:
        item = await self.repository.get_item(item_id)
        return self._to_domain(item) if item else None

    async def list_items(self) -> list[CatalogItem]:
        rows = await self.repository.list_items()
        return [self._to_domain(row) for row in rows]

    async def ensure_item(self, payload: CatalogItemInput) -> tuple[CatalogItem, bool]:
        """Insert ``payload`` unless an item with the same name exists; returns (item, created)."""
        existing = await self.repository.get_by_name(payload.name)
        if existing is not None:
            return self._to_domain(existing), False
        if payload.price < 0:
            raise ValueError("price must be non-negative")
        item = await self.repository.create_item(
            name=payload.name,
            type=ItemType(payload.type).value,
            rarity=Rarity(payload.rarity).value,
            price=payload.price,
            description=payload.description,
            attributes=dict(payload.attributes),
        )
        logger.info("Added catalog item %s (%s, %s)", item.name, item.type, item.price)
        return self._to_domain(item), True

    @staticmethod
    def _to_domain(model: ItemModel) -> CatalogItem:
        return CatalogItem(
            id=model.id,
            name=model.name,
            type=ItemType(model.type),
            rarity=Rarity(model.rarity),
            price=model.price,
            description=model.description,
            attributes=dict(model.attributes or {}),
        )


def sql_catalog_factory(session: AsyncSession) -> SqlCatalog:
    return SqlCatalog.with_session(session)
