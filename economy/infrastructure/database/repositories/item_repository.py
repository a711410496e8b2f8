"""SQLAlchemy implementation for catalog items."""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import Item


class SqlItemRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_item(self, item_id: str) -> Item | None:
        stmt = select(Item).where(Item.id == item_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_name(self, name: str) -> Item | None:
        stmt = select(Item).where(Item.name == name)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_items(self) -> Sequence[Item]:
        stmt = select(Item).order_by(Item.price, Item.name)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def create_item(
        self,
        *,
        name: str,
        type: str,
        rarity: str,
        price: int,
        description: str | None,
        attributes: dict[str, Any],
    ) -> Item:
        item = Item(
            name=name,
            type=type,
            rarity=rarity,
            price=price,
            description=description,
            attributes=attributes,
        )
        self.session.add(item)
        await self.session.flush()
        return item
