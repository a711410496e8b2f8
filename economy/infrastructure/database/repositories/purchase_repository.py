"""SQLAlchemy implementation for purchase records."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import Purchase


class SqlPurchaseRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_purchase(
        self,
        *,
        account_id: str,
        item_id: str,
        price: int,
        created_at: datetime,
    ) -> Purchase:
        purchase = Purchase(account_id=account_id, item_id=item_id, price=price, created_at=created_at)
        self.session.add(purchase)
        await self.session.flush()
        return purchase

    async def list_purchases(self, account_id: str, limit: int, offset: int) -> Sequence[Purchase]:
        stmt = (
            select(Purchase)
            .where(Purchase.account_id == account_id)
            .order_by(desc(Purchase.created_at))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
