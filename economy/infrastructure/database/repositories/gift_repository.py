"""SQLAlchemy implementation for gifts."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import Gift

PENDING = "PENDING"


class SqlGiftRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_gift(
        self,
        *,
        sender_id: str,
        receiver_id: str,
        kind: str,
        amount: int | None,
        item_id: str | None,
        item_rarity: str | None,
        item_price: int | None,
        created_at: datetime,
        expires_at: datetime,
    ) -> Gift:
        gift = Gift(
            sender_id=sender_id,
            receiver_id=receiver_id,
            kind=kind,
            amount=amount,
            item_id=item_id,
            item_rarity=item_rarity,
            item_price=item_price,
            status=PENDING,
            created_at=created_at,
            expires_at=expires_at,
        )
        self.session.add(gift)
        await self.session.flush()
        return gift

    async def get_gift(self, gift_id: str) -> Gift | None:
        stmt = select(Gift).where(Gift.id == gift_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def transition(self, gift_id: str, *, status: str, resolved_at: datetime) -> bool:
        stmt = (
            update(Gift)
            .where(Gift.id == gift_id, Gift.status == PENDING)
            .values(status=status, resolved_at=resolved_at)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def record_compensation(self, gift_id: str, amount: int) -> None:
        stmt = (
            update(Gift)
            .where(Gift.id == gift_id)
            .values(compensation_amount=amount)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)

    async def list_received(
        self,
        account_id: str,
        status: str | None,
        limit: int,
        offset: int,
    ) -> Sequence[Gift]:
        stmt = select(Gift).where(Gift.receiver_id == account_id)
        return await self._page(stmt, status, limit, offset)

    async def list_sent(
        self,
        account_id: str,
        status: str | None,
        limit: int,
        offset: int,
    ) -> Sequence[Gift]:
        stmt = select(Gift).where(Gift.sender_id == account_id)
        return await self._page(stmt, status, limit, offset)

    async def list_due(self, account_id: str, now: datetime, *, received: bool) -> Sequence[Gift]:
        party = Gift.receiver_id if received else Gift.sender_id
        stmt = (
            select(Gift)
            .where(party == account_id, Gift.status == PENDING, Gift.expires_at < now)
            .order_by(Gift.expires_at)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def _page(self, stmt, status: str | None, limit: int, offset: int) -> Sequence[Gift]:
        if status and status != "all":
            stmt = stmt.where(Gift.status == status)
        stmt = (
            stmt.order_by(desc(Gift.created_at))
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
