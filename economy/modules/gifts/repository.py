"""Repository protocol for gifts."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from economy.db.models import Gift as GiftModel


class GiftRepository(Protocol):
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
    ) -> GiftModel:
        ...

    async def get_gift(self, gift_id: str) -> GiftModel | None:
        ...

    async def transition(self, gift_id: str, *, status: str, resolved_at: datetime) -> bool:
        """Move a PENDING gift to ``status``; False if it was no longer PENDING."""
        ...

    async def record_compensation(self, gift_id: str, amount: int) -> None:
        ...

    async def list_received(self, account_id: str, status: str | None, limit: int, offset: int) -> Sequence[GiftModel]:
        ...

    async def list_sent(self, account_id: str, status: str | None, limit: int, offset: int) -> Sequence[GiftModel]:
        ...

    async def list_due(self, account_id: str, now: datetime, *, received: bool) -> Sequence[GiftModel]:
        """PENDING gifts of one side of ``account_id`` whose window closed before ``now``."""
        ...
