"""Gift escrow service: transactions and notifications around ``GiftEscrow``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from economy.infrastructure.database.session import Database
from economy.modules.catalog import CatalogFactory, sql_catalog_factory
from economy.modules.common.clock import Clock, utcnow
from economy.modules.common.exceptions import EconomyError
from economy.modules.notifications import NotificationDispatcher, NullNotifier
from economy.modules.social import OpenSocialGraph, SocialGraph

from .escrow import GiftEscrow
from .exceptions import (
    AlreadyResolvedError,
    GiftExpiredError,
    InvalidGiftError,
    NoChannelError,
    NotYourGiftError,
)
from .models import Gift, GiftRequest, GiftStatus, ItemGift, MoneyGift

logger = logging.getLogger(__name__)

DEFAULT_GIFT_WINDOW = timedelta(hours=72)


@dataclass(slots=True)
class GiftService:
    database: Database
    social_graph: SocialGraph = field(default_factory=OpenSocialGraph)
    dispatcher: NotificationDispatcher = field(default_factory=lambda: NotificationDispatcher(NullNotifier()))
    catalog_factory: CatalogFactory = field(default=sql_catalog_factory)
    clock: Clock = field(default=utcnow)
    window: timedelta = DEFAULT_GIFT_WINDOW

    def _escrow(self, session: AsyncSession) -> GiftEscrow:
        return GiftEscrow.with_session(session, self.catalog_factory(session), self.clock)

    async def send(self, sender_id: str, receiver_id: str, request: GiftRequest) -> Gift:
        _validate_request(request)
        # The channel check must happen before anything is debited.
        if sender_id == receiver_id or not await self.social_graph.can_exchange_gifts(sender_id, receiver_id):
            raise NoChannelError(sender_id, receiver_id)

        async with self.database.transaction() as session:
            escrow = self._escrow(session)
            gift = await escrow.hold(sender_id, receiver_id, request, self.clock() + self.window)

        logger.info("Gift %s (%s) sent from %s to %s", gift.id, gift.kind.value, sender_id, receiver_id)
        self._publish(escrow)
        return gift

    async def resolve_expiry(self, gift_id: str) -> Gift:
        async with self.database.transaction() as session:
            escrow = self._escrow(session)
            gift = await escrow.load(gift_id)
        self._publish(escrow)
        return gift

    async def accept(self, gift_id: str, receiver_id: str) -> Gift:
        failure: Optional[EconomyError] = None
        async with self.database.transaction() as session:
            escrow = self._escrow(session)
            gift = await escrow.load(gift_id)
            failure = _check_receiver_action(gift, receiver_id)
            if failure is None:
                gift = await escrow.accept(gift)

        # An expiry detected by this call stays committed even though the
        # accept itself fails.
        self._publish(escrow)
        if failure is not None:
            raise failure
        return gift

    async def reject(self, gift_id: str, receiver_id: str) -> Gift:
        failure: Optional[EconomyError] = None
        async with self.database.transaction() as session:
            escrow = self._escrow(session)
            gift = await escrow.load(gift_id)
            failure = _check_receiver_action(gift, receiver_id)
            if failure is None:
                gift = await escrow.reject(gift)

        self._publish(escrow)
        if failure is not None:
            raise failure
        return gift

    async def get_gift(self, gift_id: str, account_id: str) -> Gift:
        async with self.database.transaction() as session:
            escrow = self._escrow(session)
            gift = await escrow.load(gift_id)
        self._publish(escrow)
        if not gift.involves(account_id):
            raise NotYourGiftError(gift_id, account_id)
        return gift

    async def list_received(
        self,
        account_id: str,
        status: GiftStatus | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Gift]:
        return await self._list(account_id, status, limit, offset, received=True)

    async def list_sent(
        self,
        account_id: str,
        status: GiftStatus | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Gift]:
        return await self._list(account_id, status, limit, offset, received=False)

    async def _list(
        self,
        account_id: str,
        status: GiftStatus | None,
        limit: int,
        offset: int,
        *,
        received: bool,
    ) -> list[Gift]:
        status_value = status.value if status is not None else None
        async with self.database.transaction() as session:
            escrow = self._escrow(session)
            # Overdue gifts are settled before the status filter runs.
            for row in await escrow.repository.list_due(account_id, self.clock(), received=received):
                await escrow.expire_if_due(escrow.to_domain(row))
            fetch = escrow.repository.list_received if received else escrow.repository.list_sent
            rows = await fetch(account_id, status_value, limit, offset)
            gifts = [await escrow.expire_if_due(escrow.to_domain(row)) for row in rows]
        self._publish(escrow)
        if status is not None:
            gifts = [gift for gift in gifts if gift.status is status]
        return gifts

    def _publish(self, escrow: GiftEscrow) -> None:
        for account_id, event in escrow.events:
            self.dispatcher.dispatch(account_id, event)
        escrow.events.clear()


def _validate_request(request: GiftRequest) -> None:
    if isinstance(request, MoneyGift):
        if isinstance(request.amount, bool) or not isinstance(request.amount, int) or request.amount <= 0:
            raise InvalidGiftError("Gift amount must be a positive integer")
    elif isinstance(request, ItemGift):
        if not request.item_id:
            raise InvalidGiftError("Item gifts need an item_id")
    else:
        raise InvalidGiftError(f"Unsupported gift payload: {type(request).__name__}")


def _check_receiver_action(gift: Gift, account_id: str) -> Optional[EconomyError]:
    if gift.receiver_id != account_id:
        return NotYourGiftError(gift.id, account_id)
    if gift.status is GiftStatus.RETURNED:
        return GiftExpiredError(gift.id)
    if gift.status.is_terminal:
        return AlreadyResolvedError(gift.id, gift.status.value)
    return None
