"""Session-bound gift escrow state machine.

``GiftEscrow`` runs inside one transaction opened by ``GiftService``. It moves
value between the sender, the escrow and the receiver, and guards every
status change with a compare-and-set from PENDING, so a gift resolves at most
once no matter how many requests race on it.

Any code path that reads a gift must go through ``load`` (or call
``expire_if_due`` on the row) before acting on its status: expiry is only
detected on read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import Gift as GiftModel
from economy.infrastructure.database.repositories.gift_repository import SqlGiftRepository
from economy.modules.catalog import CatalogAdapter, ItemNotFoundError, ItemType, Rarity
from economy.modules.common.clock import Clock, as_utc, utcnow
from economy.modules.inventory import AlreadyOwnedError, InventoryService
from economy.modules.ledger import LedgerService
from economy.modules.notifications import EventType, NotificationEvent

from .exceptions import AlreadyResolvedError, GiftExpiredError, GiftNotFoundError, InvalidGiftError
from .models import EscrowedItem, Gift, GiftKind, GiftRequest, GiftStatus, ItemGift, MoneyGift
from .repository import GiftRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GiftEscrow:
    repository: GiftRepository
    ledger: LedgerService
    inventory: InventoryService
    catalog: CatalogAdapter
    clock: Clock = field(default=utcnow)
    events: list[tuple[str, NotificationEvent]] = field(default_factory=list)

    @classmethod
    def with_session(cls, session: AsyncSession, catalog: CatalogAdapter, clock: Clock = utcnow) -> "GiftEscrow":
        return cls(
            repository=SqlGiftRepository(session),
            ledger=LedgerService.with_session(session),
            inventory=InventoryService.with_session(session, catalog, clock),
            catalog=catalog,
            clock=clock,
        )

    async def hold(self, sender_id: str, receiver_id: str, request: GiftRequest, expires_at: datetime) -> Gift:
        """Take the value out of the sender's hands and open a PENDING gift."""
        await self.ledger.get_account(receiver_id)

        if isinstance(request, MoneyGift):
            await self.ledger.adjust(sender_id, -request.amount)
            model = await self.repository.create_gift(
                sender_id=sender_id,
                receiver_id=receiver_id,
                kind=GiftKind.MONEY.value,
                amount=request.amount,
                item_id=None,
                item_rarity=None,
                item_price=None,
                created_at=self.clock(),
                expires_at=expires_at,
            )
        elif isinstance(request, ItemGift):
            item = await self.catalog.get_item(request.item_id)
            if item is None:
                raise ItemNotFoundError(request.item_id)
            await self.inventory.get_entry(sender_id, item.id)
            await self.inventory.revoke(sender_id, item.id)
            model = await self.repository.create_gift(
                sender_id=sender_id,
                receiver_id=receiver_id,
                kind=GiftKind.for_item(item.type).value,
                amount=None,
                item_id=item.id,
                item_rarity=Rarity(item.rarity).value,
                item_price=item.price,
                created_at=self.clock(),
                expires_at=expires_at,
            )
        else:
            raise InvalidGiftError(f"Unsupported gift payload: {type(request).__name__}")

        gift = self.to_domain(model)
        self._emit(receiver_id, EventType.GIFT_RECEIVED, gift)
        return gift

    async def load(self, gift_id: str) -> Gift:
        model = await self.repository.get_gift(gift_id)
        if model is None:
            raise GiftNotFoundError(gift_id)
        return await self.expire_if_due(self.to_domain(model))

    async def expire_if_due(self, gift: Gift) -> Gift:
        """Return an expired PENDING gift to its sender; no-op otherwise."""
        now = self.clock()
        if not gift.is_due(now):
            return gift
        if not await self.repository.transition(gift.id, status=GiftStatus.RETURNED.value, resolved_at=now):
            return await self._reload(gift.id)
        await self._reverse(gift)
        logger.info("Gift %s expired, value returned to %s", gift.id, gift.sender_id)
        gift = await self._reload(gift.id)
        self._emit(gift.sender_id, EventType.GIFT_RETURNED, gift)
        return gift

    async def accept(self, gift: Gift) -> Gift:
        await self._claim(gift, GiftStatus.ACCEPTED)
        payload = gift.payload
        if isinstance(payload, MoneyGift):
            await self.ledger.adjust(gift.receiver_id, payload.amount)
        else:
            # Surfaces AlreadyOwnedError: the receiver must free the slot first,
            # the value cannot be dropped.
            await self.inventory.grant(gift.receiver_id, payload.item_id, payload.item_type)
        logger.info("Gift %s accepted by %s", gift.id, gift.receiver_id)
        gift = await self._reload(gift.id)
        self._emit(gift.sender_id, EventType.GIFT_ACCEPTED, gift)
        return gift

    async def reject(self, gift: Gift) -> Gift:
        await self._claim(gift, GiftStatus.REJECTED)
        await self._reverse(gift)
        logger.info("Gift %s rejected by %s", gift.id, gift.receiver_id)
        gift = await self._reload(gift.id)
        self._emit(gift.sender_id, EventType.GIFT_REJECTED, gift)
        return gift

    async def _claim(self, gift: Gift, status: GiftStatus) -> None:
        if await self.repository.transition(gift.id, status=status.value, resolved_at=self.clock()):
            return
        current = await self._reload(gift.id)
        if current.status is GiftStatus.RETURNED:
            raise GiftExpiredError(gift.id)
        raise AlreadyResolvedError(gift.id, current.status.value)

    async def _reverse(self, gift: Gift) -> None:
        """Credit the escrowed value back to the sender.

        Items go back into the sender's inventory. When the sender has since
        re-acquired the same item, the return is paid out as a balance credit
        equal to the item's catalog price (the send-time price if the item left
        the catalog) and recorded on the gift as ``compensation_amount``.
        """
        payload = gift.payload
        if isinstance(payload, MoneyGift):
            await self.ledger.adjust(gift.sender_id, payload.amount)
            return

        if not await self.inventory.owns(gift.sender_id, payload.item_id):
            try:
                await self.inventory.grant(gift.sender_id, payload.item_id, payload.item_type)
                return
            except AlreadyOwnedError:
                # a concurrent purchase re-granted the item after the ownership check
                pass

        item = await self.catalog.get_item(payload.item_id)
        price = item.price if item is not None else payload.price
        await self.ledger.adjust(gift.sender_id, price)
        await self.repository.record_compensation(gift.id, price)
        logger.info(
            "Sender %s already owns item %s again, gift %s returned as %s credit",
            gift.sender_id,
            payload.item_id,
            gift.id,
            price,
        )

    async def _reload(self, gift_id: str) -> Gift:
        model = await self.repository.get_gift(gift_id)
        if model is None:
            raise GiftNotFoundError(gift_id)
        return self.to_domain(model)

    def _emit(self, account_id: str, event_type: EventType, gift: Gift) -> None:
        data: dict = {"kind": gift.kind.value, "status": gift.status.value}
        if isinstance(gift.payload, MoneyGift):
            data["amount"] = gift.payload.amount
        else:
            data["item_id"] = gift.payload.item_id
        if gift.compensation_amount is not None:
            data["compensation_amount"] = gift.compensation_amount
        self.events.append((account_id, NotificationEvent(type=event_type, gift_id=gift.id, data=data)))

    @staticmethod
    def to_domain(model: GiftModel) -> Gift:
        kind = GiftKind(model.kind)
        if kind is GiftKind.MONEY:
            payload = MoneyGift(amount=model.amount)
        else:
            payload = EscrowedItem(
                item_id=model.item_id,
                item_type=ItemType(kind.value),
                rarity=Rarity(model.item_rarity) if model.item_rarity else None,
                price=model.item_price or 0,
            )
        return Gift(
            id=model.id,
            sender_id=model.sender_id,
            receiver_id=model.receiver_id,
            kind=kind,
            payload=payload,
            status=GiftStatus(model.status),
            created_at=as_utc(model.created_at),
            expires_at=as_utc(model.expires_at),
            resolved_at=as_utc(model.resolved_at),
            compensation_amount=model.compensation_amount,
        )
