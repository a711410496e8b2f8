"""
Tests for `economy/modules/gifts`.

Covers contract rules:
- Sending takes the value out of the sender's hands exactly once.
- A gift resolves at most once: accepted, rejected or returned on expiry.
- Expiry is detected lazily on any read and is committed even when the
  triggering action fails.
- Reversal of an item gift falls back to a balance credit when the sender
  already owns the item again.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from economy.modules.catalog import ItemType, Rarity, SqlCatalog
from economy.modules.gifts import (
    AlreadyResolvedError,
    EscrowedItem,
    GiftExpiredError,
    GiftKind,
    GiftNotFoundError,
    GiftService,
    GiftStatus,
    InvalidGiftError,
    ItemGift,
    MoneyGift,
    NoChannelError,
    NotYourGiftError,
)
from economy.modules.inventory import AlreadyOwnedError, InventoryService, NotOwnedError
from economy.modules.ledger import AccountNotFoundError, InsufficientFundsError
from economy.modules.social import ChannelSocialGraph


@pytest.fixture
async def parties(economy):
    await economy.open_account("alice", 100)
    await economy.open_account("bob", 0)
    await economy.open_account("carol", 0)
    return economy


class RetiredCatalog:
    """Catalog view in which some items have been taken off sale."""

    def __init__(self, inner: SqlCatalog, retired: set[str]) -> None:
        self.inner = inner
        self.retired = retired

    async def get_item(self, item_id):
        if item_id in self.retired:
            return None
        return await self.inner.get_item(item_id)

    async def list_items(self):
        return [item for item in await self.inner.list_items() if item.id not in self.retired]


async def test_money_gift_accept(parties) -> None:
    """Alice sends 30 to Bob; Bob accepts and ends with 30, Alice with 70."""

    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))

    assert gift.status is GiftStatus.PENDING
    assert gift.kind is GiftKind.MONEY
    assert gift.expires_at == parties.clock.now + timedelta(hours=72)
    assert await parties.balance("alice") == 70
    assert await parties.balance("bob") == 0

    accepted = await gifts.accept(gift.id, "bob")

    assert accepted.status is GiftStatus.ACCEPTED
    assert accepted.resolved_at == parties.clock.now
    assert await parties.balance("alice") == 70
    assert await parties.balance("bob") == 30

    await parties.dispatcher.drain()
    assert parties.notifier.types_for("bob") == ["gift_received"]
    assert parties.notifier.types_for("alice") == ["gift_accepted"]


async def test_second_resolution_fails(parties) -> None:
    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))
    await gifts.accept(gift.id, "bob")

    with pytest.raises(AlreadyResolvedError):
        await gifts.accept(gift.id, "bob")
    with pytest.raises(AlreadyResolvedError):
        await gifts.reject(gift.id, "bob")

    assert await parties.balance("bob") == 30
    assert await parties.balance("alice") == 70


async def test_money_gift_reject_refunds_sender(parties) -> None:
    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=45))

    rejected = await gifts.reject(gift.id, "bob")

    assert rejected.status is GiftStatus.REJECTED
    assert await parties.balance("alice") == 100
    assert await parties.balance("bob") == 0

    await parties.dispatcher.drain()
    assert parties.notifier.types_for("alice") == ["gift_rejected"]


async def test_expired_gift_returns_on_accept_attempt(parties) -> None:
    """Accepting after the window closes fails, yet the return still commits."""

    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))
    parties.clock.advance(hours=73)

    with pytest.raises(GiftExpiredError):
        await gifts.accept(gift.id, "bob")

    assert await parties.balance("alice") == 100
    assert await parties.balance("bob") == 0

    returned = await gifts.get_gift(gift.id, "alice")
    assert returned.status is GiftStatus.RETURNED
    assert returned.resolved_at == parties.clock.now

    with pytest.raises(GiftExpiredError):
        await gifts.reject(gift.id, "bob")

    await parties.dispatcher.drain()
    assert parties.notifier.types_for("alice") == ["gift_returned"]


async def test_gift_is_still_pending_at_the_deadline(parties) -> None:
    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))
    parties.clock.advance(hours=72)

    accepted = await gifts.accept(gift.id, "bob")

    assert accepted.status is GiftStatus.ACCEPTED
    assert await parties.balance("bob") == 30


async def test_resolve_expiry_is_idempotent(parties) -> None:
    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))

    untouched = await gifts.resolve_expiry(gift.id)
    assert untouched.status is GiftStatus.PENDING

    parties.clock.advance(days=4)
    first = await gifts.resolve_expiry(gift.id)
    second = await gifts.resolve_expiry(gift.id)

    assert first.status is second.status is GiftStatus.RETURNED
    assert await parties.balance("alice") == 100

    await parties.dispatcher.drain()
    assert parties.notifier.types_for("alice") == ["gift_returned"]


async def test_custom_window(parties) -> None:
    gifts = parties.gifts(window=timedelta(minutes=5))
    gift = await gifts.send("alice", "bob", MoneyGift(amount=10))
    parties.clock.advance(minutes=6)

    assert (await gifts.resolve_expiry(gift.id)).status is GiftStatus.RETURNED


async def test_item_gift_moves_ownership(parties) -> None:
    neon = parties.item("Neon Blue")
    await parties.grant("alice", "Neon Blue")

    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", ItemGift(item_id=neon.id))

    assert gift.kind is GiftKind.FRAME
    assert gift.payload == EscrowedItem(item_id=neon.id, item_type=ItemType.FRAME, rarity=Rarity.RARE, price=40)
    assert await parties.owned("alice") == set()

    await gifts.accept(gift.id, "bob")

    assert await parties.owned("bob") == {neon.id}
    assert await parties.equipped("bob") == set()
    assert await parties.balance("alice") == 100


async def test_item_gift_requires_ownership(parties) -> None:
    gifts = parties.gifts()

    with pytest.raises(NotOwnedError):
        await gifts.send("alice", "bob", ItemGift(item_id=parties.item("Neon Blue").id))

    assert await gifts.list_sent("alice") == []


async def test_accept_item_already_owned_keeps_gift_pending(parties) -> None:
    """The receiver must free the slot first; the value is never dropped."""

    zinc = parties.item("Zinc Frame")
    await parties.grant("alice", "Zinc Frame")
    await parties.grant("bob", "Zinc Frame")

    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", ItemGift(item_id=zinc.id))

    with pytest.raises(AlreadyOwnedError):
        await gifts.accept(gift.id, "bob")

    assert (await gifts.get_gift(gift.id, "bob")).status is GiftStatus.PENDING

    await gifts.reject(gift.id, "bob")
    assert await parties.owned("alice") == {zinc.id}


async def test_item_return_compensates_when_sender_owns_it_again(parties) -> None:
    neon = parties.item("Neon Blue")
    await parties.grant("alice", "Neon Blue")

    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", ItemGift(item_id=neon.id))
    await parties.store().purchase("alice", neon.id)
    assert await parties.balance("alice") == 60

    rejected = await gifts.reject(gift.id, "bob")

    assert rejected.status is GiftStatus.REJECTED
    assert rejected.compensation_amount == 40
    assert await parties.balance("alice") == 100
    assert await parties.owned("alice") == {neon.id}
    assert await parties.owned("bob") == set()

    await parties.dispatcher.drain()
    [(_, event)] = [(who, e) for who, e in parties.notifier.events if who == "alice"]
    assert event.data["compensation_amount"] == 40


async def test_item_return_uses_send_time_price_for_retired_item(parties) -> None:
    neon = parties.item("Neon Blue")
    await parties.grant("alice", "Neon Blue")
    gift = await parties.gifts().send("alice", "bob", ItemGift(item_id=neon.id))
    await parties.grant("alice", "Neon Blue")

    gifts = GiftService(
        parties.database,
        dispatcher=parties.dispatcher,
        clock=parties.clock,
        catalog_factory=lambda session: RetiredCatalog(SqlCatalog.with_session(session), {neon.id}),
    )
    rejected = await gifts.reject(gift.id, "bob")

    assert rejected.status is GiftStatus.REJECTED
    assert rejected.compensation_amount == 40
    assert await parties.balance("alice") == 140
    assert await parties.owned("alice") == {neon.id}


async def test_item_return_compensates_when_regranted_during_reversal(parties, monkeypatch) -> None:
    """The ownership check misses a concurrent grant; the insert conflict pays out instead."""

    neon = parties.item("Neon Blue")
    await parties.grant("alice", "Neon Blue")
    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", ItemGift(item_id=neon.id))
    await parties.grant("alice", "Neon Blue")

    async def stale_owns(self, account_id, item_id):
        return False

    monkeypatch.setattr(InventoryService, "owns", stale_owns)
    rejected = await gifts.reject(gift.id, "bob")
    monkeypatch.undo()

    assert rejected.status is GiftStatus.REJECTED
    assert rejected.compensation_amount == 40
    assert await parties.balance("alice") == 140
    assert await parties.owned("alice") == {neon.id}
    assert await parties.owned("bob") == set()


async def test_expired_item_gift_returns_item(parties) -> None:
    starfield = parties.item("Starfield")
    await parties.grant("alice", "Starfield")

    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", ItemGift(item_id=starfield.id))
    parties.clock.advance(days=3, seconds=1)

    returned = await gifts.resolve_expiry(gift.id)

    assert returned.status is GiftStatus.RETURNED
    assert returned.compensation_amount is None
    assert await parties.owned("alice") == {starfield.id}


async def test_no_channel_blocks_send_before_any_debit(parties) -> None:
    graph = ChannelSocialGraph()
    gifts = parties.gifts(social_graph=graph)

    with pytest.raises(NoChannelError):
        await gifts.send("alice", "bob", MoneyGift(amount=30))
    assert await parties.balance("alice") == 100

    graph.open_channel("bob", "alice")
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))
    assert gift.status is GiftStatus.PENDING


async def test_self_gift_is_refused(parties) -> None:
    with pytest.raises(NoChannelError):
        await parties.gifts().send("alice", "alice", MoneyGift(amount=1))


@pytest.mark.parametrize(
    "request_payload",
    [MoneyGift(amount=0), MoneyGift(amount=-5), ItemGift(item_id="")],
)
async def test_invalid_payloads(parties, request_payload) -> None:
    with pytest.raises(InvalidGiftError):
        await parties.gifts().send("alice", "bob", request_payload)

    assert await parties.balance("alice") == 100


async def test_send_failures_leave_no_trace(parties) -> None:
    gifts = parties.gifts()

    with pytest.raises(InsufficientFundsError):
        await gifts.send("alice", "bob", MoneyGift(amount=101))
    with pytest.raises(AccountNotFoundError):
        await gifts.send("alice", "ghost", MoneyGift(amount=10))

    assert await parties.balance("alice") == 100
    assert await gifts.list_sent("alice") == []


async def test_only_the_receiver_may_resolve(parties) -> None:
    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))

    with pytest.raises(NotYourGiftError):
        await gifts.accept(gift.id, "carol")
    with pytest.raises(NotYourGiftError):
        await gifts.accept(gift.id, "alice")
    with pytest.raises(NotYourGiftError):
        await gifts.get_gift(gift.id, "carol")

    assert (await gifts.get_gift(gift.id, "bob")).status is GiftStatus.PENDING


async def test_unknown_gift(parties) -> None:
    with pytest.raises(GiftNotFoundError):
        await parties.gifts().accept("no-such-gift", "bob")


async def test_listings_apply_expiry(parties) -> None:
    gifts = parties.gifts()
    old = await gifts.send("alice", "bob", MoneyGift(amount=10))
    parties.clock.advance(hours=48)
    fresh = await gifts.send("alice", "bob", MoneyGift(amount=20))
    parties.clock.advance(hours=30)

    pending = await gifts.list_received("bob", GiftStatus.PENDING)
    everything = await gifts.list_received("bob")

    assert [g.id for g in pending] == [fresh.id]
    assert [(g.id, g.status) for g in everything] == [
        (fresh.id, GiftStatus.PENDING),
        (old.id, GiftStatus.RETURNED),
    ]
    assert await parties.balance("alice") == 80
    assert [g.id for g in await gifts.list_sent("alice", GiftStatus.RETURNED)] == [old.id]


async def test_status_filtered_listing_settles_overdue_gifts_first(parties) -> None:
    """A RETURNED listing is the first read after the window closed."""

    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=10))
    parties.clock.advance(hours=73)

    returned = await gifts.list_sent("alice", GiftStatus.RETURNED)

    assert [(g.id, g.status) for g in returned] == [(gift.id, GiftStatus.RETURNED)]
    assert await parties.balance("alice") == 100
    assert [g.id for g in await gifts.list_received("bob", GiftStatus.RETURNED)] == [gift.id]
    assert await gifts.list_received("bob", GiftStatus.PENDING) == []
    assert await gifts.list_sent("alice", GiftStatus.REJECTED) == []

    await parties.dispatcher.drain()
    assert parties.notifier.types_for("alice") == ["gift_returned"]


async def test_received_listing_settles_overdue_gifts_first(parties) -> None:
    gifts = parties.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=10))
    parties.clock.advance(days=4)

    returned = await gifts.list_received("bob", GiftStatus.RETURNED)

    assert [g.id for g in returned] == [gift.id]
    assert await parties.balance("alice") == 100


async def test_money_is_conserved(parties) -> None:
    """Balances plus pending money gifts always sum to the starting total."""

    gifts = parties.gifts()
    accounts = ("alice", "bob", "carol")

    async def total() -> int:
        balances = sum([await parties.balance(a) for a in accounts])
        pending = 0
        for account in accounts:
            for gift in await gifts.list_sent(account, GiftStatus.PENDING):
                pending += gift.payload.amount
        return balances + pending

    first = await gifts.send("alice", "bob", MoneyGift(amount=30))
    second = await gifts.send("alice", "carol", MoneyGift(amount=25))
    assert await total() == 100

    await gifts.accept(first.id, "bob")
    third = await gifts.send("bob", "carol", MoneyGift(amount=20))
    assert await total() == 100

    await gifts.reject(third.id, "carol")
    parties.clock.advance(days=5)
    assert (await gifts.resolve_expiry(second.id)).status is GiftStatus.RETURNED

    assert await total() == 100
    assert [await parties.balance(a) for a in accounts] == [70, 30, 0]
