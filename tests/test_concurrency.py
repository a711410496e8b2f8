"""
Concurrency tests: racing requests against one file-backed database.

Every scenario launches its operations with ``asyncio.gather`` and checks
that the end state is one a serial execution could have produced.
"""

from __future__ import annotations

import asyncio

from economy.modules.gifts import AlreadyResolvedError, GiftStatus, MoneyGift
from economy.modules.inventory import AlreadyOwnedError, InventoryService
from economy.modules.ledger import InsufficientFundsError


def _split(results):
    successes = [r for r in results if not isinstance(r, BaseException)]
    failures = [r for r in results if isinstance(r, BaseException)]
    return successes, failures


async def test_racing_purchases_never_overdraw(economy) -> None:
    """Balance 40 and two different 30 coin items: exactly one purchase wins."""

    await economy.open_account("reader", 40)
    store = economy.store()
    bubble, starfield = economy.item("Comic Bubble"), economy.item("Starfield")

    results = await asyncio.gather(
        store.purchase("reader", bubble.id),
        store.purchase("reader", starfield.id),
        return_exceptions=True,
    )

    successes, failures = _split(results)
    assert len(successes) == 1
    assert len(failures) == 1 and isinstance(failures[0], InsufficientFundsError)
    assert await economy.balance("reader") == 10
    assert await economy.owned("reader") == {successes[0].item_id}


async def test_racing_purchases_of_the_same_item(economy) -> None:
    await economy.open_account("reader", 100)
    store = economy.store()
    bubble = economy.item("Comic Bubble")

    results = await asyncio.gather(*(store.purchase("reader", bubble.id) for _ in range(4)), return_exceptions=True)

    successes, failures = _split(results)
    assert len(successes) == 1
    assert all(isinstance(f, AlreadyOwnedError) for f in failures)
    assert await economy.balance("reader") == 70
    assert len(await store.list_purchases("reader")) == 1


async def test_racing_sends_respect_balance(economy) -> None:
    await economy.open_account("alice", 50)
    await economy.open_account("bob", 0)
    gifts = economy.gifts()

    results = await asyncio.gather(
        *(gifts.send("alice", "bob", MoneyGift(amount=20)) for _ in range(3)),
        return_exceptions=True,
    )

    successes, failures = _split(results)
    assert len(successes) == 2
    assert len(failures) == 1 and isinstance(failures[0], InsufficientFundsError)
    assert await economy.balance("alice") == 10


async def test_accept_and_reject_race_resolves_once(economy) -> None:
    await economy.open_account("alice", 100)
    await economy.open_account("bob", 0)
    gifts = economy.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))

    results = await asyncio.gather(
        gifts.accept(gift.id, "bob"),
        gifts.reject(gift.id, "bob"),
        gifts.accept(gift.id, "bob"),
        return_exceptions=True,
    )

    successes, failures = _split(results)
    assert len(successes) == 1
    assert all(isinstance(f, AlreadyResolvedError) for f in failures)

    winner = successes[0]
    balances = (await economy.balance("alice"), await economy.balance("bob"))
    if winner.status is GiftStatus.ACCEPTED:
        assert balances == (70, 30)
    else:
        assert balances == (100, 0)


async def test_racing_expiry_returns_once(economy) -> None:
    await economy.open_account("alice", 100)
    await economy.open_account("bob", 0)
    gifts = economy.gifts()
    gift = await gifts.send("alice", "bob", MoneyGift(amount=30))
    economy.clock.advance(days=4)

    results = await asyncio.gather(*(gifts.resolve_expiry(gift.id) for _ in range(5)))

    assert {r.status for r in results} == {GiftStatus.RETURNED}
    assert await economy.balance("alice") == 100


async def test_racing_equips_leave_one_frame_equipped(economy) -> None:
    await economy.open_account("reader")
    names = ("Zinc Frame", "Neon Blue", "Royal Purple")
    for name in names:
        await economy.grant("reader", name)

    async def equip(item_id: str) -> None:
        async with economy.database.transaction() as session:
            await InventoryService.with_session(session).equip("reader", item_id)

    await asyncio.gather(*(equip(economy.item(name).id) for name in names))

    assert len(await economy.equipped("reader")) == 1
