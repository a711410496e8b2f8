"""
Tests for `economy/modules/inventory`.

Covers:
- An account owns at most one entry per item.
- At most one item of each type is equipped, and equip is idempotent.
"""

from __future__ import annotations

import pytest

from economy.modules.catalog import ItemNotFoundError
from economy.modules.inventory import AlreadyOwnedError, InventoryService, NotOwnedError
from economy.modules.ledger import AccountNotFoundError


async def test_grant_then_duplicate_grant_fails(economy) -> None:
    await economy.open_account("reader")
    await economy.grant("reader", "Zinc Frame")

    with pytest.raises(AlreadyOwnedError):
        await economy.grant("reader", "Zinc Frame")

    assert await economy.owned("reader") == {economy.item("Zinc Frame").id}


async def test_grant_unknown_item_or_account(economy) -> None:
    await economy.open_account("reader")

    with pytest.raises(ItemNotFoundError):
        async with economy.database.transaction() as session:
            await InventoryService.with_session(session).grant("reader", "missing-item")

    with pytest.raises(AccountNotFoundError):
        await economy.grant("ghost", "Zinc Frame")


async def test_new_entries_start_unequipped(economy) -> None:
    await economy.open_account("reader")
    await economy.grant("reader", "Neon Blue")

    async with economy.database.transaction() as session:
        entry = await InventoryService.with_session(session).get_entry("reader", economy.item("Neon Blue").id)

    assert entry.equipped is False
    assert entry.item_type.value == "FRAME"
    assert entry.acquired_at == economy.clock.now


async def test_equip_is_exclusive_per_type(economy) -> None:
    """Equipping a frame unequips the previous frame but leaves the bubble alone."""

    await economy.open_account("reader")
    for name in ("Zinc Frame", "Neon Blue", "Comic Bubble"):
        await economy.grant("reader", name)

    zinc, neon, bubble = (economy.item(name).id for name in ("Zinc Frame", "Neon Blue", "Comic Bubble"))
    async with economy.database.transaction() as session:
        inventory = InventoryService.with_session(session)
        await inventory.equip("reader", zinc)
        await inventory.equip("reader", bubble)
        equipped = await inventory.equip("reader", neon)

    assert equipped.equipped is True
    assert await economy.equipped("reader") == {neon, bubble}


async def test_equip_twice_is_a_no_op(economy) -> None:
    await economy.open_account("reader")
    await economy.grant("reader", "Zinc Frame")
    zinc = economy.item("Zinc Frame").id

    async with economy.database.transaction() as session:
        inventory = InventoryService.with_session(session)
        first = await inventory.equip("reader", zinc)
        second = await inventory.equip("reader", zinc)

    assert first == second
    assert await economy.equipped("reader") == {zinc}


async def test_equip_and_unequip_require_ownership(economy) -> None:
    await economy.open_account("reader")
    neon = economy.item("Neon Blue").id

    with pytest.raises(NotOwnedError):
        async with economy.database.transaction() as session:
            await InventoryService.with_session(session).equip("reader", neon)

    with pytest.raises(NotOwnedError):
        async with economy.database.transaction() as session:
            await InventoryService.with_session(session).unequip("reader", neon)


async def test_unequip_clears_flag(economy) -> None:
    await economy.open_account("reader")
    await economy.grant("reader", "Starfield")
    starfield = economy.item("Starfield").id

    async with economy.database.transaction() as session:
        inventory = InventoryService.with_session(session)
        await inventory.equip("reader", starfield)
        entry = await inventory.unequip("reader", starfield)

    assert entry.equipped is False
    assert await economy.equipped("reader") == set()


async def test_revoke_removes_entry(economy) -> None:
    await economy.open_account("reader")
    await economy.grant("reader", "Zinc Frame")
    zinc = economy.item("Zinc Frame").id

    async with economy.database.transaction() as session:
        await InventoryService.with_session(session).revoke("reader", zinc)

    assert await economy.owned("reader") == set()
    with pytest.raises(NotOwnedError):
        async with economy.database.transaction() as session:
            await InventoryService.with_session(session).revoke("reader", zinc)


async def test_list_owned_items_joins_catalog(economy) -> None:
    await economy.open_account("reader")
    await economy.grant("reader", "Zinc Frame")

    async with economy.database.transaction() as session:
        owned = await InventoryService.with_session(session).list_owned_items("reader")

    assert [o.item.name for o in owned] == ["Zinc Frame"]
    assert owned[0].item.attributes == {"cssClass": "frame-common"}
