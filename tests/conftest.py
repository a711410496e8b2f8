"""
Shared fixtures for the economy test-suite.

Every test gets its own file-backed SQLite database so that concurrent
transactions exercise the real write lock instead of an in-memory shortcut.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from economy.core.config import DatabaseSettings
from economy.infrastructure.database.session import Database
from economy.modules.catalog import CatalogItem, CatalogItemInput, ItemType, Rarity, SqlCatalog
from economy.modules.gifts import DEFAULT_GIFT_WINDOW, GiftService
from economy.modules.inventory import InventoryService
from economy.modules.ledger import LedgerService
from economy.modules.notifications import NotificationDispatcher, NotificationEvent
from economy.modules.social import OpenSocialGraph, SocialGraph
from economy.modules.store import StoreService

START = datetime(2026, 10, 19, 9, 0, 0, tzinfo=timezone.utc)

CATALOG = [
    CatalogItemInput(name="Zinc Frame", type=ItemType.FRAME, price=10, attributes={"cssClass": "frame-common"}),
    CatalogItemInput(name="Neon Blue", type=ItemType.FRAME, price=40, rarity=Rarity.RARE),
    CatalogItemInput(name="Royal Purple", type=ItemType.FRAME, price=150, rarity=Rarity.EPIC),
    CatalogItemInput(name="Comic Bubble", type=ItemType.BUBBLE, price=30),
    CatalogItemInput(name="Starfield", type=ItemType.BACKGROUND, price=30, rarity=Rarity.COSMIC),
]


class FrozenClock:
    """Callable clock that only moves when a test advances it."""

    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class RecordingNotifier:
    def __init__(self) -> None:
        self.events: list[tuple[str, NotificationEvent]] = []

    async def notify(self, account_id: str, event: NotificationEvent) -> None:
        self.events.append((account_id, event))

    def types_for(self, account_id: str) -> list[str]:
        return [event.type.value for recipient, event in self.events if recipient == account_id]


@dataclass
class Economy:
    """Bundle of the storage handle, collaborators and seeded catalog."""

    database: Database
    clock: FrozenClock
    notifier: RecordingNotifier
    dispatcher: NotificationDispatcher
    items: dict[str, CatalogItem] = field(default_factory=dict)

    def store(self) -> StoreService:
        return StoreService(self.database, clock=self.clock)

    def gifts(self, social_graph: Optional[SocialGraph] = None, window: timedelta = DEFAULT_GIFT_WINDOW) -> GiftService:
        return GiftService(
            self.database,
            social_graph=social_graph or OpenSocialGraph(),
            dispatcher=self.dispatcher,
            clock=self.clock,
            window=window,
        )

    def item(self, name: str) -> CatalogItem:
        return self.items[name]

    async def open_account(self, account_id: str, balance: int = 0) -> None:
        async with self.database.transaction() as session:
            await LedgerService.with_session(session).open_account(account_id, balance)

    async def balance(self, account_id: str) -> int:
        async with self.database.transaction() as session:
            return await LedgerService.with_session(session).get_balance(account_id)

    async def grant(self, account_id: str, item_name: str) -> None:
        async with self.database.transaction() as session:
            inventory = InventoryService.with_session(session, clock=self.clock)
            await inventory.grant(account_id, self.item(item_name).id)

    async def owned(self, account_id: str) -> set[str]:
        async with self.database.transaction() as session:
            entries = await InventoryService.with_session(session).list_entries(account_id)
        return {entry.item_id for entry in entries}

    async def equipped(self, account_id: str) -> set[str]:
        async with self.database.transaction() as session:
            entries = await InventoryService.with_session(session).list_entries(account_id)
        return {entry.item_id for entry in entries if entry.equipped}


@pytest.fixture
async def database(tmp_path):
    settings = DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'economy.db'}", sqlite_busy_timeout=10.0)
    database = Database.from_settings(settings)
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
async def economy(database, clock, notifier):
    dispatcher = NotificationDispatcher(notifier)
    items: dict[str, CatalogItem] = {}
    async with database.transaction() as session:
        catalog = SqlCatalog.with_session(session)
        for payload in CATALOG:
            item, _ = await catalog.ensure_item(payload)
            items[item.name] = item
    yield Economy(database=database, clock=clock, notifier=notifier, dispatcher=dispatcher, items=items)
    await dispatcher.drain()
