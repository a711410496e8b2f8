"""Dependency container wiring the storage handle, collaborators and services."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from economy.core.config import Settings, get_settings
from economy.infrastructure.database.session import Database
from economy.interfaces.ws.manager import ConnectionManager
from economy.interfaces.ws.notifier import WebSocketNotifier
from economy.modules.catalog import CatalogFactory, sql_catalog_factory
from economy.modules.gifts import GiftService
from economy.modules.notifications import LoggingNotifier, NotificationDispatcher, Notifier, NullNotifier
from economy.modules.social import OpenSocialGraph, SocialGraph
from economy.modules.store import StoreService

logger = logging.getLogger(__name__)


def _build_notifier(settings: Settings, connections: ConnectionManager) -> Notifier:
    if not settings.notifications.enabled:
        return NullNotifier()
    if settings.notifications.backend == "websocket":
        return WebSocketNotifier(connections)
    return LoggingNotifier()


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    database: Database
    connections: ConnectionManager = field(default_factory=ConnectionManager)
    social_graph: SocialGraph = field(default_factory=OpenSocialGraph)
    catalog_factory: CatalogFactory = field(default=sql_catalog_factory)
    notifier: Notifier | None = None
    dispatcher: NotificationDispatcher = field(init=False)

    def __post_init__(self) -> None:
        if self.notifier is None:
            self.notifier = _build_notifier(self.settings, self.connections)
        self.dispatcher = NotificationDispatcher(self.notifier)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides) -> "ApplicationContainer":
        settings = settings or get_settings()
        database = Database.from_settings(settings.database, debug=settings.debug)
        return cls(settings=settings, database=database, **overrides)

    def store_service(self) -> StoreService:
        return StoreService(self.database, self.catalog_factory)

    def gift_service(self) -> GiftService:
        return GiftService(
            self.database,
            social_graph=self.social_graph,
            dispatcher=self.dispatcher,
            catalog_factory=self.catalog_factory,
            window=self.settings.gift_window,
        )

    async def startup(self) -> None:
        """Ensure tables exist (development convenience, migrations preferred)."""
        await self.database.create_all()
        logger.info("Economy storage ready at %s", self.database.engine.url.render_as_string(hide_password=True))

    async def shutdown(self) -> None:
        await self.dispatcher.drain()
        await self.database.dispose()


__all__ = ["ApplicationContainer"]
