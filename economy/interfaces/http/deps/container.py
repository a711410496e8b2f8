"""Container and settings providers read from the running application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from economy.core.config import Settings
from economy.infrastructure.database.session import Database

if TYPE_CHECKING:
    from economy.core.container import ApplicationContainer


def get_container(request: Request) -> "ApplicationContainer":
    return request.app.state.container


def get_app_settings(container: "ApplicationContainer" = Depends(get_container)) -> Settings:
    return container.settings


def get_database(container: "ApplicationContainer" = Depends(get_container)) -> Database:
    return container.database


__all__ = ["get_app_settings", "get_container", "get_database"]
