"""Reusable FastAPI dependencies."""

from .container import get_app_settings, get_container, get_database
from .services import get_gift_service, get_store_service

__all__ = [
    "get_app_settings",
    "get_container",
    "get_database",
    "get_gift_service",
    "get_store_service",
]
