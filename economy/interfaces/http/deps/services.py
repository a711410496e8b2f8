"""Service providers for the economy routers."""

from fastapi import Depends

from economy.modules.gifts import GiftService
from economy.modules.store import StoreService

from .container import get_container


def get_store_service(container=Depends(get_container)) -> StoreService:
    return container.store_service()


def get_gift_service(container=Depends(get_container)) -> GiftService:
    return container.gift_service()


__all__ = ["get_gift_service", "get_store_service"]
