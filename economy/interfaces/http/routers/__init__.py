from fastapi import APIRouter

from economy.interfaces.http.routers import admin, gifts, inventory, store, wallet


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
    router.include_router(store.router, prefix="/store", tags=["store"])
    router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])
    router.include_router(gifts.router, prefix="/gifts", tags=["gifts"])
    router.include_router(admin.router, prefix="/admin", tags=["admin"])
    return router


__all__ = [
    "create_api_router",
]
