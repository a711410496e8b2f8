"""Balance and purchase history of the signed-in account."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from economy.core.config import Settings
from economy.core.security import get_current_account_id
from economy.infrastructure.database.session import Database
from economy.interfaces.http.deps import get_app_settings, get_database, get_store_service
from economy.modules.ledger import LedgerService
from economy.modules.store import StoreService
from economy.schemas import PurchaseListResponse, PurchaseResponse, WalletResponse

router = APIRouter()


@router.get("", response_model=WalletResponse, summary="Current balance")
async def get_wallet(
    account_id: str = Depends(get_current_account_id),
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
) -> WalletResponse:
    async with database.transaction() as session:
        balance = await LedgerService.with_session(session).get_balance(account_id)
    return WalletResponse(account_id=account_id, balance=balance, currency=settings.economy.currency_label)


@router.get("/purchases", response_model=PurchaseListResponse, summary="Store purchase history")
async def list_purchases(
    limit: int = 20,
    offset: int = 0,
    account_id: str = Depends(get_current_account_id),
    store: StoreService = Depends(get_store_service),
) -> PurchaseListResponse:
    purchases = await store.list_purchases(account_id, limit, offset)
    return PurchaseListResponse(purchases=[PurchaseResponse.model_validate(p) for p in purchases])
