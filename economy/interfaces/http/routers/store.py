"""Store endpoints: browse the catalog and buy items."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from economy.core.security import get_current_account_id
from economy.interfaces.http.deps import get_store_service
from economy.interfaces.http.presenters import catalog_item_response
from economy.modules.store import StoreService
from economy.schemas import PurchaseResponse, StoreListingResponse, StoreResponse

router = APIRouter()


@router.get("/items", response_model=StoreResponse, summary="Catalog with ownership and balance")
async def list_store_items(
    account_id: str = Depends(get_current_account_id),
    store: StoreService = Depends(get_store_service),
) -> StoreResponse:
    front = await store.storefront(account_id)
    return StoreResponse(
        balance=front.balance,
        items=[
            StoreListingResponse(
                item=catalog_item_response(listing.item),
                owned=listing.owned,
                affordable=listing.affordable,
            )
            for listing in front.listings
        ],
    )


@router.post(
    "/items/{item_id}/purchase",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Buy an item",
)
async def purchase_item(
    item_id: str,
    account_id: str = Depends(get_current_account_id),
    store: StoreService = Depends(get_store_service),
) -> PurchaseResponse:
    purchase = await store.purchase(account_id, item_id)
    return PurchaseResponse.model_validate(purchase)
