"""Gift escrow endpoints."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from economy.core.security import get_current_account_id
from economy.interfaces.http.deps import get_gift_service
from economy.interfaces.http.presenters import gift_response
from economy.modules.gifts import GiftService, GiftStatus, ItemGift, MoneyGift
from economy.schemas import GiftCreateRequest, GiftListResponse, GiftResponse, MoneyGiftPayload

router = APIRouter()


@router.post("", response_model=GiftResponse, status_code=status.HTTP_201_CREATED, summary="Send a gift")
async def send_gift(
    payload: GiftCreateRequest,
    account_id: str = Depends(get_current_account_id),
    gifts: GiftService = Depends(get_gift_service),
) -> GiftResponse:
    if isinstance(payload.payload, MoneyGiftPayload):
        request = MoneyGift(amount=payload.payload.amount)
    else:
        request = ItemGift(item_id=payload.payload.item_id)
    gift = await gifts.send(account_id, payload.receiver_id, request)
    return gift_response(gift)


@router.get("/received", response_model=GiftListResponse, summary="Gifts sent to me")
async def list_received_gifts(
    status_filter: Optional[GiftStatus] = Query(default=None, alias="status"),
    limit: int = 20,
    offset: int = 0,
    account_id: str = Depends(get_current_account_id),
    gifts: GiftService = Depends(get_gift_service),
) -> GiftListResponse:
    records = await gifts.list_received(account_id, status_filter, limit, offset)
    return GiftListResponse(gifts=[gift_response(gift) for gift in records])


@router.get("/sent", response_model=GiftListResponse, summary="Gifts I sent")
async def list_sent_gifts(
    status_filter: Optional[GiftStatus] = Query(default=None, alias="status"),
    limit: int = 20,
    offset: int = 0,
    account_id: str = Depends(get_current_account_id),
    gifts: GiftService = Depends(get_gift_service),
) -> GiftListResponse:
    records = await gifts.list_sent(account_id, status_filter, limit, offset)
    return GiftListResponse(gifts=[gift_response(gift) for gift in records])


@router.get("/{gift_id}", response_model=GiftResponse, summary="Gift detail")
async def get_gift(
    gift_id: str,
    account_id: str = Depends(get_current_account_id),
    gifts: GiftService = Depends(get_gift_service),
) -> GiftResponse:
    return gift_response(await gifts.get_gift(gift_id, account_id))


@router.post("/{gift_id}/accept", response_model=GiftResponse, summary="Accept a pending gift")
async def accept_gift(
    gift_id: str,
    account_id: str = Depends(get_current_account_id),
    gifts: GiftService = Depends(get_gift_service),
) -> GiftResponse:
    return gift_response(await gifts.accept(gift_id, account_id))


@router.post("/{gift_id}/reject", response_model=GiftResponse, summary="Reject a pending gift")
async def reject_gift(
    gift_id: str,
    account_id: str = Depends(get_current_account_id),
    gifts: GiftService = Depends(get_gift_service),
) -> GiftResponse:
    return gift_response(await gifts.reject(gift_id, account_id))
