"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TokenData(BaseModel):
    account_id: str
    role: str = "user"


class ErrorResponse(BaseModel):
    code: str
    detail: str


class AccountCreate(BaseModel):
    account_id: str = Field(..., min_length=1, max_length=36)
    initial_balance: int = Field(default=0, ge=0)


class AccountResponse(BaseModel):
    id: str
    balance: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CreditRequest(BaseModel):
    amount: int = Field(..., gt=0)


class WalletResponse(BaseModel):
    account_id: str
    balance: int
    currency: str


class CatalogItemResponse(BaseModel):
    id: str
    name: str
    type: str
    rarity: str
    price: int
    description: Optional[str] = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(from_attributes=True)


class StoreListingResponse(BaseModel):
    item: CatalogItemResponse
    owned: bool
    affordable: bool


class StoreResponse(BaseModel):
    balance: int
    items: list[StoreListingResponse] = Field(default_factory=list)


class PurchaseResponse(BaseModel):
    id: str
    account_id: str
    item_id: str
    price: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PurchaseListResponse(BaseModel):
    purchases: list[PurchaseResponse] = Field(default_factory=list)


class InventoryEntryResponse(BaseModel):
    id: str
    item_id: str
    item_type: str
    equipped: bool
    acquired_at: datetime
    item: Optional[CatalogItemResponse] = None


class InventoryListResponse(BaseModel):
    total: int
    entries: list[InventoryEntryResponse] = Field(default_factory=list)


class MoneyGiftPayload(BaseModel):
    kind: Literal["MONEY"] = "MONEY"
    amount: int = Field(..., gt=0)


class ItemGiftPayload(BaseModel):
    kind: Literal["ITEM"] = "ITEM"
    item_id: str = Field(..., min_length=1)


GiftPayloadRequest = Annotated[Union[MoneyGiftPayload, ItemGiftPayload], Field(discriminator="kind")]


class GiftCreateRequest(BaseModel):
    receiver_id: str = Field(..., min_length=1)
    payload: GiftPayloadRequest


class GiftResponse(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    kind: str
    status: str
    amount: Optional[int] = None
    item_id: Optional[str] = None
    item_rarity: Optional[str] = None
    item_price: Optional[int] = None
    compensation_amount: Optional[int] = None
    created_at: datetime
    expires_at: datetime
    resolved_at: Optional[datetime] = None


class GiftListResponse(BaseModel):
    gifts: list[GiftResponse] = Field(default_factory=list)
