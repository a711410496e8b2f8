"""Map domain objects onto response schemas."""

from __future__ import annotations

from economy.modules.catalog import CatalogItem
from economy.modules.gifts import Gift, MoneyGift
from economy.modules.inventory import OwnedItem
from economy.schemas import CatalogItemResponse, GiftResponse, InventoryEntryResponse


def catalog_item_response(item: CatalogItem) -> CatalogItemResponse:
    return CatalogItemResponse(
        id=item.id,
        name=item.name,
        type=item.type.value,
        rarity=item.rarity.value,
        price=item.price,
        description=item.description,
        attributes=dict(item.attributes),
    )


def inventory_entry_response(owned: OwnedItem) -> InventoryEntryResponse:
    entry = owned.entry
    return InventoryEntryResponse(
        id=entry.id,
        item_id=entry.item_id,
        item_type=entry.item_type.value,
        equipped=entry.equipped,
        acquired_at=entry.acquired_at,
        item=catalog_item_response(owned.item) if owned.item else None,
    )


def gift_response(gift: Gift) -> GiftResponse:
    response = GiftResponse(
        id=gift.id,
        sender_id=gift.sender_id,
        receiver_id=gift.receiver_id,
        kind=gift.kind.value,
        status=gift.status.value,
        compensation_amount=gift.compensation_amount,
        created_at=gift.created_at,
        expires_at=gift.expires_at,
        resolved_at=gift.resolved_at,
    )
    if isinstance(gift.payload, MoneyGift):
        response.amount = gift.payload.amount
    else:
        response.item_id = gift.payload.item_id
        response.item_rarity = gift.payload.rarity.value if gift.payload.rarity else None
        response.item_price = gift.payload.price
    return response
