"""Inventory endpoints: list owned items, equip and unequip."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from economy.core.security import get_current_account_id
from economy.interfaces.http.deps import get_container
from economy.interfaces.http.presenters import inventory_entry_response
from economy.modules.inventory import InventoryService, OwnedItem
from economy.schemas import InventoryEntryResponse, InventoryListResponse

router = APIRouter()


@router.get("", response_model=InventoryListResponse, summary="Owned items, newest first")
async def list_inventory(
    account_id: str = Depends(get_current_account_id),
    container=Depends(get_container),
) -> InventoryListResponse:
    async with container.database.transaction() as session:
        owned = await _inventory(container, session).list_owned_items(account_id)
    return InventoryListResponse(total=len(owned), entries=[inventory_entry_response(o) for o in owned])


@router.post("/{item_id}/equip", response_model=InventoryEntryResponse, summary="Equip an owned item")
async def equip_item(
    item_id: str,
    account_id: str = Depends(get_current_account_id),
    container=Depends(get_container),
) -> InventoryEntryResponse:
    async with container.database.transaction() as session:
        inventory = _inventory(container, session)
        entry = await inventory.equip(account_id, item_id)
        item = await inventory.catalog.get_item(item_id)
    return inventory_entry_response(OwnedItem(entry=entry, item=item))


@router.post("/{item_id}/unequip", response_model=InventoryEntryResponse, summary="Unequip an owned item")
async def unequip_item(
    item_id: str,
    account_id: str = Depends(get_current_account_id),
    container=Depends(get_container),
) -> InventoryEntryResponse:
    async with container.database.transaction() as session:
        inventory = _inventory(container, session)
        entry = await inventory.unequip(account_id, item_id)
        item = await inventory.catalog.get_item(item_id)
    return inventory_entry_response(OwnedItem(entry=entry, item=item))


def _inventory(container, session) -> InventoryService:
    return InventoryService.with_session(session, container.catalog_factory(session))
