"""Catalog adapter protocol consumed by the economy core."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .models import CatalogItem


class CatalogAdapter(Protocol):
    """Read-only source of item definitions."""

    async def get_item(self, item_id: str) -> CatalogItem | None:
        ...

    async def list_items(self) -> Sequence[CatalogItem]:
        ...


CatalogFactory = Callable[[AsyncSession], CatalogAdapter]
