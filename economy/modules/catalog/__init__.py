"""Catalog domain exports"""

from .exceptions import ItemNotFoundError
from .models import CatalogItem, CatalogItemInput, ItemType, Rarity
from .repository import CatalogAdapter, CatalogFactory
from .service import SqlCatalog, sql_catalog_factory

__all__ = [
    "CatalogAdapter",
    "CatalogFactory",
    "CatalogItem",
    "CatalogItemInput",
    "ItemNotFoundError",
    "ItemType",
    "Rarity",
    "SqlCatalog",
    "sql_catalog_factory",
]
