"""Store domain exports"""

from .models import Purchase, StoreFront, StoreListing
from .service import StoreService

__all__ = [
    "Purchase",
    "StoreFront",
    "StoreListing",
    "StoreService",
]
