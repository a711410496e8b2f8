"""Gift escrow exports"""

from .escrow import GiftEscrow
from .exceptions import (
    AlreadyResolvedError,
    GiftError,
    GiftExpiredError,
    GiftNotFoundError,
    InvalidGiftError,
    NoChannelError,
    NotYourGiftError,
)
from .models import EscrowedItem, Gift, GiftKind, GiftRequest, GiftStatus, ItemGift, MoneyGift
from .service import DEFAULT_GIFT_WINDOW, GiftService

__all__ = [
    "AlreadyResolvedError",
    "DEFAULT_GIFT_WINDOW",
    "EscrowedItem",
    "Gift",
    "GiftError",
    "GiftEscrow",
    "GiftExpiredError",
    "GiftKind",
    "GiftNotFoundError",
    "GiftRequest",
    "GiftService",
    "GiftStatus",
    "InvalidGiftError",
    "ItemGift",
    "MoneyGift",
    "NoChannelError",
    "NotYourGiftError",
]
