"""Ledger domain exports"""

from .exceptions import AccountNotFoundError, InsufficientFundsError, LedgerError
from .models import AccountSnapshot
from .service import LedgerService

__all__ = [
    "AccountNotFoundError",
    "AccountSnapshot",
    "InsufficientFundsError",
    "LedgerError",
    "LedgerService",
]
