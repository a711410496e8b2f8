"""Repository protocol for ledger balances."""

from __future__ import annotations

from typing import Protocol

from economy.db.models import Account as AccountModel


class AccountRepository(Protocol):
    async def get_account(self, account_id: str) -> AccountModel | None:
        ...

    async def create_account(self, account_id: str, balance: int) -> AccountModel:
        ...

    async def apply_delta(self, account_id: str, delta: int) -> int | None:
        """Apply ``delta`` only if the result stays non-negative; return the new balance or None."""
        ...

    async def lock_account(self, account_id: str) -> bool:
        ...
