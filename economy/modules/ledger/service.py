"""Ledger domain service."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import Account as AccountModel
from economy.infrastructure.database.repositories.account_repository import SqlAccountRepository

from .exceptions import AccountNotFoundError, InsufficientFundsError
from .models import AccountSnapshot
from .repository import AccountRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LedgerService:
    """Authoritative balance operations.

    Runs inside the caller's transaction; it never commits.
    """

    repository: AccountRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "LedgerService":
        return cls(SqlAccountRepository(session))

    async def open_account(self, account_id: str, initial_balance: int = 0) -> AccountSnapshot:
        if initial_balance < 0:
            raise ValueError("initial_balance must be non-negative")
        existing = await self.repository.get_account(account_id)
        if existing is not None:
            return self._to_snapshot(existing)
        logger.info("Opening account %s with balance %s", account_id, initial_balance)
        return self._to_snapshot(await self.repository.create_account(account_id, initial_balance))

    async def get_account(self, account_id: str) -> AccountSnapshot:
        account = await self.repository.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return self._to_snapshot(account)

    async def get_balance(self, account_id: str) -> int:
        return (await self.get_account(account_id)).balance

    async def adjust(self, account_id: str, delta: int) -> int:
        """Credit (positive) or debit (negative) ``account_id``; returns the new balance."""
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise TypeError("delta must be an integer amount")
        balance = await self.repository.apply_delta(account_id, delta)
        if balance is not None:
            logger.debug("Adjusted account %s by %s, balance now %s", account_id, delta, balance)
            return balance
        if await self.repository.get_account(account_id) is None:
            raise AccountNotFoundError(account_id)
        raise InsufficientFundsError(account_id, delta)

    async def credit(self, account_id: str, amount: int) -> int:
        if amount < 0:
            raise ValueError("credit amount must be non-negative")
        return await self.adjust(account_id, amount)

    async def debit(self, account_id: str, amount: int) -> int:
        if amount < 0:
            raise ValueError("debit amount must be non-negative")
        return await self.adjust(account_id, -amount)

    @staticmethod
    def _to_snapshot(model: AccountModel) -> AccountSnapshot:
        return AccountSnapshot(
            id=model.id,
            balance=model.balance,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
