"""SQLAlchemy implementation for ledger accounts."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from economy.db.models import Account


class SqlAccountRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_account(self, account_id: str) -> Account | None:
        stmt = select(Account).where(Account.id == account_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create_account(self, account_id: str, balance: int) -> Account:
        account = Account(id=account_id, balance=balance)
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def apply_delta(self, account_id: str, delta: int) -> int | None:
        # The guard and the write are one statement, so concurrent debits cannot
        # both pass against the same starting balance.
        stmt = (
            update(Account)
            .where(Account.id == account_id, Account.balance + delta >= 0)
            .values(balance=Account.balance + delta)
            .returning(Account.balance)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def lock_account(self, account_id: str) -> bool:
        stmt = select(Account.id).where(Account.id == account_id).with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
