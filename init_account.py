"""
Open an economy account for local testing.
Usage: python init_account.py [account_id] [initial_balance]
"""
import asyncio
import sys

from economy.core.config import get_settings
from economy.core.container import ApplicationContainer
from economy.core.security import create_access_token
from economy.modules.ledger import LedgerService


async def create_default_account(account_id: str, initial_balance: int):
    """Open the account (idempotent) and print a bearer token for it."""
    settings = get_settings()
    container = ApplicationContainer.from_settings(settings)
    await container.startup()

    try:
        async with container.database.transaction() as session:
            account = await LedgerService.with_session(session).open_account(account_id, initial_balance)
    finally:
        await container.shutdown()

    print(f"Account {account.id} balance: {account.balance}")
    print(f"Bearer token: {create_access_token(settings, account.id)}")


if __name__ == "__main__":
    account_id = sys.argv[1] if len(sys.argv) > 1 else "reader_001"
    initial_balance = int(sys.argv[2]) if len(sys.argv) > 2 else 100
    asyncio.run(create_default_account(account_id, initial_balance))
