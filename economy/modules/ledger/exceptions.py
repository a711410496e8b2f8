"""Ledger specific exceptions."""

from economy.modules.common.exceptions import EconomyError


class LedgerError(EconomyError):
    """Base class for ledger errors."""


class InsufficientFundsError(LedgerError):
    """Balance is too low for the requested debit."""

    code = "insufficient_funds"

    def __init__(self, account_id: str, delta: int) -> None:
        super().__init__(f"Insufficient funds on account {account_id} for adjustment {delta}")
        self.account_id = account_id
        self.delta = delta


class AccountNotFoundError(LedgerError):
    """The requested account does not exist."""

    code = "account_not_found"

    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account not found: {account_id}")
        self.account_id = account_id
