"""Inventory specific exceptions."""

from economy.modules.common.exceptions import EconomyError


class InventoryError(EconomyError):
    """Base class for inventory errors."""


class AlreadyOwnedError(InventoryError):
    """The account already owns this item."""

    code = "already_owned"

    def __init__(self, account_id: str, item_id: str) -> None:
        super().__init__(f"Account {account_id} already owns item {item_id}")
        self.account_id = account_id
        self.item_id = item_id


class NotOwnedError(InventoryError):
    """The account does not own this item."""

    code = "not_owned"

    def __init__(self, account_id: str, item_id: str) -> None:
        super().__init__(f"Account {account_id} does not own item {item_id}")
        self.account_id = account_id
        self.item_id = item_id
