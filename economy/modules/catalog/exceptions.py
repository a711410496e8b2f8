"""Catalog specific exceptions."""

from economy.modules.common.exceptions import EconomyError


class ItemNotFoundError(EconomyError):
    """The catalog has no item with this id."""

    code = "item_not_found"

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item not found: {item_id}")
        self.item_id = item_id
