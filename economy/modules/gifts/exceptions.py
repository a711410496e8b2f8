"""Gift escrow specific exceptions."""

from economy.modules.common.exceptions import EconomyError


class GiftError(EconomyError):
    """Base class for gift escrow errors."""


class GiftNotFoundError(GiftError):
    """No gift with this id."""

    code = "gift_not_found"

    def __init__(self, gift_id: str) -> None:
        super().__init__(f"Gift not found: {gift_id}")
        self.gift_id = gift_id


class InvalidGiftError(GiftError):
    """The gift payload is malformed."""

    code = "invalid_gift"


class NoChannelError(GiftError):
    """Sender and receiver may not exchange gifts."""

    code = "no_channel"

    def __init__(self, sender_id: str, receiver_id: str) -> None:
        super().__init__(f"Account {sender_id} cannot send gifts to {receiver_id}")
        self.sender_id = sender_id
        self.receiver_id = receiver_id


class NotYourGiftError(GiftError):
    """The caller is not the party allowed to act on this gift."""

    code = "not_your_gift"

    def __init__(self, gift_id: str, account_id: str) -> None:
        super().__init__(f"Gift {gift_id} does not belong to account {account_id}")
        self.gift_id = gift_id
        self.account_id = account_id


class AlreadyResolvedError(GiftError):
    """The gift already reached a terminal state."""

    code = "already_resolved"

    def __init__(self, gift_id: str, status: str) -> None:
        super().__init__(f"Gift {gift_id} is already {status.lower()}")
        self.gift_id = gift_id
        self.status = status


class GiftExpiredError(GiftError):
    """The gift expired and its value went back to the sender."""

    code = "gift_expired"

    def __init__(self, gift_id: str) -> None:
        super().__init__(f"Gift {gift_id} has expired and was returned")
        self.gift_id = gift_id
