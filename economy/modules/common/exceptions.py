"""Error taxonomy shared by the economy modules."""


class EconomyError(Exception):
    """Base class for business errors returned to callers.

    Every subclass carries a stable ``code`` used by the HTTP layer.
    """

    code = "economy_error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.__class__.__doc__ or self.code)


class StorageUnavailableError(Exception):
    """Raised when the storage layer fails for infrastructure reasons; safe to retry."""

    code = "storage_unavailable"
