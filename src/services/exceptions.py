"""Domain errors raised by the inventory services."""


class InventoryError(Exception):
    """Base class for inventory service errors."""


class InvalidInput(InventoryError):
    """Empty or malformed input, rejected before any store access."""


class NotFound(InventoryError):
    """The targeted record does not exist for this user."""

    def __init__(self, entity: str, item_id: int):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.item_id = item_id


class ConflictRetry(InventoryError):
    """A unique constraint rejected an insert because another request got there first.

    Raised by repositories and absorbed by the caller with a re-fetch.
    """


class SyncError(InventoryError):
    """The fridge half of a grocery toggle failed after the checked flag was saved.

    ``grocery_item`` is the already persisted grocery row; the underlying
    failure is chained as ``__cause__``.
    """

    def __init__(self, grocery_item, message: str):
        super().__init__(message)
        self.grocery_item = grocery_item
