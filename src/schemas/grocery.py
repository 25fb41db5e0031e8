"""Grocery schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from src.schemas.ledger import LedgerItemCreate, LedgerItemUpdate


class GroceryItemCreate(LedgerItemCreate):
    """Add an item to the grocery list."""


class GroceryItemUpdate(LedgerItemUpdate):
    """Update a grocery item."""


class GroceryItemResponse(BaseModel):
    """Grocery item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    pantry_item_id: int
    name: str
    name_key: str | None
    quantity: float
    unit: str
    brand: str | None
    label: str | None
    expiration_date: date | None
    checked: bool
    created_at: datetime
    updated_at: datetime


class GroceryToggleResponse(BaseModel):
    """Result of checking or unchecking a grocery item.

    ``synced`` is false when the checked flag was saved but the fridge could
    not be updated; toggling twice retries the sync.
    """

    item: GroceryItemResponse
    fridge_item_id: int | None = None
    synced: bool = True
    sync_error: str | None = None
