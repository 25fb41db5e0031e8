"""Fridge schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from src.schemas.ledger import LedgerItemCreate, LedgerItemUpdate


class FridgeItemCreate(LedgerItemCreate):
    """Add an item to the fridge manually."""


class FridgeItemUpdate(LedgerItemUpdate):
    """Update a fridge item."""


class FridgeItemResponse(BaseModel):
    """Fridge item response."""

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
    added_from_grocery_item_id: int | None
    added_manually: bool
    created_at: datetime
    updated_at: datetime
