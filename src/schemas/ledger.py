"""Request schemas shared by the grocery and fridge ledgers."""

from datetime import date

from pydantic import BaseModel, Field


class LedgerItemCreate(BaseModel):
    """Create a grocery or fridge entry."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: float | None = Field(None, gt=0)  # Defaults to 1
    unit: str | None = Field(None, max_length=50)  # Defaults to "piece"
    brand: str | None = Field(None, max_length=255)
    label: str | None = Field(None, max_length=100)
    expiration_date: date | None = None


class LedgerItemUpdate(BaseModel):
    """Partial update: only fields sent by the client are applied.

    Read with ``model_dump(exclude_unset=True)`` so an omitted field is left
    alone while an explicit null clears brand, label or expiration_date.
    """

    name: str | None = Field(None, max_length=255)
    quantity: float | None = Field(None, gt=0)
    unit: str | None = Field(None, max_length=50)
    brand: str | None = Field(None, max_length=255)
    label: str | None = Field(None, max_length=100)
    expiration_date: date | None = None


class DeletedResponse(BaseModel):
    """Acknowledgement of a deleted record."""

    message: str = "Deleted"
    id: int
