"""Pantry schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PantryItemResponse(BaseModel):
    """Canonical pantry identity."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    name_key: str
    brand: str | None
    label: str | None
    default_unit: str | None
    created_at: datetime
    updated_at: datetime
