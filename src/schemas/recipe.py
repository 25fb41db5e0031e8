"""Recipe schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import AvailabilityStatus
from src.schemas.grocery import GroceryItemResponse

# --- Recipe Ingredient ---


class RecipeIngredientCreate(BaseModel):
    """Recipe ingredient as submitted; blank names are dropped on save."""

    name: str = Field(..., max_length=255)
    quantity: float | None = Field(None, gt=0)
    unit: str | None = Field(None, max_length=50)
    label: str | None = Field(None, max_length=100)
    brand: str | None = Field(None, max_length=255)
    note: str | None = Field(None, max_length=500)


class AvailabilityResponse(BaseModel):
    """Where an ingredient is available, with ids for deep links."""

    model_config = ConfigDict(from_attributes=True)

    status: AvailabilityStatus
    fridge_item_id: int | None = None
    grocery_item_id: int | None = None


class RecipeIngredientResponse(BaseModel):
    """Recipe ingredient response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    position: int
    name: str
    quantity: float | None
    unit: str | None
    label: str | None
    brand: str | None
    note: str | None
    pantry_item_id: int | None
    name_key: str | None
    availability: AvailabilityResponse | None = None  # Only set on availability reads


# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    title: str = Field(..., max_length=255)
    description: str | None = Field(None, max_length=5000)
    photo_url: str | None = Field(None, max_length=2000)
    prep_time_minutes: int | None = Field(None, ge=0)
    cook_time_minutes: int | None = Field(None, ge=0)
    ingredients: list[RecipeIngredientCreate] = []
    steps: list[str] = []
    tags: list[str] = []
    source_url: str | None = Field(None, max_length=2000)


class RecipeUpdate(BaseModel):
    """Update a recipe; only fields sent are applied, ingredients are replaced wholesale."""

    title: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=5000)
    photo_url: str | None = Field(None, max_length=2000)
    prep_time_minutes: int | None = Field(None, ge=0)
    cook_time_minutes: int | None = Field(None, ge=0)
    ingredients: list[RecipeIngredientCreate] | None = None
    steps: list[str] | None = None
    tags: list[str] | None = None
    source_url: str | None = Field(None, max_length=2000)


class RecipeResponse(BaseModel):
    """Recipe response with ingredients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str
    photo_url: str | None
    prep_time_minutes: int | None
    cook_time_minutes: int | None
    ingredients: list[RecipeIngredientResponse]
    steps: list[str]
    tags: list[str]
    source_url: str | None
    created_at: datetime
    updated_at: datetime


class AddToGroceryResponse(BaseModel):
    """Grocery rows created or updated from a recipe."""

    added_count: int
    items: list[GroceryItemResponse]
    synced: bool = True
    sync_errors: list[str] = []
