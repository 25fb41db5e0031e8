"""Pydantic schemas for API requests and responses."""

from src.schemas.fridge import FridgeItemCreate, FridgeItemResponse, FridgeItemUpdate
from src.schemas.grocery import (
    GroceryItemCreate,
    GroceryItemResponse,
    GroceryItemUpdate,
    GroceryToggleResponse,
)
from src.schemas.ledger import DeletedResponse
from src.schemas.pantry import PantryItemResponse
from src.schemas.recipe import (
    AddToGroceryResponse,
    RecipeCreate,
    RecipeResponse,
    RecipeUpdate,
)

__all__ = [
    "DeletedResponse",
    "GroceryItemCreate",
    "GroceryItemUpdate",
    "GroceryItemResponse",
    "GroceryToggleResponse",
    "FridgeItemCreate",
    "FridgeItemUpdate",
    "FridgeItemResponse",
    "PantryItemResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "AddToGroceryResponse",
]
