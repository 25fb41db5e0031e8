"""SQLAlchemy models."""

from src.models.fridge import FridgeItem
from src.models.grocery import GroceryItem
from src.models.pantry import PantryItem
from src.models.recipe import Recipe, RecipeIngredient
from src.models.user import User

__all__ = [
    "User",
    "PantryItem",
    "GroceryItem",
    "FridgeItem",
    "Recipe",
    "RecipeIngredient",
]
