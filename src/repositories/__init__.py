"""Per-entity store access, one repository per table, built from a Session."""

from src.repositories.fridge import FridgeRepository
from src.repositories.grocery import GroceryRepository
from src.repositories.pantry import PantryRepository
from src.repositories.recipe import RecipeRepository

__all__ = [
    "PantryRepository",
    "GroceryRepository",
    "FridgeRepository",
    "RecipeRepository",
]
