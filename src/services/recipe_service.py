"""Recipe service: CRUD with pantry linking, availability and add-to-grocery."""

import logging
from dataclasses import dataclass
from typing import Any

from src.config import get_settings
from src.models.grocery import GroceryItem
from src.models.recipe import Recipe, RecipeIngredient
from src.repositories.fridge import FridgeRepository
from src.repositories.recipe import RecipeRepository
from src.services.availability import AnnotatedIngredient, annotate
from src.services.exceptions import InvalidInput, NotFound, SyncError
from src.services.grocery_service import GroceryService
from src.services.name_key import clean_text, make_name_key
from src.services.pantry_service import PantryService

logger = logging.getLogger(__name__)

RECIPE_FIELDS = frozenset(
    {
        "title",
        "description",
        "photo_url",
        "prep_time_minutes",
        "cook_time_minutes",
        "ingredients",
        "steps",
        "tags",
        "source_url",
    }
)


@dataclass
class RecipeWithAvailability:
    recipe: Recipe
    ingredients: list[AnnotatedIngredient]


@dataclass
class GroceryAddResult:
    """Rows touched by adding a recipe to the grocery list.

    ``sync_errors`` lists checked rows whose fridge link could not be released;
    those rows are reported as they are, still checked.
    """

    items: list[GroceryItem]
    sync_errors: list[str]


def _clean_list(values: list[str] | None) -> list[str]:
    return [value.strip() for value in values or [] if value and value.strip()]


def _clean_ingredient(data: dict[str, Any]) -> dict[str, Any] | None:
    """Trim an ingredient payload; nameless ingredients are dropped (None)."""
    name = (data.get("name") or "").strip()
    if not make_name_key(name):
        return None
    quantity = data.get("quantity")
    if quantity is not None and quantity <= 0:
        raise InvalidInput(f"Quantity for '{name}' must be a positive number")
    return {
        "name": name,
        "quantity": quantity,
        "unit": clean_text(data.get("unit")),
        "label": clean_text(data.get("label")),
        "brand": clean_text(data.get("brand")),
        "note": clean_text(data.get("note")),
    }


def _clean_recipe(data: dict[str, Any], partial: bool = False) -> dict[str, Any]:
    unknown = set(data) - RECIPE_FIELDS
    if unknown:
        raise InvalidInput(f"Unknown recipe field(s): {', '.join(sorted(unknown))}")

    cleaned: dict[str, Any] = {}
    if "title" in data or not partial:
        title = (data.get("title") or "").strip()
        if not title:
            raise InvalidInput("Title is required")
        cleaned["title"] = title
    if "description" in data:
        cleaned["description"] = (data["description"] or "").strip()
    for field in ("photo_url", "source_url"):
        if field in data:
            cleaned[field] = clean_text(data[field])
    for field in ("prep_time_minutes", "cook_time_minutes"):
        if field in data:
            if data[field] is not None and data[field] < 0:
                raise InvalidInput(f"{field} cannot be negative")
            cleaned[field] = data[field]
    for field in ("steps", "tags"):
        if field in data:
            cleaned[field] = _clean_list(data[field])
    if "ingredients" in data:
        cleaned["ingredients"] = [
            ingredient
            for ingredient in (_clean_ingredient(raw) for raw in data["ingredients"] or [])
            if ingredient is not None
        ]

    if not partial:
        cleaned.setdefault("description", "")
        cleaned.setdefault("steps", [])
        cleaned.setdefault("tags", [])
        cleaned.setdefault("ingredients", [])
    return cleaned


class RecipeService:
    """Service for recipe-related operations."""

    def __init__(
        self,
        pantry_service: PantryService,
        repository: RecipeRepository,
        grocery_service: GroceryService,
        fridge_repository: FridgeRepository,
    ):
        self.pantry_service = pantry_service
        self.repository = repository
        self.grocery_service = grocery_service
        self.fridge_repository = fridge_repository
        self.settings = get_settings()

    def list_for_user(self, user_id: int) -> list[Recipe]:
        return self.repository.list_for_user(user_id)

    def get(self, user_id: int, recipe_id: int) -> Recipe:
        recipe = self.repository.get(user_id, recipe_id)
        if not recipe:
            raise NotFound("Recipe", recipe_id)
        return recipe

    def create(self, user_id: int, data: dict[str, Any]) -> Recipe:
        cleaned = _clean_recipe(data)
        ingredients = self._link_ingredients(user_id, cleaned.pop("ingredients"))
        recipe = Recipe(user_id=user_id, ingredients=ingredients, **cleaned)
        return self.repository.insert(recipe)

    def update(self, user_id: int, recipe_id: int, changes: dict[str, Any]) -> Recipe:
        """Apply the fields present in ``changes``; an ingredient list replaces the old one."""
        cleaned = _clean_recipe(changes, partial=True)
        recipe = self.get(user_id, recipe_id)
        # Resolve before touching the recipe: resolving commits pantry rows on its own
        if "ingredients" in cleaned:
            cleaned["ingredients"] = self._link_ingredients(user_id, cleaned["ingredients"])
        for field, value in cleaned.items():
            setattr(recipe, field, value)
        return self.repository.save(recipe)

    def delete(self, user_id: int, recipe_id: int) -> Recipe:
        recipe = self.get(user_id, recipe_id)
        return self.repository.delete(recipe)

    def _link_ingredients(
        self, user_id: int, ingredients: list[dict[str, Any]]
    ) -> list[RecipeIngredient]:
        """Resolve each ingredient to its pantry identity, the way ledger writes do."""
        linked = []
        for position, data in enumerate(ingredients):
            pantry_item = self.pantry_service.resolve(
                user_id,
                data["name"],
                brand=data["brand"],
                label=data["label"],
                default_unit=data["unit"],
            )
            linked.append(
                RecipeIngredient(
                    position=position,
                    pantry_item_id=pantry_item.id,
                    name_key=make_name_key(data["name"]),
                    **{**data, "brand": data["brand"] or pantry_item.brand},
                )
            )
        return linked

    # --- Availability ---

    def list_with_availability(self, user_id: int) -> list[RecipeWithAvailability]:
        """All recipes, each ingredient annotated against one read of both ledgers."""
        recipes = self.repository.list_for_user(user_id)
        fridge_items = self.fridge_repository.list_for_user(user_id)
        grocery_items = self.grocery_service.list_for_user(user_id)
        return [
            RecipeWithAvailability(
                recipe=recipe,
                ingredients=annotate(user_id, recipe.ingredients, fridge_items, grocery_items),
            )
            for recipe in recipes
        ]

    def get_with_availability(self, user_id: int, recipe_id: int) -> RecipeWithAvailability:
        recipe = self.get(user_id, recipe_id)
        return RecipeWithAvailability(
            recipe=recipe,
            ingredients=annotate(
                user_id,
                recipe.ingredients,
                self.fridge_repository.list_for_user(user_id),
                self.grocery_service.list_for_user(user_id),
            ),
        )

    # --- Add to grocery ---

    def add_ingredients_to_grocery(self, user_id: int, recipe_id: int) -> GroceryAddResult:
        """Put every ingredient of a recipe on the grocery list.

        An ingredient whose pantry identity already has a grocery row updates
        that row (and puts it back on the list if it was checked off); otherwise
        a new row is created. Two ingredients sharing an identity end up on the
        same row.

        A failed fridge release does not stop the remaining ingredients; it is
        reported in ``sync_errors``.
        """
        recipe = self.get(user_id, recipe_id)
        ingredients = [
            {
                "name": ingredient.name,
                "quantity": ingredient.quantity,
                "unit": ingredient.unit,
                "label": ingredient.label,
                "brand": ingredient.brand,
                "pantry_item_id": ingredient.pantry_item_id,
            }
            for ingredient in recipe.ingredients
        ]

        by_pantry_item: dict[int, GroceryItem] = {}
        for item in self.grocery_service.list_for_user(user_id):
            by_pantry_item.setdefault(item.pantry_item_id, item)

        touched: dict[int, GroceryItem] = {}
        sync_errors: list[str] = []
        for ingredient in ingredients:
            name = (ingredient["name"] or "").strip()
            if not make_name_key(name):
                continue

            pantry_item_id = ingredient["pantry_item_id"]
            if pantry_item_id is None:
                pantry_item_id = self.pantry_service.resolve(
                    user_id,
                    name,
                    brand=ingredient["brand"],
                    label=ingredient["label"],
                    default_unit=ingredient["unit"],
                ).id

            existing = by_pantry_item.get(pantry_item_id)
            if existing:
                changes = {
                    field: ingredient[field]
                    for field in ("quantity", "unit", "label", "brand")
                    if ingredient[field] is not None
                }
                try:
                    item = self.grocery_service.merge_into(existing, changes)
                except SyncError as exc:
                    item = exc.grocery_item
                    sync_errors.append(f"{item.name}: {exc}")
            else:
                item = self.grocery_service.create_linked(
                    user_id,
                    pantry_item_id,
                    name,
                    quantity=ingredient["quantity"] or self.settings.default_quantity,
                    unit=ingredient["unit"] or self.settings.default_unit,
                    brand=ingredient["brand"],
                    label=ingredient["label"],
                )
            by_pantry_item[pantry_item_id] = item
            touched[item.id] = item

        logger.info(
            f"Added recipe {recipe_id} to grocery list for user {user_id}: {len(touched)} item(s)"
        )
        return GroceryAddResult(items=list(touched.values()), sync_errors=sync_errors)
