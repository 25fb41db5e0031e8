"""Recipe ingredient availability against the fridge and grocery ledgers.

Pure functions over already loaded rows: callers fetch both ledgers once and
reuse them for every recipe they annotate.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from src.models.enums import AvailabilityStatus
from src.services.name_key import make_name_key


@dataclass(frozen=True)
class IngredientAvailability:
    """Where an ingredient was found, with ids of the matching ledger rows."""

    status: AvailabilityStatus
    fridge_item_id: int | None = None
    grocery_item_id: int | None = None


@dataclass(frozen=True)
class AnnotatedIngredient:
    ingredient: Any
    availability: IngredientAvailability


MISSING = IngredientAvailability(status=AvailabilityStatus.MISSING)


def _entry_key(entry: Any) -> str:
    # Rows saved before name keys existed fall back to their display name
    return entry.name_key or make_name_key(entry.name)


def _first(entries: Iterable[Any], predicate) -> Any | None:
    return next((entry for entry in entries if predicate(entry)), None)


def _combine(fridge_match: Any | None, grocery_match: Any | None) -> IngredientAvailability:
    if fridge_match and grocery_match:
        return IngredientAvailability(
            status=AvailabilityStatus.FRIDGE_AND_GROCERY,
            fridge_item_id=fridge_match.id,
            grocery_item_id=grocery_match.id,
        )
    if fridge_match:
        return IngredientAvailability(
            status=AvailabilityStatus.FRIDGE, fridge_item_id=fridge_match.id
        )
    if grocery_match:
        return IngredientAvailability(
            status=AvailabilityStatus.GROCERY, grocery_item_id=grocery_match.id
        )
    return MISSING


def compute_availability(
    ingredient: Any,
    fridge_items: Sequence[Any],
    grocery_items: Sequence[Any],
) -> IngredientAvailability:
    """Match one ingredient, by pantry link first and by name key second.

    A pantry-link hit in either ledger settles the result; the name key is only
    consulted when the ingredient has no link or the link matched nothing.
    Duplicates resolve to the first row in ledger order.
    """
    if not make_name_key(ingredient.name):
        return MISSING

    pantry_item_id = ingredient.pantry_item_id
    if pantry_item_id is not None:
        result = _combine(
            _first(fridge_items, lambda entry: entry.pantry_item_id == pantry_item_id),
            _first(grocery_items, lambda entry: entry.pantry_item_id == pantry_item_id),
        )
        if result.status is not AvailabilityStatus.MISSING:
            return result

    key = ingredient.name_key or make_name_key(ingredient.name)
    return _combine(
        _first(fridge_items, lambda entry: _entry_key(entry) == key),
        _first(grocery_items, lambda entry: _entry_key(entry) == key),
    )


def annotate(
    user_id: int,
    ingredients: Iterable[Any],
    fridge_items: Iterable[Any],
    grocery_items: Iterable[Any],
) -> list[AnnotatedIngredient]:
    """Annotate each ingredient, in order, with its availability for ``user_id``.

    Ledger rows owned by another user are ignored.
    """
    fridge = [entry for entry in fridge_items if entry.user_id == user_id]
    grocery = [entry for entry in grocery_items if entry.user_id == user_id]
    return [
        AnnotatedIngredient(
            ingredient=ingredient,
            availability=compute_availability(ingredient, fridge, grocery),
        )
        for ingredient in ingredients
    ]
