"""Fridge ledger: manual stock entries plus rows synced from checked grocery items."""

import logging
from datetime import date
from typing import Any

from src.config import get_settings
from src.models.fridge import FridgeItem
from src.models.grocery import GroceryItem
from src.repositories.fridge import FridgeRepository
from src.services.exceptions import NotFound
from src.services.ledger import apply_changes, validate_changes, validate_name, validate_quantity
from src.services.name_key import clean_text, make_name_key
from src.services.pantry_service import PantryService

logger = logging.getLogger(__name__)


class FridgeService:
    """Service for fridge-related operations."""

    def __init__(self, pantry_service: PantryService, repository: FridgeRepository):
        self.pantry_service = pantry_service
        self.repository = repository
        self.settings = get_settings()

    def list_for_user(self, user_id: int) -> list[FridgeItem]:
        return self.repository.list_for_user(user_id)

    def get(self, user_id: int, item_id: int) -> FridgeItem:
        item = self.repository.get(user_id, item_id)
        if not item:
            raise NotFound("Fridge item", item_id)
        return item

    def create(
        self,
        user_id: int,
        name: str,
        quantity: float | None = None,
        unit: str | None = None,
        brand: str | None = None,
        label: str | None = None,
        expiration_date: date | None = None,
    ) -> FridgeItem:
        """Add an item to the fridge by hand."""
        display_name = validate_name(name)
        quantity = validate_quantity(
            self.settings.default_quantity if quantity is None else quantity
        )
        unit = clean_text(unit) or self.settings.default_unit
        brand = clean_text(brand)
        label = clean_text(label)

        pantry_item = self.pantry_service.resolve(
            user_id, name, brand=brand, label=label, default_unit=unit
        )

        item = FridgeItem(
            user_id=user_id,
            pantry_item_id=pantry_item.id,
            name=display_name,
            name_key=make_name_key(name),
            quantity=quantity,
            unit=unit,
            brand=brand or pantry_item.brand,
            label=label,
            expiration_date=expiration_date,
            added_from_grocery_item_id=None,
            added_manually=True,
        )
        return self.repository.insert(item)

    def update(self, user_id: int, item_id: int, changes: dict[str, Any]) -> FridgeItem:
        """Apply the fields present in ``changes``; the pantry link never moves."""
        cleaned = validate_changes(changes)
        item = self.get(user_id, item_id)
        apply_changes(item, cleaned)
        return self.repository.save(item)

    def delete(self, user_id: int, item_id: int) -> FridgeItem:
        item = self.get(user_id, item_id)
        return self.repository.delete(item)

    # --- Grocery sync helpers ---

    def find_by_grocery_link(self, user_id: int, grocery_id: int) -> FridgeItem | None:
        return self.repository.find_by_grocery_link(user_id, grocery_id)

    def create_from_grocery(self, grocery_item: GroceryItem) -> FridgeItem:
        """Copy a checked grocery row into the fridge, reusing its pantry reference."""
        item = FridgeItem(
            user_id=grocery_item.user_id,
            pantry_item_id=grocery_item.pantry_item_id,
            name=grocery_item.name,
            name_key=grocery_item.name_key,
            quantity=grocery_item.quantity,
            unit=grocery_item.unit,
            brand=grocery_item.brand,
            label=grocery_item.label,
            expiration_date=grocery_item.expiration_date,
            added_from_grocery_item_id=grocery_item.id,
            added_manually=False,
        )
        created = self.repository.insert(item)
        logger.info(f"Synced grocery item {grocery_item.id} into fridge item {created.id}")
        return created

    def delete_linked_to(self, user_id: int, grocery_id: int) -> FridgeItem | None:
        """Remove the row synced from ``grocery_id``; manual rows are never touched."""
        item = self.repository.find_synced(user_id, grocery_id)
        if not item:
            return None
        self.repository.delete(item)
        logger.info(f"Removed fridge item {item.id} synced from grocery item {grocery_id}")
        return item

    def detach_from_grocery(self, user_id: int, grocery_id: int) -> FridgeItem | None:
        """Keep the synced row as stock but drop its link to ``grocery_id``."""
        item = self.repository.find_by_grocery_link(user_id, grocery_id)
        if not item:
            return None
        item.added_from_grocery_item_id = None
        self.repository.save(item)
        logger.info(f"Detached fridge item {item.id} from grocery item {grocery_id}")
        return item
