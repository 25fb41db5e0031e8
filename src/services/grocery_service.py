"""Grocery ledger: shopping-list entries and the checked toggle."""

import logging
from datetime import date
from typing import Any

from src.config import get_settings
from src.models.grocery import GroceryItem
from src.repositories.grocery import GroceryRepository
from src.services.exceptions import NotFound
from src.services.ledger import apply_changes, validate_changes, validate_name, validate_quantity
from src.services.name_key import clean_text, make_name_key
from src.services.pantry_service import PantryService
from src.services.sync_service import GrocerySyncService

logger = logging.getLogger(__name__)


class GroceryService:
    """Service for grocery-list operations."""

    def __init__(
        self,
        pantry_service: PantryService,
        repository: GroceryRepository,
        sync_service: GrocerySyncService,
    ):
        self.pantry_service = pantry_service
        self.repository = repository
        self.sync_service = sync_service
        self.settings = get_settings()

    def list_for_user(self, user_id: int) -> list[GroceryItem]:
        return self.repository.list_for_user(user_id)

    def get(self, user_id: int, item_id: int) -> GroceryItem:
        item = self.repository.get(user_id, item_id)
        if not item:
            raise NotFound("Grocery item", item_id)
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
    ) -> GroceryItem:
        """Add an item to the grocery list, linking it to its pantry identity."""
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
        return self.create_linked(
            user_id,
            pantry_item.id,
            display_name,
            quantity=quantity,
            unit=unit,
            brand=brand or pantry_item.brand,
            label=label,
            expiration_date=expiration_date,
        )

    def create_linked(
        self,
        user_id: int,
        pantry_item_id: int,
        name: str,
        quantity: float,
        unit: str,
        brand: str | None = None,
        label: str | None = None,
        expiration_date: date | None = None,
    ) -> GroceryItem:
        """Insert a grocery row for an already resolved pantry identity."""
        item = GroceryItem(
            user_id=user_id,
            pantry_item_id=pantry_item_id,
            name=name,
            name_key=make_name_key(name),
            quantity=quantity,
            unit=unit,
            brand=brand,
            label=label,
            expiration_date=expiration_date,
            checked=False,
        )
        return self.repository.insert(item)

    def update(self, user_id: int, item_id: int, changes: dict[str, Any]) -> GroceryItem:
        """Apply the fields present in ``changes``.

        A rename recomputes the name key but keeps the pantry link, so quantities
        already tied to the canonical item are never re-homed.
        """
        cleaned = validate_changes(changes)
        item = self.get(user_id, item_id)
        apply_changes(item, cleaned)
        return self.repository.save(item)

    def delete(self, user_id: int, item_id: int) -> GroceryItem:
        """Delete a grocery row. A fridge row synced from it stays where it is."""
        item = self.get(user_id, item_id)
        return self.repository.delete(item)

    def toggle(self, user_id: int, item_id: int) -> GroceryItem:
        """Flip ``checked``, save it, then sync the fridge.

        The flip is committed before syncing. If the fridge side fails the
        SyncError still carries the saved grocery row; toggling twice retries
        the sync in the same direction.
        """
        item = self.get(user_id, item_id)
        item.checked = not item.checked
        self.repository.save(item)
        logger.info(f"Grocery item {item.id} checked={item.checked}")

        self.sync_service.sync(item)
        return item

    def merge_into(self, item: GroceryItem, changes: dict[str, Any]) -> GroceryItem:
        """Re-add an existing row: apply ``changes`` and put it back on the list.

        A checked row is unchecked without taking stock out of the fridge: the
        synced fridge row is kept but released, so the next check-off starts a
        fresh link.
        """
        cleaned = validate_changes(changes)
        if item.checked:
            self.sync_service.release(item)
            item.checked = False
        apply_changes(item, cleaned)
        return self.repository.save(item)
