"""Grocery to fridge synchronization driven by the checked flag."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.models.fridge import FridgeItem
from src.models.grocery import GroceryItem
from src.services.exceptions import ConflictRetry, SyncError
from src.services.fridge_service import FridgeService

logger = logging.getLogger(__name__)


class GrocerySyncService:
    """Keeps exactly one synced fridge row per checked grocery item.

    checked   -> ensure a linked fridge row exists (an existing link is reused)
    unchecked -> remove the linked fridge row (a missing one is already fine)
    """

    def __init__(self, fridge_service: FridgeService):
        self.fridge_service = fridge_service

    def sync(self, grocery_item: GroceryItem) -> FridgeItem | None:
        """Bring the fridge in line with ``grocery_item.checked``.

        Returns the linked fridge row when checked, else the removed row (or None).
        Store failures are raised as SyncError; the grocery row is left as saved.
        """
        grocery_id, user_id, checked = grocery_item.id, grocery_item.user_id, grocery_item.checked
        try:
            if checked:
                return self._ensure_linked(grocery_item)
            return self.fridge_service.delete_linked_to(user_id, grocery_id)
        except (SQLAlchemyError, ConflictRetry) as exc:
            logger.error(
                f"Fridge sync failed for grocery item {grocery_id} (checked={checked})",
                exc_info=True,
            )
            raise SyncError(grocery_item, "Grocery item updated but fridge sync failed") from exc

    def _ensure_linked(self, grocery_item: GroceryItem) -> FridgeItem:
        existing = self.fridge_service.find_by_grocery_link(grocery_item.user_id, grocery_item.id)
        if existing:
            return existing
        try:
            return self.fridge_service.create_from_grocery(grocery_item)
        except ConflictRetry:
            # A concurrent toggle created the link between our lookup and insert
            linked = self.fridge_service.find_by_grocery_link(grocery_item.user_id, grocery_item.id)
            if linked is None:
                raise
            return linked

    def release(self, grocery_item: GroceryItem) -> FridgeItem | None:
        """Drop the link from a synced fridge row back to ``grocery_item``.

        Used when a checked grocery row goes back on the list for a new purchase:
        the stock already in the fridge stays, the next check-off creates a new row.
        """
        grocery_id, user_id = grocery_item.id, grocery_item.user_id
        try:
            return self.fridge_service.detach_from_grocery(user_id, grocery_id)
        except SQLAlchemyError as exc:
            logger.error(f"Releasing fridge link for grocery item {grocery_id} failed", exc_info=True)
            raise SyncError(grocery_item, "Could not release fridge link") from exc
