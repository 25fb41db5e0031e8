"""Fridge item store access."""

from src.models.fridge import FridgeItem
from src.repositories.base import Repository


class FridgeRepository(Repository):
    def get(self, user_id: int, item_id: int) -> FridgeItem | None:
        return (
            self.db.query(FridgeItem)
            .filter(FridgeItem.id == item_id, FridgeItem.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: int) -> list[FridgeItem]:
        """Oldest entries first."""
        return (
            self.db.query(FridgeItem)
            .filter(FridgeItem.user_id == user_id)
            .order_by(FridgeItem.created_at, FridgeItem.id)
            .all()
        )

    def find_by_grocery_link(self, user_id: int, grocery_id: int) -> FridgeItem | None:
        return (
            self.db.query(FridgeItem)
            .filter(
                FridgeItem.user_id == user_id,
                FridgeItem.added_from_grocery_item_id == grocery_id,
            )
            .first()
        )

    def find_synced(self, user_id: int, grocery_id: int) -> FridgeItem | None:
        """Like find_by_grocery_link, but never returns a manually added row."""
        return (
            self.db.query(FridgeItem)
            .filter(
                FridgeItem.user_id == user_id,
                FridgeItem.added_from_grocery_item_id == grocery_id,
                FridgeItem.added_manually.is_(False),
            )
            .first()
        )
