"""Grocery item store access."""

from src.models.grocery import GroceryItem
from src.repositories.base import Repository


class GroceryRepository(Repository):
    def get(self, user_id: int, item_id: int) -> GroceryItem | None:
        return (
            self.db.query(GroceryItem)
            .filter(GroceryItem.id == item_id, GroceryItem.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: int) -> list[GroceryItem]:
        """Newest entries first."""
        return (
            self.db.query(GroceryItem)
            .filter(GroceryItem.user_id == user_id)
            .order_by(GroceryItem.created_at.desc(), GroceryItem.id.desc())
            .all()
        )
