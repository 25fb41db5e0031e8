"""Pantry item store access."""

from src.models.pantry import PantryItem
from src.repositories.base import Repository


class PantryRepository(Repository):
    """Lookups on the (user, name key, brand) identity triple."""

    def find_by_identity(self, user_id: int, name_key: str, brand: str | None) -> PantryItem | None:
        return (
            self.db.query(PantryItem)
            .filter(
                PantryItem.user_id == user_id,
                PantryItem.name_key == name_key,
                PantryItem.brand_key == (brand or ""),
            )
            .first()
        )

    def get(self, user_id: int, item_id: int) -> PantryItem | None:
        return (
            self.db.query(PantryItem)
            .filter(PantryItem.id == item_id, PantryItem.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: int) -> list[PantryItem]:
        return (
            self.db.query(PantryItem)
            .filter(PantryItem.user_id == user_id)
            .order_by(PantryItem.label.nullslast(), PantryItem.name_key, PantryItem.id)
            .all()
        )
