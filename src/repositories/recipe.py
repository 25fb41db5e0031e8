"""Recipe store access."""

from src.models.recipe import Recipe
from src.repositories.base import Repository


class RecipeRepository(Repository):
    def get(self, user_id: int, recipe_id: int) -> Recipe | None:
        return (
            self.db.query(Recipe)
            .filter(Recipe.id == recipe_id, Recipe.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: int) -> list[Recipe]:
        """Most recently updated first."""
        return (
            self.db.query(Recipe)
            .filter(Recipe.user_id == user_id)
            .order_by(Recipe.updated_at.desc(), Recipe.id.desc())
            .all()
        )
