"""Read access to a user's saved recipes."""

from dataclasses import dataclass
from uuid import UUID

from smart_pantry.domain.recipes import Recipe
from smart_pantry.services.generation import RecipeRepository

MAX_LIST_LIMIT = 100


@dataclass
class RecipeBookService:
    """Application service for browsing persisted recipes."""

    repository: RecipeRepository

    def list_recipes(self, user_id: UUID, limit: int = 20) -> list[Recipe]:
        """Return the user's most recent recipes."""
        bounded = max(1, min(limit, MAX_LIST_LIMIT))
        return self.repository.list_recipes(user_id, bounded)

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a single recipe, if present."""
        return self.repository.get_recipe(recipe_id)
