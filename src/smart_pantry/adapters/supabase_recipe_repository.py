"""Supabase-backed recipe repository."""

from dataclasses import dataclass
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from smart_pantry.domain.recipes import Recipe, recipe_from_row
from smart_pantry.services.generation import RecipeRepository, RecipeStoreError

RECIPES_TABLE = "recipes"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipe persistence.

    Every store failure, including transport errors and rows that cannot be
    parsed, surfaces as ``RecipeStoreError``.
    """

    client: Client

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Insert a recipe row and return the stored row."""
        rows = _execute(self.client.table(RECIPES_TABLE).insert(payload))
        if not rows:
            raise RecipeStoreError("Insert returned no rows")
        return _parse_row(rows[0])

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        rows = _execute(
            self.client.table(RECIPES_TABLE)
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
        )
        if not rows:
            return None
        return _parse_row(rows[0])

    def list_recipes(self, user_id: UUID, limit: int) -> list[Recipe]:
        """Return a user's recipes, newest first."""
        rows = _execute(
            self.client.table(RECIPES_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
        )
        return [_parse_row(row) for row in rows]


def _execute(query) -> list[dict[str, object]]:  # type: ignore[no-untyped-def]
    """Run a query builder and return its rows."""
    try:
        response = query.execute()
    except APIError as exc:
        raise RecipeStoreError(exc.message or str(exc)) from exc
    except httpx.HTTPError as exc:
        raise RecipeStoreError(f"Recipe store unreachable: {exc}") from exc
    return response.data or []


def _parse_row(row: dict[str, object]) -> Recipe:
    try:
        return recipe_from_row(row)
    except (KeyError, TypeError, ValueError) as exc:
        raise RecipeStoreError(f"Malformed recipe row: {exc!r}") from exc
