"""Tests for the recipe book service."""

import asyncio
from uuid import uuid4

from smart_pantry.services.generation import RecipeGenerationService
from smart_pantry.services.recipes import MAX_LIST_LIMIT, RecipeBookService
from tests.conftest import USER_ID, InMemoryRecipeRepository


def test_list_recipes_is_scoped_to_user(
    generation_service: RecipeGenerationService,
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    other_user = uuid4()
    asyncio.run(generation_service.generate(["egg"], [], [], USER_ID))
    asyncio.run(generation_service.generate(["rice"], [], [], other_user))
    service = RecipeBookService(recipe_repository)

    recipes = service.list_recipes(USER_ID)

    assert len(recipes) == 1
    assert recipes[0].user_id == USER_ID


def test_list_recipes_bounds_limit() -> None:
    seen: list[int] = []

    class RecordingRepository(InMemoryRecipeRepository):
        def list_recipes(self, user_id, limit):  # type: ignore[no-untyped-def]
            seen.append(limit)
            return []

    service = RecipeBookService(RecordingRepository())
    service.list_recipes(USER_ID, limit=0)
    service.list_recipes(USER_ID, limit=10_000)

    assert seen == [1, MAX_LIST_LIMIT]


def test_get_recipe_missing_returns_none(
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    service = RecipeBookService(recipe_repository)

    assert service.get_recipe(uuid4()) is None
