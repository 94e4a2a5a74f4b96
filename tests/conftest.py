"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from smart_pantry.config import Settings
from smart_pantry.containers import AppContainer
from smart_pantry.domain.recipes import Recipe, recipe_from_row
from smart_pantry.services.generation import (
    CompletionClient,
    CompletionError,
    RecipeGenerationService,
    RecipeRepository,
    RecipeStoreError,
)
from smart_pantry.services.recipes import RecipeBookService

USER_ID = UUID("5b0c5a52-3a0e-4c1f-9d6f-0c9c3f1f2a11")

RECIPE_REPLY: dict[str, object] = {
    "title": "Tomato Basil Bruschetta",
    "description": "Toasted bread topped with fresh tomato and basil.",
    "ingredients": ["2 tomatoes", "1 bunch basil", "1 baguette"],
    "instructions": ["Dice the tomatoes", "Tear the basil", "Toast and top"],
    "cookTime": 15,
    "servings": 4,
    "difficulty": "Easy",
    "cuisineType": "Italian",
}


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client that records prompts."""

    content: str = field(default_factory=lambda: json.dumps(RECIPE_REPLY))
    error: str | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        prompt: str,
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "temperature": temperature,
                "system_prompt": system_prompt,
                "prompt": prompt,
            }
        )
        if self.error is not None:
            raise CompletionError(self.error)
        return self.content


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    rows: dict[UUID, dict[str, object]] = field(default_factory=dict)
    fail_inserts: bool = False
    extra_columns: dict[str, object] = field(default_factory=dict)

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        if self.fail_inserts:
            raise RecipeStoreError("insert rejected")
        recipe_id = uuid4()
        row = {
            "id": str(recipe_id),
            "created_at": datetime.now(tz=UTC).isoformat(),
            **self.extra_columns,
            **payload,
        }
        self.rows[recipe_id] = row
        return recipe_from_row(row)

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        row = self.rows.get(recipe_id)
        return recipe_from_row(row) if row else None

    def list_recipes(self, user_id: UUID, limit: int) -> list[Recipe]:
        recipes = [
            recipe_from_row(row)
            for row in self.rows.values()
            if row["user_id"] == str(user_id)
        ]
        recipes.sort(key=lambda recipe: recipe.created_at, reverse=True)
        return recipes[:limit]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_anon_key="header.payload.signature",
        openai_api_key="openai-key",
    )


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def generation_service(
    settings: Settings,
    completion_client: FakeCompletionClient,
    recipe_repository: InMemoryRecipeRepository,
) -> RecipeGenerationService:
    return RecipeGenerationService(
        client=completion_client,
        repository=recipe_repository,
        model=settings.openai_model,
        temperature=settings.openai_temperature,
    )


@pytest.fixture
def container(
    settings: Settings,
    generation_service: RecipeGenerationService,
    recipe_repository: InMemoryRecipeRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        generation_service=generation_service,
        recipe_book_service=RecipeBookService(recipe_repository),
        close_resources=close_resources,
    )
