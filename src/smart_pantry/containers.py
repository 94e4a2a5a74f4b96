"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from smart_pantry.adapters.openai_recipe_client import OpenAIRecipeClient
from smart_pantry.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from smart_pantry.config import Settings, has_credential
from smart_pantry.services.generation import RecipeGenerationService
from smart_pantry.services.recipes import RecipeBookService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    generation_service: RecipeGenerationService
    recipe_book_service: RecipeBookService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_anon_key
    )
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    openai_client = (
        OpenAIRecipeClient.create(resolved_settings.openai_api_key)
        if has_credential(resolved_settings.openai_api_key)
        else None
    )
    generation_service = RecipeGenerationService(
        client=openai_client,
        repository=recipe_repository,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
    )
    recipe_book_service = RecipeBookService(recipe_repository)

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        generation_service=generation_service,
        recipe_book_service=recipe_book_service,
        close_resources=close_resources,
    )
