"""Recipe generation pipeline: prompt, model call, parse, persist."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from smart_pantry.domain.generation import GenerationError, GenerationErrorKind
from smart_pantry.domain.recipes import Recipe

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional chef assistant. "
    "Always respond with valid JSON containing recipe data."
)

RECIPE_JSON_EXAMPLE = """{
  "title": "Recipe name",
  "description": "Brief description",
  "ingredients": ["ingredient 1", "ingredient 2"],
  "instructions": ["step 1", "step 2"],
  "cookTime": 30,
  "servings": 4,
  "difficulty": "Easy",
  "cuisineType": "Italian"
}"""


class CompletionError(Exception):
    """Raised when the language-model endpoint does not return a completion."""


class RecipeStoreError(Exception):
    """Raised when the recipe store rejects a write."""


class CompletionClient(Protocol):
    """Interface for a chat-completion endpoint."""

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        prompt: str,
    ) -> str:
        """Return the text content of the single completion choice."""


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Insert a recipe row and return it as stored."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def list_recipes(self, user_id: UUID, limit: int) -> list[Recipe]:
        """Return a user's recipes, newest first."""


def build_prompt(
    ingredients: list[str],
    dietary_preferences: list[str],
    cuisine_types: list[str],
) -> str:
    """Build the user prompt describing the requested recipe."""
    dietary = ", ".join(dietary_preferences) or "None"
    cuisines = ", ".join(cuisine_types) or "Any"
    return (
        "Create a detailed recipe using these ingredients: "
        f"{', '.join(ingredients)}.\n\n"
        f"Dietary preferences: {dietary}\n"
        f"Cuisine types: {cuisines}\n\n"
        "Please provide a JSON response with exactly this structure:\n"
        f"{RECIPE_JSON_EXAMPLE}\n\n"
        "Make sure all ingredients from the input are used, "
        "and the recipe is realistic and delicious."
    )


@dataclass
class RecipeGenerationService:
    """Stateless handler turning preferences into one persisted recipe.

    ``client`` is ``None`` when no language-model credential is configured;
    every call then fails before any network or store access.
    """

    client: CompletionClient | None
    repository: RecipeRepository
    model: str
    temperature: float = 0.7

    async def generate(
        self,
        ingredients: list[str],
        dietary_preferences: list[str],
        cuisine_types: list[str],
        user_id: UUID,
    ) -> Recipe | GenerationError:
        """Generate, persist and return a recipe, or the reason it failed."""
        if self.client is None:
            return GenerationError(
                GenerationErrorKind.CONFIGURATION, "OpenAI API key not configured"
            )

        logger.info("Generating recipe for user", extra={"user_id": str(user_id)})
        prompt = build_prompt(ingredients, dietary_preferences, cuisine_types)
        try:
            content = await self.client.complete(
                model=self.model,
                temperature=self.temperature,
                system_prompt=SYSTEM_PROMPT,
                prompt=prompt,
            )
        except CompletionError as exc:
            logger.warning("Completion request failed: %s", exc)
            return GenerationError(
                GenerationErrorKind.UPSTREAM, f"OpenAI API error: {exc}"
            )

        recipe_data = _parse_recipe_content(content)
        if recipe_data is None:
            logger.error("Failed to parse recipe JSON: %s", content)
            return GenerationError(
                GenerationErrorKind.FORMAT, "Invalid recipe format received from AI"
            )

        payload = _recipe_payload(recipe_data, dietary_preferences, user_id)
        try:
            recipe = self.repository.create_recipe(payload)
        except RecipeStoreError as exc:
            logger.error("Error saving recipe: %s", exc)
            return GenerationError(
                GenerationErrorKind.PERSISTENCE, "Failed to save recipe"
            )

        logger.info("Recipe saved", extra={"recipe_id": str(recipe.id)})
        return recipe


def _parse_recipe_content(content: str) -> dict[str, object] | None:
    """Decode the model reply; anything but an object with a title is rejected."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        return None
    return data


def _recipe_payload(
    data: dict[str, object], dietary_preferences: list[str], user_id: UUID
) -> dict[str, object]:
    """Map the model's camelCase fields onto recipes table columns."""
    return {
        "user_id": str(user_id),
        "title": data.get("title"),
        "description": data.get("description"),
        "ingredients": data.get("ingredients"),
        "instructions": data.get("instructions"),
        "cook_time": data.get("cookTime"),
        "servings": data.get("servings"),
        "difficulty": data.get("difficulty"),
        "cuisine_type": data.get("cuisineType"),
        "dietary_tags": list(dietary_preferences),
        "is_ai_generated": True,
    }
