"""HTTP client for the recipe generation endpoint."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from smart_pantry.domain.preferences import Preferences
from smart_pantry.domain.recipes import Recipe, recipe_from_row

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate recipe. Please try again."


@dataclass(frozen=True)
class RequestFailure:
    """A failed generation request with a human-readable reason."""

    message: str


class RecipeRequester(Protocol):
    """Interface used by sessions to request a recipe."""

    async def generate(
        self, preferences: Preferences, user_id: str
    ) -> Recipe | RequestFailure:
        """Request one recipe for the given selections."""


@dataclass
class RecipeRequestClient:
    """Recipe request client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 60.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 60.0) -> "RecipeRequestClient":
        """Create a request client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def generate(
        self, preferences: Preferences, user_id: str
    ) -> Recipe | RequestFailure:
        """POST the selections once and map the reply to a recipe or failure."""
        url = f"{self.base_url}/generate-recipe"
        try:
            response = await self.http_client.post(
                url, json=preferences.to_request(user_id), timeout=self.timeout
            )
        except httpx.HTTPError as exc:
            logger.warning("Recipe request failed: %s", exc)
            return RequestFailure(GENERIC_FAILURE)

        if response.is_success:
            try:
                return recipe_from_row(response.json())
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                logger.warning("Unexpected recipe payload: %s", exc)
                return RequestFailure(GENERIC_FAILURE)
        return RequestFailure(_error_message(response))

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


def _error_message(response: httpx.Response) -> str:
    """Extract the service's error field, falling back to a generic message."""
    try:
        body = response.json()
    except ValueError:
        return GENERIC_FAILURE
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return GENERIC_FAILURE
