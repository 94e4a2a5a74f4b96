"""UI-side state for one recipe generator session."""

from dataclasses import dataclass, field

from smart_pantry.client.request_client import RecipeRequester, RequestFailure
from smart_pantry.domain.preferences import Preferences
from smart_pantry.domain.recipes import Recipe


@dataclass
class GeneratorSession:
    """Holds selections, the in-flight flag and the latest result."""

    preferences: Preferences = field(default_factory=Preferences)
    is_generating: bool = False
    recipe: Recipe | None = None
    error_message: str | None = None

    @property
    def can_submit(self) -> bool:
        """Return true when a new request may be started."""
        return self.preferences.can_submit and not self.is_generating

    async def submit(
        self, client: RecipeRequester, user_id: str
    ) -> Recipe | RequestFailure | None:
        """Run one generation request; returns None when submission is blocked."""
        if not self.can_submit:
            return None
        self.is_generating = True
        try:
            result = await client.generate(self.preferences, user_id)
        finally:
            self.is_generating = False

        if isinstance(result, RequestFailure):
            self.error_message = result.message
        else:
            self.recipe = result
            self.error_message = None
        return result
