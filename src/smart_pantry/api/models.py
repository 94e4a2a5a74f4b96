"""Pydantic models for the recipe API payloads."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RecipeRequest(BaseModel):
    """Generation request sent by the recipe request client."""

    model_config = ConfigDict(populate_by_name=True)

    ingredients: list[str] = Field(min_length=1)
    dietary_preferences: list[str] = Field(
        default_factory=list, alias="dietaryPreferences"
    )
    cuisine_types: list[str] = Field(default_factory=list, alias="cuisineTypes")
    user_id: UUID = Field(alias="userId")
