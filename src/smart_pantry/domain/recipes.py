"""Domain models for persisted recipes."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Recipe:
    """Represents a recipe row owned by the recipe store."""

    id: UUID
    user_id: UUID
    title: str
    description: str | None
    cook_time: int | None
    servings: int | None
    difficulty: str | None
    ingredients: list[str]
    instructions: list[str]
    cuisine_type: str | None
    dietary_tags: list[str]
    is_ai_generated: bool
    created_at: datetime | None = None
    row: dict[str, object] = field(default_factory=dict, compare=False, repr=False)


def recipe_from_row(row: dict[str, object]) -> Recipe:
    """Parse a recipes table row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return Recipe(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title") or ""),
        description=row.get("description"),
        cook_time=_optional_int(row.get("cook_time")),
        servings=_optional_int(row.get("servings")),
        difficulty=row.get("difficulty"),
        ingredients=[str(item) for item in row.get("ingredients") or []],
        instructions=[str(step) for step in row.get("instructions") or []],
        cuisine_type=row.get("cuisine_type"),
        dietary_tags=[str(tag) for tag in row.get("dietary_tags") or []],
        is_ai_generated=bool(row.get("is_ai_generated", False)),
        created_at=created_at,
        row=dict(row),
    )


def recipe_to_row(recipe: Recipe) -> dict[str, object]:
    """Return the stored row, filling any column the store did not send."""
    return {
        **_domain_columns(recipe),
        **recipe.row,
    }


def _domain_columns(recipe: Recipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "user_id": str(recipe.user_id),
        "title": recipe.title,
        "description": recipe.description,
        "cook_time": recipe.cook_time,
        "servings": recipe.servings,
        "difficulty": recipe.difficulty,
        "ingredients": list(recipe.ingredients),
        "instructions": list(recipe.instructions),
        "cuisine_type": recipe.cuisine_type,
        "dietary_tags": list(recipe.dietary_tags),
        "is_ai_generated": recipe.is_ai_generated,
        "created_at": recipe.created_at.isoformat() if recipe.created_at else None,
    }


def _optional_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
