"""Ingredient and preference selections collected before generation."""

from dataclasses import dataclass, field

DIETARY_OPTIONS: tuple[str, ...] = (
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
    "Keto",
    "Paleo",
    "Mediterranean",
    "Low-Carb",
    "High-Protein",
    "Dairy-Free",
    "Nut-Free",
)

CUISINE_TYPES: tuple[str, ...] = (
    "Italian",
    "Mexican",
    "Asian",
    "Mediterranean",
    "Indian",
    "American",
    "French",
    "Thai",
    "Chinese",
    "Japanese",
    "Korean",
    "Spanish",
)


@dataclass
class Preferences:
    """Mutable selection state owned by a single generator session."""

    ingredients: list[str] = field(default_factory=list)
    dietary_preferences: list[str] = field(default_factory=list)
    cuisine_types: list[str] = field(default_factory=list)

    @property
    def can_submit(self) -> bool:
        """Return true when at least one ingredient has been added."""
        return bool(self.ingredients)

    def add_ingredient(self, text: str) -> bool:
        """Append a trimmed ingredient unless it is blank or already listed."""
        value = text.strip()
        if not value or value in self.ingredients:
            return False
        self.ingredients.append(value)
        return True

    def remove_ingredient(self, text: str) -> None:
        """Remove an ingredient; unknown values are ignored."""
        self.ingredients = [item for item in self.ingredients if item != text]

    def toggle_diet(self, tag: str) -> bool:
        """Toggle a dietary tag and return whether it is now selected."""
        return _toggle(self.dietary_preferences, tag, DIETARY_OPTIONS)

    def toggle_cuisine(self, tag: str) -> bool:
        """Toggle a cuisine tag and return whether it is now selected."""
        return _toggle(self.cuisine_types, tag, CUISINE_TYPES)

    def to_request(self, user_id: str) -> dict[str, object]:
        """Build the generation request body for this selection."""
        return {
            "ingredients": list(self.ingredients),
            "dietaryPreferences": list(self.dietary_preferences),
            "cuisineTypes": list(self.cuisine_types),
            "userId": user_id,
        }


def _toggle(selected: list[str], tag: str, vocabulary: tuple[str, ...]) -> bool:
    if tag not in vocabulary:
        raise ValueError(f"Unknown tag: {tag}")
    if tag in selected:
        selected.remove(tag)
        return False
    selected.append(tag)
    return True
