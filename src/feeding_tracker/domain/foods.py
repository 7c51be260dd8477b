"""Domain models for the food reference library."""

from dataclasses import dataclass
from enum import Enum


class FoodCategory(str, Enum):
    """Food category."""

    FRUIT = "fruit"
    VEGETABLE = "vegetable"
    PROTEIN = "protein"
    DAIRY = "dairy"
    GRAIN = "grain"
    SWEETENER = "sweetener"
    DRINK = "drink"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: object) -> "FoodCategory":
        """Return the category for a stored value, falling back to OTHER."""
        try:
            return cls(str(raw).lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Food:
    """Represents a catalog food entry."""

    id: str
    name: str
    category: FoodCategory
    allergens: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    choking_form_notes: str | None = None
    iron_mg_per_100g: float | None = None


@dataclass(frozen=True)
class FoodDetail:
    """Food entry with library guidance."""

    food: Food
    age_suitability: str
    nutrition_highlights: list[str]
