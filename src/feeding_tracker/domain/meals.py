"""Domain models for meal logging."""

from dataclasses import dataclass, field
from datetime import date, time
from uuid import UUID


@dataclass(frozen=True)
class MealItem:
    """A meal item referencing a catalog food by id or by free text."""

    portion_tag: str = ""
    food_id: str | None = None
    free_text: str | None = None

    @classmethod
    def for_food(cls, food_id: str, portion_tag: str = "taste") -> "MealItem":
        return cls(portion_tag=portion_tag, food_id=food_id)

    @classmethod
    def for_text(cls, free_text: str, portion_tag: str = "taste") -> "MealItem":
        return cls(portion_tag=portion_tag, free_text=free_text)

    def to_json(self) -> dict[str, object]:
        """Return the JSON shape stored in the meals.items column."""
        payload: dict[str, object] = {"portion_tag": self.portion_tag}
        if self.food_id:
            payload["food_id"] = self.food_id
        elif self.free_text:
            payload["free_text"] = self.free_text
        return payload


@dataclass(frozen=True)
class MealRecord:
    """A logged meal for a baby."""

    id: UUID
    baby_id: UUID
    meal_date: date
    meal_time: time
    meal_type: str | None
    items: list[MealItem] = field(default_factory=list)
    reactions: list[str] = field(default_factory=list)
    notes: str | None = None
