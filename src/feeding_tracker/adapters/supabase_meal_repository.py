"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import date, time
from uuid import UUID

from supabase import Client

from feeding_tracker.domain.meals import MealItem, MealRecord
from feeding_tracker.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def create_meal(self, baby_id: UUID, payload: dict[str, object]) -> MealRecord:
        """Create a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert({"baby_id": str(baby_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id, if present."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self, baby_id: UUID) -> list[MealRecord]:
        """Return meals for a baby, most recent first."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("baby_id", str(baby_id))
            .order("meal_date", desc=True)
            .order("meal_time", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def update_meal(
        self, meal_id: UUID, payload: dict[str, object]
    ) -> MealRecord | None:
        """Update a meal row and return it, if present."""
        response = (
            self.client.table("meals")
            .update(payload)
            .eq("id", str(meal_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()


def _parse_meal(row: dict[str, object]) -> MealRecord:
    """Parse a meals row into a domain model."""
    raw_items = row.get("items")
    items = (
        [_parse_item(item) for item in raw_items if isinstance(item, dict)]
        if isinstance(raw_items, list)
        else []
    )
    return MealRecord(
        id=UUID(str(row["id"])),
        baby_id=UUID(str(row["baby_id"])),
        meal_date=date.fromisoformat(str(row["meal_date"])[:10]),
        meal_time=time.fromisoformat(str(row["meal_time"])),
        meal_type=row.get("meal_type"),
        items=items,
        reactions=list(row.get("reactions") or []),
        notes=row.get("notes"),
    )


def _parse_item(raw: dict[str, object]) -> MealItem:
    food_id = raw.get("food_id")
    free_text = raw.get("free_text")
    return MealItem(
        portion_tag=str(raw.get("portion_tag") or ""),
        food_id=str(food_id) if food_id else None,
        free_text=str(free_text) if free_text and not food_id else None,
    )
