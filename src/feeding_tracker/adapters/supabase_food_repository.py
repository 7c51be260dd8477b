"""Supabase implementation for the food catalog."""

from dataclasses import dataclass

from supabase import Client

from feeding_tracker.domain.foods import Food, FoodCategory
from feeding_tracker.services.safety import FoodCatalogProvider


@dataclass
class SupabaseFoodRepository(FoodCatalogProvider):
    """Supabase-backed read access to the foods table."""

    client: Client

    def list_foods(self) -> list[Food]:
        """Return all catalog foods ordered by name."""
        response = self.client.table("foods").select("*").order("name").execute()
        return [_parse_food(row) for row in response.data or []]


def _parse_food(row: dict[str, object]) -> Food:
    iron_raw = row.get("iron_mg_per_100g")
    return Food(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        category=FoodCategory.parse(row.get("category")),
        allergens=tuple(row.get("allergens") or ()),
        tags=tuple(row.get("tags") or ()),
        choking_form_notes=row.get("choking_form_notes") or None,
        iron_mg_per_100g=float(iron_raw) if iron_raw is not None else None,
    )
