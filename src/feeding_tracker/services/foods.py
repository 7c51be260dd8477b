"""Services for browsing the food reference library."""

from dataclasses import dataclass

from feeding_tracker.domain.foods import Food, FoodCategory, FoodDetail
from feeding_tracker.services.safety import FoodCatalogProvider

HIGH_IRON_MG_PER_100G = 10

_TAG_HIGHLIGHTS = (
    ("omega-3", "Omega-3"),
    ("healthy-fat", "Healthy Fats"),
    ("iron-fortified", "Iron Fortified"),
)
_VEGETABLE_HIGHLIGHTS = (
    ("orange-vegetable", "Vitamin A"),
    ("green-vegetable", "Folate & Vitamin K"),
)


@dataclass
class FoodLibraryService:
    """Application service for the food library."""

    catalog: FoodCatalogProvider

    def search(
        self,
        query: str | None = None,
        category: FoodCategory | None = None,
        allergen_free: bool = False,
    ) -> list[Food]:
        """Filter the catalog by text, category and allergen presence.

        Text matches the food name, its category or any of its tags.
        """
        needle = (query or "").strip().lower()
        results = []
        for food in self.catalog.list_foods():
            if needle and not _matches_text(food, needle):
                continue
            if category is not None and food.category != category:
                continue
            if allergen_free and food.allergens:
                continue
            results.append(food)
        return results

    def get_detail(self, food_id: str) -> FoodDetail | None:
        """Return a food with its age guidance and nutrition highlights."""
        food = next(
            (food for food in self.catalog.list_foods() if food.id == food_id), None
        )
        if food is None:
            return None
        return FoodDetail(
            food=food,
            age_suitability=age_suitability(food),
            nutrition_highlights=nutrition_highlights(food),
        )


def _matches_text(food: Food, needle: str) -> bool:
    if needle in food.name.lower() or needle in food.category.value:
        return True
    return any(needle in tag.lower() for tag in food.tags)


def age_suitability(food: Food) -> str:
    """Return the recommended starting age for a food."""
    if "sweetener" in food.tags and "honey" in food.name.lower():
        return "12+ months (botulism risk)"
    if "juice" in food.tags:
        return "12+ months (AAP guidelines)"
    if food.allergens:
        return "6+ months (introduce carefully)"
    if food.choking_form_notes:
        return "9+ months (with modifications)"
    return "6+ months"


def nutrition_highlights(food: Food) -> list[str]:
    """Return notable nutrition labels for a food."""
    highlights = []
    if (food.iron_mg_per_100g or 0) > HIGH_IRON_MG_PER_100G:
        highlights.append("High Iron")
    for tag, label in _TAG_HIGHLIGHTS:
        if tag in food.tags:
            highlights.append(label)
    if food.category == FoodCategory.VEGETABLE:
        for tag, label in _VEGETABLE_HIGHLIGHTS:
            if tag in food.tags:
                highlights.append(label)
    return highlights
