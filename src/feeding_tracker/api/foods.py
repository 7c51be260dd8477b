"""Food library endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from feeding_tracker.domain.foods import FoodCategory

if TYPE_CHECKING:
    from feeding_tracker.containers import AppContainer
    from feeding_tracker.domain.foods import Food

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def search_foods(
    request: Request,
    q: str | None = None,
    category: FoodCategory | None = None,
    allergen_free: bool = False,
) -> dict[str, object]:
    """Return catalog foods matching the library filters."""
    container: AppContainer = request.app.state.container
    foods = container.food_library_service.search(
        query=q, category=category, allergen_free=allergen_free
    )
    return {"foods": [serialize_food(food) for food in foods]}


@router.get("/{food_id}")
async def food_detail(food_id: str, request: Request) -> dict[str, object]:
    """Return a food with its age guidance and nutrition highlights."""
    container: AppContainer = request.app.state.container
    detail = container.food_library_service.get_detail(food_id)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {
        **serialize_food(detail.food),
        "age_suitability": detail.age_suitability,
        "nutrition_highlights": detail.nutrition_highlights,
    }


def serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "category": food.category.value,
        "allergens": list(food.allergens),
        "tags": list(food.tags),
        "choking_form_notes": food.choking_form_notes,
        "iron_mg_per_100g": food.iron_mg_per_100g,
    }
