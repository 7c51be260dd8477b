"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from feeding_tracker.adapters.supabase_baby_repository import SupabaseBabyRepository
from feeding_tracker.adapters.supabase_exposure_repository import (
    SupabaseExposureRepository,
)
from feeding_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from feeding_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from feeding_tracker.adapters.supabase_rule_repository import SupabaseRuleRepository
from feeding_tracker.config import Settings
from feeding_tracker.services.babies import BabyService
from feeding_tracker.services.cache import InMemoryCache
from feeding_tracker.services.exposures import ExposureService
from feeding_tracker.services.foods import FoodLibraryService
from feeding_tracker.services.meals import MealService
from feeding_tracker.services.safety import SafetyService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    baby_service: BabyService
    food_library_service: FoodLibraryService
    safety_service: SafetyService
    meal_service: MealService
    exposure_service: ExposureService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    baby_repository = SupabaseBabyRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    rule_repository = SupabaseRuleRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    exposure_repository = SupabaseExposureRepository(supabase_client)

    safety_service = SafetyService(
        babies=baby_repository,
        foods=food_repository,
        rules=rule_repository,
        cache=InMemoryCache(),
        catalog_ttl_seconds=resolved_settings.catalog_cache_ttl_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        baby_service=BabyService(baby_repository),
        food_library_service=FoodLibraryService(food_repository),
        safety_service=safety_service,
        meal_service=MealService(
            repository=meal_repository,
            safety_service=safety_service,
        ),
        exposure_service=ExposureService(exposure_repository),
    )
