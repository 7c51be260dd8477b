"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date, time
from uuid import UUID, uuid4

import pytest

from feeding_tracker.config import Settings
from feeding_tracker.containers import AppContainer
from feeding_tracker.domain.babies import Baby
from feeding_tracker.domain.exposures import ExposureRecord, ReactionDetail
from feeding_tracker.domain.foods import Food, FoodCategory
from feeding_tracker.domain.meals import MealItem, MealRecord
from feeding_tracker.domain.rules import SafetyRule, Severity
from feeding_tracker.services.babies import BabyRepository, BabyService
from feeding_tracker.services.cache import InMemoryCache
from feeding_tracker.services.exposures import ExposureRepository, ExposureService
from feeding_tracker.services.foods import FoodLibraryService
from feeding_tracker.services.meals import MealRepository, MealService
from feeding_tracker.services.safety import (
    FoodCatalogProvider,
    RuleCatalogProvider,
    SafetyService,
)


def make_food(  # noqa: PLR0913
    food_id: str,
    name: str,
    category: FoodCategory = FoodCategory.OTHER,
    allergens: tuple[str, ...] = (),
    tags: tuple[str, ...] = (),
    choking_form_notes: str | None = None,
    iron_mg_per_100g: float | None = None,
) -> Food:
    return Food(
        id=food_id,
        name=name,
        category=category,
        allergens=allergens,
        tags=tags,
        choking_form_notes=choking_form_notes,
        iron_mg_per_100g=iron_mg_per_100g,
    )


def make_rule(
    rule_key: str,
    tags: tuple[str, ...],
    severity: Severity = Severity.CAUTION,
    age_min_months: int = 0,
    age_max_months: int = 24,
) -> SafetyRule:
    return SafetyRule(
        rule_key=rule_key,
        short_text=f"Rule {rule_key}",
        severity=severity,
        publisher="AAP",
        url=f"https://example.org/{rule_key}",
        published_at=date(2023, 1, 1),
        last_verified_at=date(2024, 1, 1),
        direct_quote="Quoted guidance.",
        age_min_months=age_min_months,
        age_max_months=age_max_months,
        tags=tags,
    )


@dataclass
class InMemoryBabyRepository(BabyRepository):
    """In-memory baby repository for tests."""

    babies: dict[UUID, Baby] = field(default_factory=dict)

    def add(self, baby: Baby) -> Baby:
        self.babies[baby.id] = baby
        return baby

    def list_babies(self) -> list[Baby]:
        return list(reversed(self.babies.values()))

    def get_baby(self, baby_id: UUID) -> Baby | None:
        return self.babies.get(baby_id)

    def create_baby(self, payload: dict[str, object]) -> Baby:
        return self.add(
            Baby(
                id=uuid4(),
                name=str(payload["name"]),
                date_of_birth=date.fromisoformat(str(payload["date_of_birth"])),
                known_allergies=frozenset(payload.get("known_allergies") or []),
                suspected_allergies=frozenset(
                    payload.get("suspected_allergies") or []
                ),
                pediatrician_contact=payload.get("pediatrician_contact"),
            )
        )

    def update_baby(self, baby_id: UUID, payload: dict[str, object]) -> Baby | None:
        current = self.babies.get(baby_id)
        if current is None:
            return None
        changes: dict[str, object] = {}
        if "name" in payload:
            changes["name"] = payload["name"]
        if "date_of_birth" in payload:
            changes["date_of_birth"] = date.fromisoformat(
                str(payload["date_of_birth"])
            )
        for key in ("known_allergies", "suspected_allergies"):
            if key in payload:
                changes[key] = frozenset(payload[key] or [])
        if "pediatrician_contact" in payload:
            changes["pediatrician_contact"] = payload["pediatrician_contact"]
        updated = replace(current, **changes)
        self.babies[baby_id] = updated
        return updated

    def delete_baby(self, baby_id: UUID) -> None:
        self.babies.pop(baby_id, None)


@dataclass
class InMemoryFoodCatalog(FoodCatalogProvider):
    """In-memory food catalog that counts fetches."""

    foods: list[Food] = field(default_factory=list)
    fetches: int = 0

    def list_foods(self) -> list[Food]:
        self.fetches += 1
        return list(self.foods)


@dataclass
class InMemoryRuleCatalog(RuleCatalogProvider):
    """In-memory rule catalog that counts fetches."""

    rules: list[SafetyRule] = field(default_factory=list)
    fetches: int = 0

    def list_rules(self) -> list[SafetyRule]:
        self.fetches += 1
        return list(self.rules)


def _items_from_payload(raw_items: object) -> list[MealItem]:
    return [
        MealItem(
            portion_tag=str(raw.get("portion_tag", "")),
            food_id=raw.get("food_id"),
            free_text=raw.get("free_text"),
        )
        for raw in raw_items or []
    ]


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealRecord] = field(default_factory=dict)

    def create_meal(self, baby_id: UUID, payload: dict[str, object]) -> MealRecord:
        meal = MealRecord(
            id=uuid4(),
            baby_id=baby_id,
            meal_date=date.fromisoformat(str(payload["meal_date"])),
            meal_time=time.fromisoformat(str(payload["meal_time"])),
            meal_type=payload.get("meal_type"),
            items=_items_from_payload(payload.get("items")),
            reactions=list(payload.get("reactions") or []),
            notes=payload.get("notes"),
        )
        self.meals[meal.id] = meal
        return meal

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        return self.meals.get(meal_id)

    def list_meals(self, baby_id: UUID) -> list[MealRecord]:
        meals = [meal for meal in self.meals.values() if meal.baby_id == baby_id]
        return sorted(
            meals, key=lambda meal: (meal.meal_date, meal.meal_time), reverse=True
        )

    def update_meal(
        self, meal_id: UUID, payload: dict[str, object]
    ) -> MealRecord | None:
        meal = self.meals.get(meal_id)
        if meal is None:
            return None
        changes = dict(payload)
        if "meal_date" in changes:
            changes["meal_date"] = date.fromisoformat(str(changes["meal_date"]))
        if "meal_time" in changes:
            changes["meal_time"] = time.fromisoformat(str(changes["meal_time"]))
        if "items" in changes:
            changes["items"] = _items_from_payload(changes["items"])
        updated = replace(meal, **changes)
        self.meals[meal_id] = updated
        return updated

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)


@dataclass
class InMemoryExposureRepository(ExposureRepository):
    """In-memory exposure repository for tests."""

    exposures: list[ExposureRecord] = field(default_factory=list)

    def create_exposure(
        self, baby_id: UUID, payload: dict[str, object]
    ) -> ExposureRecord:
        raw_reaction = payload.get("reaction")
        exposure = ExposureRecord(
            id=uuid4(),
            baby_id=baby_id,
            allergen=str(payload["allergen"]),
            exposure_date=date.fromisoformat(str(payload["exposure_date"])),
            reaction=ReactionDetail.from_json(raw_reaction) if raw_reaction else None,
            notes=payload.get("notes"),
        )
        self.exposures.append(exposure)
        return exposure

    def list_exposures(self, baby_id: UUID) -> list[ExposureRecord]:
        return sorted(
            (entry for entry in self.exposures if entry.baby_id == baby_id),
            key=lambda entry: entry.exposure_date,
            reverse=True,
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def baby_repository() -> InMemoryBabyRepository:
    return InMemoryBabyRepository()


@pytest.fixture
def food_catalog() -> InMemoryFoodCatalog:
    return InMemoryFoodCatalog(
        foods=[
            make_food(
                "f-honey",
                "Honey",
                FoodCategory.SWEETENER,
                tags=("sweetener",),
            ),
            make_food(
                "f-peanut",
                "Peanut Butter",
                FoodCategory.PROTEIN,
                allergens=("peanut",),
                tags=("nut-butter",),
            ),
            make_food(
                "f-grape",
                "Grapes",
                FoodCategory.FRUIT,
                tags=("round-food",),
                choking_form_notes="Quarter lengthwise",
            ),
        ]
    )


@pytest.fixture
def rule_catalog() -> InMemoryRuleCatalog:
    return InMemoryRuleCatalog(
        rules=[
            make_rule("no-honey", ("honey",), Severity.DANGER, 0, 11),
            make_rule("peanut-intro", ("peanut",), Severity.DANGER, 0, 24),
            make_rule("choking-round", ("round-food",), Severity.CAUTION, 0, 48),
        ]
    )


@pytest.fixture
def container(
    settings: Settings,
    baby_repository: InMemoryBabyRepository,
    food_catalog: InMemoryFoodCatalog,
    rule_catalog: InMemoryRuleCatalog,
) -> AppContainer:
    safety_service = SafetyService(
        babies=baby_repository,
        foods=food_catalog,
        rules=rule_catalog,
        cache=InMemoryCache(),
        catalog_ttl_seconds=settings.catalog_cache_ttl_seconds,
    )
    return AppContainer(
        settings=settings,
        baby_service=BabyService(baby_repository),
        food_library_service=FoodLibraryService(food_catalog),
        safety_service=safety_service,
        meal_service=MealService(
            repository=InMemoryMealRepository(),
            safety_service=safety_service,
        ),
        exposure_service=ExposureService(InMemoryExposureRepository()),
    )
