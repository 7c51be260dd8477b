"""Safety rule engine for meal items."""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from feeding_tracker.domain.babies import Baby
from feeding_tracker.domain.foods import Food
from feeding_tracker.domain.meals import MealItem
from feeding_tracker.domain.rules import SafetyRule
from feeding_tracker.services.cache import Cache, InMemoryCache

logger = logging.getLogger(__name__)

FOODS_CACHE_KEY = "catalog:foods"
RULES_CACHE_KEY = "catalog:rules"


class BabyProvider(Protocol):
    """Read interface for baby profiles."""

    def get_baby(self, baby_id: UUID) -> Baby | None:
        """Return a baby by id, if present."""


class FoodCatalogProvider(Protocol):
    """Read interface for the food catalog."""

    def list_foods(self) -> list[Food]:
        """Return all catalog foods ordered by name."""


class RuleCatalogProvider(Protocol):
    """Read interface for published safety rules."""

    def list_rules(self) -> list[SafetyRule]:
        """Return all safety rules."""


def resolve_food(item: MealItem, foods: Sequence[Food]) -> Food | None:
    """Return the catalog food a meal item refers to.

    Free text matches when either the food name contains the text or the text
    contains the food name, ignoring case. The first such food in catalog
    order wins, so short text can match a longer name ("pea" -> "Peanut").
    """
    if item.food_id:
        return next((food for food in foods if food.id == item.food_id), None)
    if item.free_text:
        search_text = item.free_text.lower()
        for food in foods:
            food_name = food.name.lower()
            if search_text in food_name or food_name in search_text:
                return food
    return None


def is_age_eligible(rule: SafetyRule, age_months: int) -> bool:
    """Return whether the rule's inclusive age range covers the age."""
    return rule.age_min_months <= age_months <= rule.age_max_months


def rule_matches_food(rule: SafetyRule, food: Food) -> bool:
    """Return whether any rule tag matches the food's name, tags or allergens."""
    food_name = food.name.lower()
    food_tags = {tag.lower() for tag in food.tags}
    allergens = [allergen.lower() for allergen in food.allergens]
    for tag in rule.tags:
        lower_tag = tag.lower()
        if lower_tag in food_name or lower_tag in food_tags:
            return True
        if any(lower_tag in allergen for allergen in allergens):
            return True
    return False


def check_safety_rules(  # noqa: PLR0913
    baby_id: UUID,
    items: Iterable[MealItem],
    *,
    babies: Iterable[Baby],
    foods: Sequence[Food],
    rules: Sequence[SafetyRule],
    now: datetime,
) -> list[SafetyRule]:
    """Return the rules triggered by meal items, most severe first.

    An unknown baby or unresolvable items yield no rules. Each rule_key
    appears at most once; rules of equal severity keep collection order.
    """
    baby = next((entry for entry in babies if entry.id == baby_id), None)
    if baby is None:
        return []
    age_months = baby.age_in_months(now)
    eligible = [rule for rule in rules if is_age_eligible(rule, age_months)]

    triggered: dict[str, SafetyRule] = {}
    for item in items:
        food = resolve_food(item, foods)
        if food is None:
            continue
        for rule in eligible:
            if rule.rule_key in triggered:
                continue
            if rule_matches_food(rule, food):
                triggered[rule.rule_key] = rule

    return sorted(triggered.values(), key=lambda rule: rule.severity.rank, reverse=True)


@dataclass(frozen=True)
class SafetyReport:
    """Triggered rules for a baby at a point in time."""

    baby_id: UUID
    age_months: int | None
    rules: list[SafetyRule]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SafetyService:
    """Fetches catalog snapshots and runs the safety rule engine."""

    babies: BabyProvider
    foods: FoodCatalogProvider
    rules: RuleCatalogProvider
    cache: Cache = field(default_factory=InMemoryCache)
    catalog_ttl_seconds: int = 300
    clock: Callable[[], datetime] = _utc_now

    def check_meal(self, baby_id: UUID, items: list[MealItem]) -> SafetyReport:
        """Return the safety alerts for a proposed or logged meal."""
        baby = self.babies.get_baby(baby_id)
        if baby is None:
            logger.info("Safety check skipped for unknown baby %s", baby_id)
            return SafetyReport(baby_id=baby_id, age_months=None, rules=[])
        now = self.clock()
        triggered = check_safety_rules(
            baby_id,
            items,
            babies=[baby],
            foods=self._catalog_foods(),
            rules=self._catalog_rules(),
            now=now,
        )
        logger.info(
            "Safety check for baby %s triggered %d rule(s)", baby_id, len(triggered)
        )
        return SafetyReport(
            baby_id=baby_id,
            age_months=baby.age_in_months(now),
            rules=triggered,
        )

    def _catalog_foods(self) -> list[Food]:
        cached = self.cache.get(FOODS_CACHE_KEY)
        if isinstance(cached, list):
            return cached
        foods = self.foods.list_foods()
        self.cache.set(FOODS_CACHE_KEY, foods, ttl_seconds=self.catalog_ttl_seconds)
        return foods

    def _catalog_rules(self) -> list[SafetyRule]:
        cached = self.cache.get(RULES_CACHE_KEY)
        if isinstance(cached, list):
            return cached
        rules = self.rules.list_rules()
        self.cache.set(RULES_CACHE_KEY, rules, ttl_seconds=self.catalog_ttl_seconds)
        return rules
