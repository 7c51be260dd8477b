"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Protocol
from uuid import UUID

from feeding_tracker.domain.meals import MealItem, MealRecord
from feeding_tracker.domain.rules import SafetyRule
from feeding_tracker.services.safety import SafetyService

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(self, baby_id: UUID, payload: dict[str, object]) -> MealRecord:
        """Create a meal row and return it."""

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id, if present."""

    def list_meals(self, baby_id: UUID) -> list[MealRecord]:
        """Return meals for a baby, most recent first."""

    def update_meal(
        self, meal_id: UUID, payload: dict[str, object]
    ) -> MealRecord | None:
        """Update a meal row and return it, if present."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""


@dataclass(frozen=True)
class LoggedMeal:
    """A persisted meal with the alerts raised for its items."""

    meal: MealRecord
    alerts: list[SafetyRule]


@dataclass
class MealService:
    """Service that persists meals and checks them against safety rules."""

    repository: MealRepository
    safety_service: SafetyService

    def log_meal(  # noqa: PLR0913
        self,
        baby_id: UUID,
        meal_date: date,
        meal_time: time,
        items: list[MealItem],
        meal_type: str | None = None,
        reactions: list[str] | None = None,
        notes: str | None = None,
    ) -> LoggedMeal:
        """Persist a meal and return it with its safety alerts."""
        meal = self.repository.create_meal(
            baby_id,
            {
                "meal_date": meal_date.isoformat(),
                "meal_time": meal_time.strftime("%H:%M"),
                "meal_type": meal_type,
                "items": [item.to_json() for item in items],
                "reactions": reactions or [],
                "notes": notes or None,
            },
        )
        report = self.safety_service.check_meal(baby_id, meal.items)
        if report.rules:
            logger.info(
                "Meal %s logged with %d safety alert(s)", meal.id, len(report.rules)
            )
        return LoggedMeal(meal=meal, alerts=report.rules)

    def list_meals(self, baby_id: UUID) -> list[MealRecord]:
        return self.repository.list_meals(baby_id)

    def update_meal(
        self, meal_id: UUID, changes: dict[str, object]
    ) -> LoggedMeal | None:
        """Apply a partial update and re-check the meal's items.

        ``changes`` holds domain values: ``meal_date`` as a date,
        ``meal_time`` as a time and ``items`` as a list of ``MealItem``.
        Returns None when the meal does not exist.
        """
        payload = dict(changes)
        meal_date = payload.get("meal_date")
        if isinstance(meal_date, date):
            payload["meal_date"] = meal_date.isoformat()
        meal_time = payload.get("meal_time")
        if isinstance(meal_time, time):
            payload["meal_time"] = meal_time.strftime("%H:%M")
        if "items" in payload:
            payload["items"] = [item.to_json() for item in payload["items"]]
        if "notes" in payload:
            payload["notes"] = payload["notes"] or None
        meal = self.repository.update_meal(meal_id, payload)
        if meal is None:
            return None
        report = self.safety_service.check_meal(meal.baby_id, meal.items)
        if report.rules:
            logger.info(
                "Meal %s updated with %d safety alert(s)", meal.id, len(report.rules)
            )
        return LoggedMeal(meal=meal, alerts=report.rules)

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal, returning False when it does not exist."""
        if self.repository.get_meal(meal_id) is None:
            return False
        self.repository.delete_meal(meal_id)
        return True
