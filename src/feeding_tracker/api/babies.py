"""Baby profile, safety check, meal and reaction endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from feeding_tracker.api.schemas import (  # noqa: TC001
    BabyCreate,
    BabyUpdate,
    ExposureCreate,
    MealCreate,
    MealUpdate,
    SafetyCheckRequest,
)

if TYPE_CHECKING:
    from feeding_tracker.containers import AppContainer
    from feeding_tracker.domain.babies import Baby
    from feeding_tracker.domain.exposures import ExposureRecord
    from feeding_tracker.domain.meals import MealRecord
    from feeding_tracker.domain.rules import SafetyRule

router = APIRouter(tags=["babies"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _require_baby(container: AppContainer, baby_id: UUID) -> Baby:
    baby = container.baby_service.get_baby(baby_id)
    if baby is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return baby


@router.get("/babies")
async def list_babies(request: Request) -> dict[str, object]:
    """Return all baby profiles."""
    babies = _container(request).baby_service.list_babies()
    return {"babies": [serialize_baby(baby) for baby in babies]}


@router.post("/babies", status_code=status.HTTP_201_CREATED)
async def create_baby(payload: BabyCreate, request: Request) -> dict[str, object]:
    """Create a baby profile."""
    baby = _container(request).baby_service.create_baby(
        payload.model_dump(mode="json")
    )
    return serialize_baby(baby)


@router.get("/babies/{baby_id}")
async def get_baby(baby_id: UUID, request: Request) -> dict[str, object]:
    """Return a baby profile."""
    return serialize_baby(_require_baby(_container(request), baby_id))


@router.patch("/babies/{baby_id}")
async def update_baby(
    baby_id: UUID, payload: BabyUpdate, request: Request
) -> dict[str, object]:
    """Apply a partial update to a baby profile."""
    baby = _container(request).baby_service.update_baby(
        baby_id, payload.model_dump(mode="json", exclude_unset=True)
    )
    if baby is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_baby(baby)


@router.delete("/babies/{baby_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_baby(baby_id: UUID, request: Request) -> None:
    """Delete a baby profile."""
    if not _container(request).baby_service.delete_baby(baby_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.post("/babies/{baby_id}/safety-check")
async def safety_check(
    baby_id: UUID, payload: SafetyCheckRequest, request: Request
) -> dict[str, object]:
    """Return safety alerts for a proposed meal, most severe first."""
    report = _container(request).safety_service.check_meal(
        baby_id, [item.to_domain() for item in payload.items]
    )
    return {
        "baby_id": str(report.baby_id),
        "age_months": report.age_months,
        "rules": [serialize_rule(rule) for rule in report.rules],
    }


@router.get("/babies/{baby_id}/meals")
async def list_meals(baby_id: UUID, request: Request) -> dict[str, object]:
    """Return meals logged for a baby."""
    container = _container(request)
    _require_baby(container, baby_id)
    meals = container.meal_service.list_meals(baby_id)
    return {"meals": [serialize_meal(meal) for meal in meals]}


@router.post("/babies/{baby_id}/meals", status_code=status.HTTP_201_CREATED)
async def log_meal(
    baby_id: UUID, payload: MealCreate, request: Request
) -> dict[str, object]:
    """Log a meal and return it with its safety alerts."""
    container = _container(request)
    _require_baby(container, baby_id)
    logged = container.meal_service.log_meal(
        baby_id=baby_id,
        meal_date=payload.meal_date,
        meal_time=payload.meal_time,
        items=[item.to_domain() for item in payload.items],
        meal_type=payload.meal_type,
        reactions=payload.reactions,
        notes=payload.notes,
    )
    return {
        "meal": serialize_meal(logged.meal),
        "alerts": [serialize_rule(rule) for rule in logged.alerts],
    }


@router.patch("/meals/{meal_id}")
async def update_meal(
    meal_id: UUID, payload: MealUpdate, request: Request
) -> dict[str, object]:
    """Apply a partial update to a meal and re-check it."""
    changes = payload.model_dump(exclude_unset=True)
    if payload.items is not None:
        changes["items"] = [item.to_domain() for item in payload.items]
    logged = _container(request).meal_service.update_meal(meal_id, changes)
    if logged is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {
        "meal": serialize_meal(logged.meal),
        "alerts": [serialize_rule(rule) for rule in logged.alerts],
    }


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(meal_id: UUID, request: Request) -> None:
    """Delete a logged meal."""
    if not _container(request).meal_service.delete_meal(meal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/babies/{baby_id}/exposures")
async def list_exposures(baby_id: UUID, request: Request) -> dict[str, object]:
    """Return the reaction log for a baby."""
    container = _container(request)
    _require_baby(container, baby_id)
    exposures = container.exposure_service.list_exposures(baby_id)
    return {"exposures": [serialize_exposure(entry) for entry in exposures]}


@router.post("/babies/{baby_id}/exposures", status_code=status.HTTP_201_CREATED)
async def log_exposure(
    baby_id: UUID, payload: ExposureCreate, request: Request
) -> dict[str, object]:
    """Record an allergen exposure."""
    container = _container(request)
    _require_baby(container, baby_id)
    exposure = container.exposure_service.log_exposure(
        baby_id=baby_id,
        allergen=payload.allergen,
        exposure_date=payload.exposure_date,
        reaction=payload.reaction.to_domain() if payload.reaction else None,
        notes=payload.notes,
    )
    return serialize_exposure(exposure)


def serialize_baby(baby: Baby) -> dict[str, object]:
    return {
        "id": str(baby.id),
        "name": baby.name,
        "date_of_birth": baby.date_of_birth.isoformat(),
        "known_allergies": sorted(baby.known_allergies),
        "suspected_allergies": sorted(baby.suspected_allergies),
        "pediatrician_contact": baby.pediatrician_contact,
    }


def serialize_rule(rule: SafetyRule) -> dict[str, object]:
    return {
        "rule_key": rule.rule_key,
        "short_text": rule.short_text,
        "severity": rule.severity.value,
        "publisher": rule.publisher,
        "url": rule.url,
        "published_at": rule.published_at.isoformat() if rule.published_at else None,
        "last_verified_at": rule.last_verified_at.isoformat()
        if rule.last_verified_at
        else None,
        "direct_quote": rule.direct_quote,
        "age_min_months": rule.age_min_months,
        "age_max_months": rule.age_max_months,
        "tags": list(rule.tags),
    }


def serialize_meal(meal: MealRecord) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "baby_id": str(meal.baby_id),
        "meal_date": meal.meal_date.isoformat(),
        "meal_time": meal.meal_time.strftime("%H:%M"),
        "meal_type": meal.meal_type,
        "items": [item.to_json() for item in meal.items],
        "reactions": meal.reactions,
        "notes": meal.notes,
    }


def serialize_exposure(exposure: ExposureRecord) -> dict[str, object]:
    reaction = exposure.reaction
    return {
        "id": str(exposure.id),
        "baby_id": str(exposure.baby_id),
        "allergen": exposure.allergen,
        "exposure_date": exposure.exposure_date.isoformat(),
        "reaction": {
            "type": reaction.type,
            "severity": reaction.severity,
            "symptoms": reaction.symptoms,
            "onset_time": reaction.onset_time,
            "duration": reaction.duration,
            "treatment": reaction.treatment,
        }
        if reaction
        else None,
        "notes": exposure.notes,
    }
