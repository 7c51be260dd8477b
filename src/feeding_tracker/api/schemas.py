"""Pydantic models for API request payloads."""

from datetime import UTC, date, datetime, time
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from feeding_tracker.domain.exposures import ReactionDetail
from feeding_tracker.domain.meals import MealItem


class MealItemIn(BaseModel):
    """Meal item payload referencing a food by id or free text."""

    food_id: str | None = None
    free_text: str | None = None
    portion_tag: str = "taste"

    def to_domain(self) -> MealItem:
        if self.food_id:
            return MealItem(portion_tag=self.portion_tag, food_id=self.food_id)
        return MealItem(portion_tag=self.portion_tag, free_text=self.free_text)


class SafetyCheckRequest(BaseModel):
    """Items to check against safety rules."""

    items: list[MealItemIn] = Field(default_factory=list)


class BabyCreate(BaseModel):
    """New baby profile payload."""

    name: str = Field(min_length=1)
    date_of_birth: date
    known_allergies: list[str] = Field(default_factory=list)
    suspected_allergies: list[str] = Field(default_factory=list)
    pediatrician_contact: str | None = None

    @field_validator("date_of_birth")
    @classmethod
    def _not_in_future(cls, value: date) -> date:
        if value > datetime.now(tz=UTC).date():
            raise ValueError("date_of_birth cannot be in the future")
        return value


class BabyUpdate(BaseModel):
    """Partial baby profile update."""

    name: str | None = Field(default=None, min_length=1)
    date_of_birth: date | None = None
    known_allergies: list[str] | None = None
    suspected_allergies: list[str] | None = None
    pediatrician_contact: str | None = None

    @field_validator("name", "date_of_birth")
    @classmethod
    def _not_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field cannot be null")
        return value

    @field_validator("date_of_birth")
    @classmethod
    def _not_in_future(cls, value: date | None) -> date | None:
        if value is not None and value > datetime.now(tz=UTC).date():
            raise ValueError("date_of_birth cannot be in the future")
        return value


class MealCreate(BaseModel):
    """Meal log payload."""

    meal_date: date
    meal_time: time
    meal_type: str | None = None
    items: list[MealItemIn] = Field(min_length=1)
    reactions: list[str] = Field(default_factory=list)
    notes: str | None = None


class MealUpdate(BaseModel):
    """Partial meal update."""

    meal_date: date | None = None
    meal_time: time | None = None
    meal_type: str | None = None
    items: list[MealItemIn] | None = Field(default=None, min_length=1)
    reactions: list[str] | None = None
    notes: str | None = None

    @field_validator("meal_date", "meal_time", "items", "reactions")
    @classmethod
    def _not_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field cannot be null")
        return value


class ReactionIn(BaseModel):
    """Observed reaction details."""

    type: Literal["skin", "digestive", "respiratory", "severe"] | None = None
    severity: Literal["mild", "moderate", "severe", "emergency"] | None = None
    symptoms: list[str] = Field(default_factory=list)
    onset_time: str | None = None
    duration: str | None = None
    treatment: str | None = None

    def to_domain(self) -> ReactionDetail:
        return ReactionDetail(**self.model_dump())


class ExposureCreate(BaseModel):
    """Allergen exposure payload."""

    allergen: str = Field(min_length=1)
    exposure_date: date
    reaction: ReactionIn | None = None
    notes: str | None = None
