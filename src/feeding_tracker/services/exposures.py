"""Allergen exposure and reaction log."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from feeding_tracker.domain.exposures import ExposureRecord, ReactionDetail


class ExposureRepository(Protocol):
    """Persistence interface for allergen exposures."""

    def create_exposure(
        self, baby_id: UUID, payload: dict[str, object]
    ) -> ExposureRecord:
        """Create an exposure row and return it."""

    def list_exposures(self, baby_id: UUID) -> list[ExposureRecord]:
        """Return exposures for a baby, most recent first."""


@dataclass
class ExposureService:
    """Application service for the reaction log."""

    repository: ExposureRepository

    def log_exposure(
        self,
        baby_id: UUID,
        allergen: str,
        exposure_date: date,
        reaction: ReactionDetail | None = None,
        notes: str | None = None,
    ) -> ExposureRecord:
        """Record an allergen exposure and any reaction observed."""
        return self.repository.create_exposure(
            baby_id,
            {
                "allergen": allergen.strip(),
                "exposure_date": exposure_date.isoformat(),
                "reaction": reaction.to_json() if reaction else None,
                "notes": notes or None,
            },
        )

    def list_exposures(self, baby_id: UUID) -> list[ExposureRecord]:
        return self.repository.list_exposures(baby_id)
