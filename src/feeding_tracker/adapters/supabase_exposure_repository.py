"""Supabase repository for allergen exposures."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from feeding_tracker.domain.exposures import ExposureRecord, ReactionDetail
from feeding_tracker.services.exposures import ExposureRepository


@dataclass
class SupabaseExposureRepository(ExposureRepository):
    """Supabase implementation for the reaction log."""

    client: Client

    def create_exposure(
        self, baby_id: UUID, payload: dict[str, object]
    ) -> ExposureRecord:
        """Create an exposure row and return it."""
        response = (
            self.client.table("exposures")
            .insert({"baby_id": str(baby_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to log exposure")
        return _parse_exposure(response.data[0])

    def list_exposures(self, baby_id: UUID) -> list[ExposureRecord]:
        """Return exposures for a baby, most recent first."""
        response = (
            self.client.table("exposures")
            .select("*")
            .eq("baby_id", str(baby_id))
            .order("exposure_date", desc=True)
            .execute()
        )
        return [_parse_exposure(row) for row in response.data or []]


def _parse_exposure(row: dict[str, object]) -> ExposureRecord:
    raw_reaction = row.get("reaction")
    return ExposureRecord(
        id=UUID(str(row["id"])),
        baby_id=UUID(str(row["baby_id"])),
        allergen=str(row.get("allergen") or ""),
        exposure_date=date.fromisoformat(str(row["exposure_date"])[:10]),
        reaction=ReactionDetail.from_json(raw_reaction)
        if isinstance(raw_reaction, str) and raw_reaction
        else None,
        notes=row.get("notes"),
    )
