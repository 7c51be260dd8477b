"""Supabase-backed baby repository."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from feeding_tracker.domain.babies import Baby
from feeding_tracker.services.babies import BabyRepository


@dataclass
class SupabaseBabyRepository(BabyRepository):
    """Supabase implementation for baby profiles."""

    client: Client

    def list_babies(self) -> list[Baby]:
        """Return babies, newest first."""
        response = (
            self.client.table("babies")
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_baby(row) for row in response.data or []]

    def get_baby(self, baby_id: UUID) -> Baby | None:
        """Return a baby by id, if present."""
        response = (
            self.client.table("babies")
            .select("*")
            .eq("id", str(baby_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_baby(response.data[0])

    def create_baby(self, payload: dict[str, object]) -> Baby:
        """Create a baby row and return it."""
        response = self.client.table("babies").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create baby profile")
        return _parse_baby(response.data[0])

    def update_baby(self, baby_id: UUID, payload: dict[str, object]) -> Baby | None:
        """Update a baby row and return it, if present."""
        response = (
            self.client.table("babies")
            .update(payload)
            .eq("id", str(baby_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_baby(response.data[0])

    def delete_baby(self, baby_id: UUID) -> None:
        """Delete a baby row."""
        self.client.table("babies").delete().eq("id", str(baby_id)).execute()


def _parse_baby(row: dict[str, object]) -> Baby:
    """Parse a babies row into a domain model."""
    return Baby(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        date_of_birth=date.fromisoformat(str(row["date_of_birth"])[:10]),
        known_allergies=frozenset(row.get("known_allergies") or []),
        suspected_allergies=frozenset(row.get("suspected_allergies") or []),
        pediatrician_contact=row.get("pediatrician_contact"),
    )
