"""Baby profile management."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from feeding_tracker.domain.babies import Baby


class BabyRepository(Protocol):
    """Persistence interface for baby profiles."""

    def list_babies(self) -> list[Baby]:
        """Return babies, newest first."""

    def get_baby(self, baby_id: UUID) -> Baby | None:
        """Return a baby by id, if present."""

    def create_baby(self, payload: dict[str, object]) -> Baby:
        """Create a baby profile and return it."""

    def update_baby(self, baby_id: UUID, payload: dict[str, object]) -> Baby | None:
        """Update a baby profile and return it, if present."""

    def delete_baby(self, baby_id: UUID) -> None:
        """Delete a baby profile."""


@dataclass
class BabyService:
    """Application service for baby profiles."""

    repository: BabyRepository

    def list_babies(self) -> list[Baby]:
        return self.repository.list_babies()

    def get_baby(self, baby_id: UUID) -> Baby | None:
        return self.repository.get_baby(baby_id)

    def create_baby(self, payload: dict[str, object]) -> Baby:
        """Create a baby profile with normalized allergy lists."""
        return self.repository.create_baby(_normalize_allergies(payload))

    def update_baby(self, baby_id: UUID, payload: dict[str, object]) -> Baby | None:
        """Apply a partial update to a baby profile."""
        return self.repository.update_baby(baby_id, _normalize_allergies(payload))

    def delete_baby(self, baby_id: UUID) -> bool:
        """Delete a baby profile, returning False when it does not exist."""
        if self.repository.get_baby(baby_id) is None:
            return False
        self.repository.delete_baby(baby_id)
        return True


def _normalize_allergies(payload: dict[str, object]) -> dict[str, object]:
    """Strip and dedupe allergy names, keeping first-seen order."""
    normalized = dict(payload)
    for key in ("known_allergies", "suspected_allergies"):
        raw = normalized.get(key)
        if raw is None:
            continue
        seen: list[str] = []
        for value in raw:  # type: ignore[union-attr]
            cleaned = str(value).strip()
            if cleaned and cleaned.lower() not in {item.lower() for item in seen}:
                seen.append(cleaned)
        normalized[key] = seen
    return normalized
