"""Domain models for baby profiles."""

import math
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID

AVERAGE_MONTH_DAYS = 30.44
SECONDS_PER_DAY = 60 * 60 * 24


@dataclass(frozen=True)
class Baby:
    """Represents a baby profile."""

    id: UUID
    name: str
    date_of_birth: date
    known_allergies: frozenset[str] = field(default_factory=frozenset)
    suspected_allergies: frozenset[str] = field(default_factory=frozenset)
    pediatrician_contact: str | None = None

    def age_in_months(self, now: datetime) -> int:
        """Return whole elapsed months at ``now``."""
        return age_in_months(self.date_of_birth, now)


def age_in_months(date_of_birth: date, now: datetime) -> int:
    """Return whole months elapsed since birth using a 30.44 day month.

    The birth date is taken as midnight UTC. A birth date after ``now``
    yields a negative count.
    """
    born_at = datetime(
        date_of_birth.year, date_of_birth.month, date_of_birth.day, tzinfo=UTC
    )
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    days_elapsed = (now - born_at).total_seconds() / SECONDS_PER_DAY
    return math.floor(days_elapsed / AVERAGE_MONTH_DAYS)
