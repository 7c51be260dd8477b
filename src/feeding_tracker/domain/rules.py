"""Domain models for published safety rules."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Severity(str, Enum):
    """Safety rule severity, ordered info < caution < danger."""

    INFO = "info"
    CAUTION = "caution"
    DANGER = "danger"

    @property
    def rank(self) -> int:
        """Return the numeric rank used for sorting alerts."""
        return _SEVERITY_RANK[self]

    @classmethod
    def parse(cls, raw: object) -> "Severity":
        """Return the severity for a stored value, falling back to INFO."""
        try:
            return cls(str(raw).lower())
        except ValueError:
            return cls.INFO


_SEVERITY_RANK = {Severity.INFO: 1, Severity.CAUTION: 2, Severity.DANGER: 3}


@dataclass(frozen=True)
class SafetyRule:
    """A published feeding safety rule with its citation."""

    rule_key: str
    short_text: str
    severity: Severity
    publisher: str
    url: str
    published_at: date | None
    last_verified_at: date | None
    direct_quote: str
    age_min_months: int
    age_max_months: int
    tags: tuple[str, ...] = ()
