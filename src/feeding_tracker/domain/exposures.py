"""Domain models for allergen exposures and reactions."""

import json
from dataclasses import asdict, dataclass, field
from datetime import date
from uuid import UUID

REACTION_TYPES = ("skin", "digestive", "respiratory", "severe")
REACTION_SEVERITIES = ("mild", "moderate", "severe", "emergency")


@dataclass(frozen=True)
class ReactionDetail:
    """Structured details of an observed reaction."""

    type: str | None = None
    severity: str | None = None
    symptoms: list[str] = field(default_factory=list)
    onset_time: str | None = None
    duration: str | None = None
    treatment: str | None = None

    def to_json(self) -> str:
        """Encode the detail for the exposures.reaction column."""
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str | None) -> "ReactionDetail":
        """Decode a stored reaction, returning an empty detail if unreadable."""
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return cls()
        if not isinstance(data, dict):
            return cls()
        symptoms = data.get("symptoms") or []
        return cls(
            type=data.get("type") or None,
            severity=data.get("severity") or None,
            symptoms=[str(item) for item in symptoms]
            if isinstance(symptoms, list)
            else [],
            onset_time=data.get("onset_time") or None,
            duration=data.get("duration") or None,
            treatment=data.get("treatment") or None,
        )


@dataclass(frozen=True)
class ExposureRecord:
    """An allergen exposure logged for a baby."""

    id: UUID
    baby_id: UUID
    allergen: str
    exposure_date: date
    reaction: ReactionDetail | None = None
    notes: str | None = None
