"""Supabase implementation for published safety rules."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from feeding_tracker.domain.rules import SafetyRule, Severity
from feeding_tracker.services.safety import RuleCatalogProvider


@dataclass
class SupabaseRuleRepository(RuleCatalogProvider):
    """Supabase-backed read access to the rules table."""

    client: Client

    def list_rules(self) -> list[SafetyRule]:
        """Return all safety rules."""
        response = self.client.table("rules").select("*").execute()
        return [_parse_rule(row) for row in response.data or []]


def _parse_rule(row: dict[str, object]) -> SafetyRule:
    """Parse a rules row into a domain model."""
    return SafetyRule(
        rule_key=str(row["rule_key"]),
        short_text=str(row.get("short_text") or ""),
        severity=Severity.parse(row.get("severity")),
        publisher=str(row.get("publisher") or ""),
        url=str(row.get("url") or ""),
        published_at=_parse_date(row.get("published_at")),
        last_verified_at=_parse_date(row.get("last_verified_at")),
        direct_quote=str(row.get("direct_quote") or ""),
        age_min_months=int(row.get("age_min_months") or 0),
        age_max_months=int(row.get("age_max_months") or 0),
        tags=tuple(row.get("tags") or ()),
    )


def _parse_date(raw: object) -> date | None:
    if isinstance(raw, str) and raw:
        return date.fromisoformat(raw[:10])
    return None
