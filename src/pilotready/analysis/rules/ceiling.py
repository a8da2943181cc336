"""Ceiling rule: planned ceiling against the pilot's minimum ceiling."""

from __future__ import annotations

from pilotready.analysis.rules import RuleContext
from pilotready.analysis.rules._helpers import Tier, first_tier, tier_max_points
from pilotready.analysis.rules.registry import register
from pilotready.models import RuleCatalogEntry, TriggeredRule

TIERS = (
    Tier(
        rule="Ceiling below your min",
        points=3,
        note="Ceiling {value}ft < your min {limit}ft.",
        matches=lambda ceiling, limit: ceiling < limit,
    ),
    Tier(
        rule="Ceiling close to your min",
        points=2,
        note="Ceiling {value}ft is close to your min {limit}ft.",
        matches=lambda ceiling, limit: ceiling <= limit + 500,
    ),
    Tier(
        rule="Ceiling: mild caution",
        points=1,
        note="Ceiling {value}ft is within 1000ft of your min {limit}ft.",
        matches=lambda ceiling, limit: ceiling <= limit + 1000,
    ),
)


@register
class CeilingRule:
    @staticmethod
    def catalog_entry() -> RuleCatalogEntry:
        return RuleCatalogEntry(
            id="ceiling",
            name="Ceiling",
            category="weather",
            description="Below your min ceiling, within 500ft of it, or within 1000ft of it.",
            max_points=tier_max_points(TIERS),
        )

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None:
        return first_tier(TIERS, ctx.flight.ceiling_ft, ctx.profile.minimums.min_ceiling_ft)
