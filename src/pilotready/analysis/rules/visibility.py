"""Visibility rule: planned visibility against the pilot's minimum."""

from __future__ import annotations

from pilotready.analysis.rules import RuleContext
from pilotready.analysis.rules._helpers import Tier, first_tier, tier_max_points
from pilotready.analysis.rules.registry import register
from pilotready.models import RuleCatalogEntry, TriggeredRule

TIERS = (
    Tier(
        rule="Visibility below your min",
        points=3,
        note="Visibility {value}sm < your min {limit}sm.",
        matches=lambda vis, limit: vis < limit,
    ),
    Tier(
        rule="Visibility close to your min",
        points=2,
        note="Visibility {value}sm is close to your min {limit}sm.",
        matches=lambda vis, limit: vis <= limit + 1,
    ),
    Tier(
        rule="Visibility: mild caution",
        points=1,
        note="Visibility {value}sm is within 2sm of your min {limit}sm.",
        matches=lambda vis, limit: vis <= limit + 2,
    ),
)


@register
class VisibilityRule:
    @staticmethod
    def catalog_entry() -> RuleCatalogEntry:
        return RuleCatalogEntry(
            id="visibility",
            name="Visibility",
            category="weather",
            description="Below your min visibility, within 1sm of it, or within 2sm of it.",
            max_points=tier_max_points(TIERS),
        )

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None:
        return first_tier(
            TIERS, ctx.flight.visibility_sm, ctx.profile.minimums.min_visibility_sm
        )
