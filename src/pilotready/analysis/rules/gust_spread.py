"""Gust spread rule: gust minus sustained wind against the pilot's max."""

from __future__ import annotations

from pilotready.analysis.rules import RuleContext
from pilotready.analysis.rules._helpers import Tier, below_limit, first_tier, tier_max_points
from pilotready.analysis.rules.registry import register
from pilotready.models import RuleCatalogEntry, TriggeredRule

TIERS = (
    Tier(
        rule="Gust spread above your max",
        points=2,
        note="Gust spread {value}kt > your max {limit}kt.",
        matches=lambda spread, limit: spread > limit,
    ),
    Tier(
        rule="Gust spread near your max",
        points=1,
        note="Gust spread {value}kt is close to your max {limit}kt.",
        matches=lambda spread, limit: spread >= below_limit(limit, 2),
    ),
)


@register
class GustSpreadRule:
    @staticmethod
    def catalog_entry() -> RuleCatalogEntry:
        return RuleCatalogEntry(
            id="gust_spread",
            name="Gust spread",
            category="weather",
            description="Above your max gust spread, or within 2kt of it.",
            max_points=tier_max_points(TIERS),
        )

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None:
        return first_tier(
            TIERS, ctx.flight.gust_spread_kt, ctx.profile.minimums.max_gust_spread_kt
        )
