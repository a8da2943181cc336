"""Recency rule: days since the pilot last flew."""

from __future__ import annotations

from pilotready.analysis.rules import RuleContext
from pilotready.analysis.rules._helpers import Tier, first_tier, tier_max_points
from pilotready.analysis.rules.registry import register
from pilotready.models import RuleCatalogEntry, TriggeredRule

TIERS = (
    Tier(
        rule="Long time since last flight",
        points=2,
        note="Last flight {value} days ago.",
        matches=lambda days, _: days >= 60,
    ),
    Tier(
        rule="A little rusty",
        points=1,
        note="Last flight {value} days ago.",
        matches=lambda days, _: days >= 30,
    ),
)


@register
class RecencyRule:
    @staticmethod
    def catalog_entry() -> RuleCatalogEntry:
        return RuleCatalogEntry(
            id="recency",
            name="Recency",
            category="currency",
            description="60 or more days since your last flight, or 30 or more.",
            max_points=tier_max_points(TIERS),
        )

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None:
        return first_tier(TIERS, ctx.profile.currency.last_flight_days_ago)
