"""Crosswind rule: reported wind speed against the pilot's max crosswind."""

from __future__ import annotations

from pilotready.analysis.rules import RuleContext
from pilotready.analysis.rules._helpers import Tier, below_limit, first_tier, tier_max_points
from pilotready.analysis.rules.registry import register
from pilotready.models import RuleCatalogEntry, TriggeredRule

TIERS = (
    Tier(
        rule="Crosswind above your max",
        points=3,
        note="Crosswind {value}kt > your max {limit}kt.",
        matches=lambda cross, limit: cross > limit,
    ),
    Tier(
        rule="Crosswind near your max",
        points=2,
        note="Crosswind {value}kt is close to your max {limit}kt.",
        matches=lambda cross, limit: cross >= below_limit(limit, 3),
    ),
    Tier(
        rule="Crosswind worth a second look",
        points=1,
        note="Crosswind {value}kt is getting sporty for your limit {limit}kt.",
        matches=lambda cross, limit: cross >= below_limit(limit, 5),
    ),
)


@register
class CrosswindRule:
    """Scores crosswind proximity to the pilot's limit."""

    @staticmethod
    def catalog_entry() -> RuleCatalogEntry:
        return RuleCatalogEntry(
            id="crosswind",
            name="Crosswind",
            category="weather",
            description=(
                "Above your max crosswind, within 3kt of it, or within 5kt of it. "
                "Crosswind is approximated by the reported wind speed."
            ),
            max_points=tier_max_points(TIERS),
        )

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None:
        return first_tier(
            TIERS, ctx.flight.crosswind_kt, ctx.profile.minimums.max_crosswind_kt
        )
