"""Experience modifiers: low total time and low recent time.

Both add a small buffer rather than flagging a specific hazard.
"""

from __future__ import annotations

from pilotready.analysis.rules import RuleContext
from pilotready.analysis.rules._helpers import Tier, first_tier
from pilotready.analysis.rules.registry import register
from pilotready.models import RuleCatalogEntry, TriggeredRule

LOW_TOTAL_HOURS = 100
LOW_RECENT_HOURS = 10

TOTAL_TIERS = (
    Tier(
        rule="Low total time (extra buffer)",
        points=1,
        note="Total time {value}h. I add a little buffer for newer pilots.",
        matches=lambda hours, _: hours < LOW_TOTAL_HOURS,
    ),
)

RECENT_TIERS = (
    Tier(
        rule="Low recent time",
        points=1,
        note="Only {value}h in the last 90 days.",
        matches=lambda hours, _: hours < LOW_RECENT_HOURS,
    ),
)


@register
class TotalExperienceRule:
    @staticmethod
    def catalog_entry() -> RuleCatalogEntry:
        return RuleCatalogEntry(
            id="total_experience",
            name="Total experience",
            category="experience",
            description=f"Fewer than {LOW_TOTAL_HOURS} total hours.",
            max_points=1,
        )

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None:
        return first_tier(TOTAL_TIERS, ctx.profile.total_hours)


@register
class RecentExperienceRule:
    @staticmethod
    def catalog_entry() -> RuleCatalogEntry:
        return RuleCatalogEntry(
            id="recent_experience",
            name="Recent experience",
            category="experience",
            description=f"Fewer than {LOW_RECENT_HOURS} hours in the last 90 days.",
            max_points=1,
        )

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None:
        return first_tier(RECENT_TIERS, ctx.profile.hours_90_days)
