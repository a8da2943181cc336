"""Night currency rule: night flight without night-passenger currency."""

from __future__ import annotations

from pilotready.analysis.rules import RuleContext
from pilotready.analysis.rules.registry import register
from pilotready.models import RuleCatalogEntry, TriggeredRule

POINTS = 3


@register
class NightCurrencyRule:
    @staticmethod
    def catalog_entry() -> RuleCatalogEntry:
        return RuleCatalogEntry(
            id="night_currency",
            name="Night currency",
            category="currency",
            description="Night flight while not night-passenger current.",
            max_points=POINTS,
        )

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None:
        if ctx.flight.is_night and not ctx.profile.currency.night_passenger_current:
            return TriggeredRule(
                rule="Not night-passenger current",
                points=POINTS,
                note="You marked that you're not night-passenger current.",
            )
        return None
