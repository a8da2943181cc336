"""Decision rule framework.

Each rule category compares one flight condition (or profile fact) against a
threshold and contributes at most one tier of points.

Usage:
    from pilotready.analysis.rules import RuleContext, evaluate_all, get_catalog

    ctx = RuleContext(profile=..., flight=...)
    triggered = evaluate_all(ctx)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from pilotready.models import FlightInput, PilotProfile, RuleCatalogEntry, TriggeredRule


@dataclass(frozen=True)
class RuleContext:
    """Immutable data bag passed to all rule evaluators."""

    profile: PilotProfile
    flight: FlightInput


@runtime_checkable
class RuleEvaluator(Protocol):
    """Protocol for rule evaluator classes."""

    @staticmethod
    def catalog_entry() -> RuleCatalogEntry: ...

    @staticmethod
    def evaluate(ctx: RuleContext) -> TriggeredRule | None: ...


from pilotready.analysis.rules.registry import evaluate_all, get_catalog  # noqa: E402, F401
