"""Shared utilities for rule evaluators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pilotready.models import TriggeredRule


@dataclass(frozen=True)
class Tier:
    """One severity tier of a rule category.

    ``note`` is a format template receiving ``value`` and ``limit``.
    """

    rule: str
    points: int
    note: str
    matches: Callable[[float, float], bool]


def format_number(value: float) -> str:
    """Render a number the way a pilot writes it: 10, not 10.0."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def below_limit(limit: float, margin: float) -> float:
    """Lower proximity bound ``limit - margin``, floored at zero."""
    return max(0, limit - margin)


def first_tier(
    tiers: tuple[Tier, ...],
    value: float,
    limit: float = 0,
) -> TriggeredRule | None:
    """Return the first tier whose predicate holds, most severe first."""
    for tier in tiers:
        if tier.matches(value, limit):
            return TriggeredRule(
                rule=tier.rule,
                points=tier.points,
                note=tier.note.format(
                    value=format_number(value), limit=format_number(limit)
                ),
            )
    return None


def tier_max_points(tiers: tuple[Tier, ...]) -> int:
    return max(t.points for t in tiers)
