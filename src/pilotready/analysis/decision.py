"""Go/no-go decision engine.

Scores a pilot profile against one flight's conditions. Pure and
deterministic: the same inputs always produce the same decision.
"""

from __future__ import annotations

import logging
import re

from pilotready.analysis.rules import RuleContext, evaluate_all
from pilotready.models import (
    MAX_BULLETS,
    Decision,
    DecisionTech,
    FlightInput,
    GoStatus,
    PilotProfile,
)

logger = logging.getLogger(__name__)

FALLBACK_NAME = "Friend"
NOTHING_TRIGGERED = "Nothing here jumps out as a problem based on what you entered."

_TITLES = {
    GoStatus.GO: "{name}, I like this one.",
    GoStatus.CAUTION: "{name}, this one's flyable, but it's pushing your usual comfort zone.",
    GoStatus.NO_GO: "{name}, I'd call this a no-go based on your limits.",
}

_NON_IDENT = re.compile(r"[^A-Z0-9]")


def normalize_identifier(ident: str) -> str:
    """Normalize an airport identifier: uppercase A-Z/0-9 only, max 6 chars."""
    return _NON_IDENT.sub("", ident.strip().upper())[:6]


def pilot_name(profile: PilotProfile) -> str:
    """How the pilot is addressed: nickname, else first name, else a greeting."""
    if profile.nickname and profile.nickname.strip():
        return profile.nickname.strip()
    tokens = profile.full_name.split()
    return tokens[0] if tokens else FALLBACK_NAME


def decide(profile: PilotProfile, flight: FlightInput) -> Decision:
    """Score a flight against the pilot's personal minimums.

    Every rule category is evaluated independently; the score is the sum of
    triggered points. Bullets are the highest-point notes, ties kept in
    evaluation order.
    """
    triggered = evaluate_all(RuleContext(profile=profile, flight=flight))
    score = sum(r.points for r in triggered)
    status = GoStatus.from_score(score)

    ranked = sorted(triggered, key=lambda r: r.points, reverse=True)
    bullets = [r.note for r in ranked[:MAX_BULLETS]] or [NOTHING_TRIGGERED]

    logger.debug("Decision %s (score %d, %d rules)", status.value, score, len(ranked))

    inputs = flight.model_copy(update={
        "departure": normalize_identifier(flight.departure),
        "destination": normalize_identifier(flight.destination),
    })

    return Decision(
        status=status,
        score=score,
        title_line=_TITLES[status].format(name=pilot_name(profile)),
        bullets=bullets,
        tech=DecisionTech(
            inputs=inputs,
            profile=profile.model_copy(deep=True),
            rules_triggered=ranked,
        ),
    )
