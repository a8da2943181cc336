"""Pydantic v2 models for the go/no-go decision.

A decision is the sum of independently triggered rules. Each rule category
contributes at most one tier; the total score maps onto GO / CAUTION / NO-GO
using fixed cut points.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from pilotready.models.flight import FlightInput
from pilotready.models.profile import PilotProfile

NO_GO_SCORE = 6
CAUTION_SCORE = 3
MAX_BULLETS = 6


class GoStatus(str, Enum):
    """Advisory decision level."""

    GO = "GO"
    CAUTION = "CAUTION"
    NO_GO = "NO-GO"

    @classmethod
    def from_score(cls, score: int) -> GoStatus:
        if score >= NO_GO_SCORE:
            return cls.NO_GO
        if score >= CAUTION_SCORE:
            return cls.CAUTION
        return cls.GO


class TriggeredRule(BaseModel):
    """One rule that fired: its name, point value and explanation."""

    model_config = ConfigDict(frozen=True)

    rule: str
    points: int
    note: str


class RuleCatalogEntry(BaseModel):
    """Metadata for one rule category, enough for a client to list it."""

    id: str
    name: str
    category: str  # "weather", "currency", "experience"
    description: str
    max_points: int


class DecisionTech(BaseModel):
    """Audit record: exactly what was scored and which rules fired."""

    model_config = ConfigDict(frozen=True)

    inputs: FlightInput
    profile: PilotProfile
    rules_triggered: list[TriggeredRule] = Field(default_factory=list)


class Decision(BaseModel):
    """The engine's output."""

    model_config = ConfigDict(frozen=True)

    status: GoStatus
    score: int
    title_line: str
    bullets: list[str]
    tech: DecisionTech
