"""Pilot profile: experience, personal minimums and currency."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Certificate(str, Enum):
    """Pilot certificate level. Informational only, not scored."""

    STUDENT = "Student"
    PPL = "PPL"
    IR = "IR"
    CPL = "CPL"


class PersonalMinimums(BaseModel):
    """Pilot-chosen weather thresholds."""

    max_crosswind_kt: float = Field(default=10, ge=0)
    min_ceiling_ft: float = Field(default=2000, ge=0)
    min_visibility_sm: float = Field(default=5, ge=0)
    max_gust_spread_kt: float = Field(default=8, ge=0)


class Currency(BaseModel):
    """Recency and currency facts."""

    night_passenger_current: bool = True
    last_flight_days_ago: int = Field(default=14, ge=0)  # recency proxy


class PilotProfile(BaseModel):
    """The pilot's risk tolerance, scored as one complete snapshot."""

    full_name: str = ""
    nickname: str | None = None
    certificate: Certificate = Certificate.PPL
    total_hours: float = Field(default=80, ge=0)
    hours_90_days: float = Field(default=6, ge=0)
    typical_aircraft: str = "C172"
    minimums: PersonalMinimums = Field(default_factory=PersonalMinimums)
    currency: Currency = Field(default_factory=Currency)

    @property
    def is_configured(self) -> bool:
        """A profile needs a real name before flights can be checked."""
        return len(self.full_name.strip()) >= 2
