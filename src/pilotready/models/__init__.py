"""Pydantic v2 models for pilotready.

Re-exports from submodules so ``from pilotready.models import X`` keeps working.
"""

from pilotready.models.decision import (  # noqa: F401
    CAUTION_SCORE,
    MAX_BULLETS,
    NO_GO_SCORE,
    Decision,
    DecisionTech,
    GoStatus,
    RuleCatalogEntry,
    TriggeredRule,
)
from pilotready.models.flight import FlightInput  # noqa: F401
from pilotready.models.metar import MetarParse, StationWeather  # noqa: F401
from pilotready.models.profile import (  # noqa: F401
    Certificate,
    Currency,
    PersonalMinimums,
    PilotProfile,
)
