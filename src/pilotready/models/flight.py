"""Planned conditions for one flight check."""

from __future__ import annotations

from pydantic import BaseModel


class FlightInput(BaseModel):
    """One flight's planned conditions. Not persisted.

    Crosswind is the reported wind speed, not a runway-relative component.
    """

    departure: str = ""
    destination: str = ""
    when: str = ""  # free text, not parsed
    is_night: bool = False

    crosswind_kt: float = 6
    ceiling_ft: float = 3500
    visibility_sm: float = 10
    gust_spread_kt: float = 4
