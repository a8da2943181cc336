"""Overlay parsed METAR fields onto a flight's planned conditions."""

from __future__ import annotations

from pilotready.models import FlightInput, MetarParse


def apply_metar(flight: FlightInput, parsed: MetarParse | None) -> FlightInput:
    """Return a copy of ``flight`` with whatever the METAR could tell us.

    Wind speed stands in for crosswind (no runway geometry). Gust spread is
    recomputed only when a gust was reported. Unknown fields are untouched.
    """
    if parsed is None:
        return flight

    update: dict[str, float] = {}
    wind = parsed.wind_speed if parsed.wind_speed is not None else flight.crosswind_kt
    if parsed.wind_speed is not None:
        update["crosswind_kt"] = parsed.wind_speed
    if parsed.gust is not None:
        update["gust_spread_kt"] = max(0, parsed.gust - wind)
    if parsed.ceiling_ft is not None:
        update["ceiling_ft"] = parsed.ceiling_ft
    if parsed.visibility_sm is not None:
        update["visibility_sm"] = parsed.visibility_sm

    return FlightInput.model_validate({**flight.model_dump(), **update})
