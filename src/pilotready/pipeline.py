"""Flight check pipeline, shared by CLI and API.

Orchestrates: optional weather fetch -> METAR parse -> overlay -> decide.
Returns structured results without printing or exiting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pilotready.analysis.decision import decide
from pilotready.analysis.metar import parse_metar
from pilotready.analysis.overlay import apply_metar
from pilotready.fetch.aviationweather import AviationWeatherClient, fetch_route_weather
from pilotready.models import Decision, FlightInput, MetarParse, PilotProfile, StationWeather

logger = logging.getLogger(__name__)

MISSING_ROUTE_MESSAGE = "Add both departure and destination ICAOs first."
FETCH_FAILED_MESSAGE = "Couldn't fetch weather right now. Try again in a minute."


@dataclass
class WeatherFill:
    """Outcome of a weather auto-fill attempt."""

    flight: FlightInput
    weather: StationWeather | None = None
    parsed: MetarParse | None = None
    message: str | None = None  # user-facing advisory when the fill failed


@dataclass
class CheckResult:
    """Structured result from a flight check."""

    decision: Decision
    fill: WeatherFill | None = None


def autofill_from_weather(
    flight: FlightInput,
    client: AviationWeatherClient | None = None,
) -> WeatherFill:
    """Fetch route weather and overlay the departure METAR onto ``flight``."""
    dep = flight.departure.strip()
    dest = flight.destination.strip()
    if not dep or not dest:
        return WeatherFill(flight=flight, message=MISSING_ROUTE_MESSAGE)

    try:
        weather = fetch_route_weather(dep, dest, client=client)
    except Exception:
        logger.warning("Weather auto-fill failed for %s -> %s", dep, dest, exc_info=True)
        return WeatherFill(flight=flight, message=FETCH_FAILED_MESSAGE)

    parsed = parse_metar(weather.departure_metar) if weather.departure_metar else None
    return WeatherFill(
        flight=apply_metar(flight, parsed),
        weather=weather,
        parsed=parsed,
    )


def run_check(
    profile: PilotProfile,
    flight: FlightInput,
    auto_weather: bool = False,
    client: AviationWeatherClient | None = None,
) -> CheckResult:
    """Full check: optional weather auto-fill, then score the flight."""
    fill = None
    if auto_weather:
        fill = autofill_from_weather(flight, client=client)
        flight = fill.flight

    return CheckResult(decision=decide(profile, flight), fill=fill)
