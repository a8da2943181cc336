"""Tests for the flight check pipeline."""

from __future__ import annotations

from pilotready.models import GoStatus
from pilotready.pipeline import (
    FETCH_FAILED_MESSAGE,
    MISSING_ROUTE_MESSAGE,
    autofill_from_weather,
    run_check,
)


def test_autofill_requires_both_identifiers(benign_flight, fake_weather):
    flight = benign_flight.model_copy(update={"destination": "  "})
    fill = autofill_from_weather(flight, client=fake_weather)
    assert fill.message == MISSING_ROUTE_MESSAGE
    assert fill.flight is flight
    assert fill.weather is None
    assert fake_weather.calls == []


def test_autofill_overlays_departure_metar(benign_flight, fake_weather):
    fill = autofill_from_weather(benign_flight, client=fake_weather)
    assert fill.message is None
    assert fill.parsed.station == "KCGF"
    assert fill.flight.crosswind_kt == 12
    assert fill.flight.gust_spread_kt == 6
    assert fill.flight.ceiling_ft == 2000
    assert fill.flight.visibility_sm == 10
    assert fill.weather.destination_metar.startswith("KAKR")
    assert fill.weather.departure_taf.startswith("TAF KCGF")
    assert fill.weather.destination_taf is None
    assert len(fake_weather.calls) == 4


def test_autofill_without_departure_metar(benign_flight, weather_client_factory):
    client = weather_client_factory(metars={"KAKR": "KAKR 211751Z VRB04KT 1/2SM"})
    fill = autofill_from_weather(benign_flight, client=client)
    assert fill.parsed is None
    assert fill.flight == benign_flight
    assert fill.weather.destination_metar is not None


def test_autofill_fetch_failure(benign_flight):
    class BrokenClient:
        def fetch_metar(self, ident):
            raise RuntimeError("boom")

        def fetch_taf(self, ident):
            return None

    fill = autofill_from_weather(benign_flight, client=BrokenClient())
    assert fill.message == FETCH_FAILED_MESSAGE
    assert fill.flight is benign_flight


def test_run_check_without_weather(sample_profile, benign_flight, fake_weather):
    result = run_check(sample_profile, benign_flight, client=fake_weather)
    assert result.fill is None
    assert result.decision.status == GoStatus.GO
    assert fake_weather.calls == []


def test_run_check_with_weather(sample_profile, benign_flight, fake_weather):
    """KCGF: 12kt wind vs 10kt max (3) + gust spread 6 vs 8 (1) + ceiling 2000 (2)."""
    result = run_check(sample_profile, benign_flight, auto_weather=True, client=fake_weather)
    assert result.decision.score == 6
    assert result.decision.status == GoStatus.NO_GO
    assert result.decision.tech.inputs.crosswind_kt == 12
