"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pilotready.models import (
    Currency,
    FlightInput,
    PersonalMinimums,
    PilotProfile,
)

KCGF_METAR = "KCGF 211751Z 21012G18KT 10SM BKN020 OVC035 22/18 A2992"
KAKR_METAR = "KAKR 211751Z VRB04KT 1/2SM"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real data dir and weather service settings."""
    monkeypatch.setenv("PILOTREADY_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("PILOTREADY_AWC_BASE_URL", raising=False)
    monkeypatch.delenv("PILOTREADY_CONFIG_DIR", raising=False)


@pytest.fixture
def sample_profile():
    """Experienced, current pilot: no profile-only rules fire."""
    return PilotProfile(
        full_name="Jason Denisyuk",
        total_hours=250,
        hours_90_days=20,
        typical_aircraft="C172",
        minimums=PersonalMinimums(
            max_crosswind_kt=10,
            min_ceiling_ft=2000,
            min_visibility_sm=5,
            max_gust_spread_kt=8,
        ),
        currency=Currency(night_passenger_current=True, last_flight_days_ago=14),
    )


@pytest.fixture
def benign_flight():
    """Conditions comfortably inside the sample profile's minimums."""
    return FlightInput(
        departure="KCGF",
        destination="KAKR",
        when="2026-01-27 14:30",
        crosswind_kt=2,
        ceiling_ft=5000,
        visibility_sm=10,
        gust_spread_kt=0,
    )


@pytest.fixture
def worst_flight():
    """Night flight with every weather condition past its limit."""
    return FlightInput(
        departure="kcgf",
        destination="kakr",
        is_night=True,
        crosswind_kt=20,
        ceiling_ft=500,
        visibility_sm=1,
        gust_spread_kt=15,
    )


@pytest.fixture
def rusty_novice(sample_profile):
    """Profile that triggers every currency and experience rule."""
    return sample_profile.model_copy(update={
        "total_hours": 50,
        "hours_90_days": 2,
        "currency": Currency(night_passenger_current=False, last_flight_days_ago=90),
    })


class FakeWeatherClient:
    """Stands in for AviationWeatherClient; returns canned text per station."""

    def __init__(self, metars: dict[str, str] | None = None, tafs: dict[str, str] | None = None):
        self.metars = metars or {}
        self.tafs = tafs or {}
        self.calls: list[tuple[str, str]] = []

    def fetch_metar(self, ident: str) -> str | None:
        self.calls.append(("metar", ident))
        return self.metars.get(ident)

    def fetch_taf(self, ident: str) -> str | None:
        self.calls.append(("taf", ident))
        return self.tafs.get(ident)


@pytest.fixture
def fake_weather():
    return FakeWeatherClient(
        metars={"KCGF": KCGF_METAR, "KAKR": KAKR_METAR},
        tafs={"KCGF": "TAF KCGF 211720Z 2118/2218 21012KT P6SM BKN030"},
    )


@pytest.fixture
def weather_client_factory():
    return FakeWeatherClient
