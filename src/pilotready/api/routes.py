"""API endpoints for profiles, flight checks, METAR parsing and rules."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from pilotready.analysis.decision import normalize_identifier
from pilotready.analysis.metar import parse_metar
from pilotready.analysis.rules import get_catalog
from pilotready.api.deps import get_store, get_weather_client
from pilotready.config import default_profile
from pilotready.fetch.aviationweather import AviationWeatherClient
from pilotready.models import (
    Decision,
    FlightInput,
    MetarParse,
    PilotProfile,
    RuleCatalogEntry,
    StationWeather,
)
from pilotready.pipeline import run_check
from pilotready.storage.profile import ProfileStore

logger = logging.getLogger(__name__)

router = APIRouter()

NAME_REQUIRED = "full_name of at least 2 characters is required"


class DecideRequest(BaseModel):
    """Request body for a flight check.

    ``profile`` defaults to the saved profile.
    """

    profile: PilotProfile | None = None
    flight: FlightInput
    auto_weather: bool = False


class DecideResponse(BaseModel):
    decision: Decision
    weather: StationWeather | None = None
    parsed_metar: MetarParse | None = None
    weather_message: str | None = None


class ParseMetarRequest(BaseModel):
    raw: str


class ProfileResponse(BaseModel):
    profile: PilotProfile
    saved: bool
    configured: bool


# --- Profile ---


@router.get("/profile", response_model=ProfileResponse)
def get_profile(store: ProfileStore = Depends(get_store)):
    """Saved profile, or the defaults when nothing is saved."""
    saved = store.load()
    profile = saved or default_profile()
    return ProfileResponse(profile=profile, saved=saved is not None, configured=profile.is_configured)


@router.put("/profile", response_model=ProfileResponse)
def put_profile(profile: PilotProfile, store: ProfileStore = Depends(get_store)):
    """Replace the saved profile."""
    if not profile.is_configured:
        raise HTTPException(status_code=422, detail=NAME_REQUIRED)
    store.save(profile)
    return ProfileResponse(profile=profile, saved=True, configured=profile.is_configured)


@router.delete("/profile", status_code=204)
def delete_profile(store: ProfileStore = Depends(get_store)):
    store.clear()


# --- Decisions ---


@router.post("/decide", response_model=DecideResponse)
def post_decide(
    req: DecideRequest,
    store: ProfileStore = Depends(get_store),
    client: AviationWeatherClient = Depends(get_weather_client),
):
    """Score a flight against the given (or saved) pilot profile."""
    profile = req.profile or store.load()
    if profile is None:
        raise HTTPException(status_code=404, detail="No saved profile")
    if not profile.is_configured:
        raise HTTPException(status_code=422, detail=NAME_REQUIRED)

    result = run_check(profile, req.flight, auto_weather=req.auto_weather, client=client)
    fill = result.fill
    return DecideResponse(
        decision=result.decision,
        weather=fill.weather if fill else None,
        parsed_metar=fill.parsed if fill else None,
        weather_message=fill.message if fill else None,
    )


# --- Weather ---


@router.post("/metar/parse", response_model=MetarParse)
def post_parse_metar(req: ParseMetarRequest):
    return parse_metar(req.raw)


@router.get("/weather/{ident}")
def get_weather(ident: str, client: AviationWeatherClient = Depends(get_weather_client)):
    """Latest raw METAR/TAF for one station, with the METAR parsed."""
    station = normalize_identifier(ident)
    if not station:
        raise HTTPException(status_code=400, detail="Invalid identifier")

    metar = client.fetch_metar(station)
    taf = client.fetch_taf(station)
    return {
        "station": station,
        "metar": metar,
        "taf": taf,
        "parsed": parse_metar(metar).model_dump() if metar else None,
    }


@router.get("/rules", response_model=list[RuleCatalogEntry])
def list_rules():
    return get_catalog()
