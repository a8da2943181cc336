"""FastAPI dependencies for the profile store and weather client."""

from __future__ import annotations

from fastapi import Request

from pilotready.fetch.aviationweather import AviationWeatherClient
from pilotready.storage.profile import ProfileStore


def get_store(request: Request) -> ProfileStore:
    return ProfileStore(request.app.state.data_dir)


def get_weather_client() -> AviationWeatherClient:
    return AviationWeatherClient()
