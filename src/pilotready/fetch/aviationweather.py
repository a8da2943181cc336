"""AviationWeather.gov client for raw METAR and TAF text.

Only raw report text is returned; parsing is left to
``pilotready.analysis.metar``. Every failure (network, non-2xx, unexpected
payload) degrades to ``None``.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests

from pilotready.analysis.decision import normalize_identifier
from pilotready.models import StationWeather

logger = logging.getLogger(__name__)

AWC_BASE_URL = "https://aviationweather.gov/api/data"

_TIMEOUT_SECONDS = 15

# Field names seen across API versions, most specific first
_METAR_TEXT_KEYS = ("rawOb", "raw_text", "raw", "text")
_TAF_TEXT_KEYS = ("rawTAF", "raw_text", "raw", "text")


def _first_text(row: object, keys: tuple[str, ...]) -> str | None:
    if not isinstance(row, dict):
        return None
    for key in keys:
        value = row.get(key)
        if isinstance(value, str):
            return value
    return None


class AviationWeatherClient:
    """Client for fetching the latest METAR/TAF for a station."""

    def __init__(self, base_url: str | None = None, timeout: float = _TIMEOUT_SECONDS):
        self.base_url = base_url or os.environ.get("PILOTREADY_AWC_BASE_URL", AWC_BASE_URL)
        self.timeout = timeout
        self.session = requests.Session()

    def fetch_metar(self, ident: str) -> str | None:
        """Latest METAR text for ``ident``, or None."""
        return self._fetch("metar", ident, _METAR_TEXT_KEYS)

    def fetch_taf(self, ident: str) -> str | None:
        """Latest TAF text for ``ident``, or None."""
        return self._fetch("taf", ident, _TAF_TEXT_KEYS)

    def _fetch(self, product: str, ident: str, keys: tuple[str, ...]) -> str | None:
        station = normalize_identifier(ident)
        if not station:
            return None

        url = f"{self.base_url}/{product}"
        logger.info("Fetching %s for %s", product.upper(), station)
        try:
            resp = self.session.get(
                url,
                params={"ids": station, "format": "json"},
                headers={"Cache-Control": "no-store"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError):
            logger.warning("Failed to fetch %s for %s", product.upper(), station, exc_info=True)
            return None

        if isinstance(data, list) and data:
            return _first_text(data[0], keys)
        return None


def fetch_route_weather(
    departure: str,
    destination: str,
    client: AviationWeatherClient | None = None,
) -> StationWeather:
    """Fetch METAR and TAF for both ends of a flight in parallel.

    Four independent requests; any that fail simply leave their field None.
    """
    client = client or AviationWeatherClient()
    jobs = {
        "departure_metar": (client.fetch_metar, departure),
        "destination_metar": (client.fetch_metar, destination),
        "departure_taf": (client.fetch_taf, departure),
        "destination_taf": (client.fetch_taf, destination),
    }

    result: dict[str, str | None] = {}
    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        futures = {pool.submit(fn, ident): field for field, (fn, ident) in jobs.items()}
        for future in as_completed(futures):
            result[futures[future]] = future.result()

    return StationWeather(**result)
