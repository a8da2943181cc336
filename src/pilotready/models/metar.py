"""Structured METAR fields and raw station report bundles."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MetarParse(BaseModel):
    """Fields extracted from one raw METAR line.

    Every field except ``raw`` is independently optional: ``None`` means the
    parser could not determine it. A ``None`` wind direction alongside a known
    speed means the wind was reported as variable (VRB).
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    station: str | None = None
    wind_dir: int | None = None
    wind_speed: int | None = None
    gust: int | None = None
    visibility_sm: float | None = None
    ceiling_ft: int | None = None  # lowest BKN/OVC/VV layer

    @property
    def wind_variable(self) -> bool:
        return self.wind_speed is not None and self.wind_dir is None


class StationWeather(BaseModel):
    """Raw METAR/TAF text fetched for a departure/destination pair."""

    departure_metar: str | None = None
    destination_metar: str | None = None
    departure_taf: str | None = None
    destination_taf: str | None = None

    @property
    def has_metar(self) -> bool:
        return bool(self.departure_metar or self.destination_metar)

    @property
    def has_taf(self) -> bool:
        return bool(self.departure_taf or self.destination_taf)
