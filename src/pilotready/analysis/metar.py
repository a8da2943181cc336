"""Minimal METAR parser: station, wind, visibility and ceiling.

Handles common US formats such as ``21012G18KT 10SM BKN020 OVC035``. Fields
that cannot be recognised stay ``None``; the raw text is always kept so it
can still be shown.
"""

from __future__ import annotations

import re

from pilotready.models import MetarParse

_STATION = re.compile(r"[A-Z]{4}")
_WIND = re.compile(r"(VRB|[0-9]{3})([0-9]{2,3})(?:G([0-9]{2,3}))?KT")
_VIS_WHOLE = re.compile(r"([0-9]{1,2})SM")
_VIS_FRACTION = re.compile(r"([0-9])/([0-9])SM")
_VIS_WHOLE_PART = re.compile(r"[0-9]{1,2}")
_CEILING_LAYER = re.compile(r"(?:BKN|OVC|VV)([0-9]{3})")


def _parse_wind(tokens: list[str]) -> dict:
    for tok in tokens:
        m = _WIND.fullmatch(tok)
        if m:
            direction, speed, gust = m.groups()
            return {
                "wind_dir": None if direction == "VRB" else int(direction),
                "wind_speed": int(speed),
                "gust": int(gust) if gust else None,
            }
    return {}


def _fraction(m: re.Match) -> float | None:
    num, den = int(m.group(1)), int(m.group(2))
    return num / den if den else None


def _parse_visibility(tokens: list[str]) -> float | None:
    """First visibility group wins: ``10SM``, ``1/2SM`` or ``1 1/2SM``."""
    for i, tok in enumerate(tokens):
        m = _VIS_WHOLE.fullmatch(tok)
        if m:
            return float(m.group(1))

        m = _VIS_FRACTION.fullmatch(tok)
        if m:
            return _fraction(m)

        if _VIS_WHOLE_PART.fullmatch(tok) and i + 1 < len(tokens):
            m = _VIS_FRACTION.fullmatch(tokens[i + 1])
            if m:
                frac = _fraction(m)
                return int(tok) + frac if frac is not None else None
    return None


def _parse_ceiling(tokens: list[str]) -> int | None:
    """Lowest BKN/OVC/VV layer in feet. FEW/SCT/CLR are not ceilings."""
    heights = [
        int(m.group(1)) * 100
        for m in (_CEILING_LAYER.fullmatch(t) for t in tokens)
        if m
    ]
    return min(heights) if heights else None


def parse_metar(raw: str) -> MetarParse:
    """Parse one raw METAR line. Never raises."""
    tokens = raw.strip().split()
    if len(tokens) < 2:
        return MetarParse(raw=raw)

    station = tokens[0].upper()

    return MetarParse(
        raw=raw,
        station=station if _STATION.fullmatch(station) else None,
        visibility_sm=_parse_visibility(tokens),
        ceiling_ft=_parse_ceiling(tokens),
        **_parse_wind(tokens),
    )
