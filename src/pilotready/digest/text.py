"""Plain text formatter for decisions and parsed METARs."""

from __future__ import annotations

from pilotready.models import Decision, MetarParse, StationWeather

SEPARATOR = "=" * 60

CROSSWIND_NOTE = (
    "Note: crosswind is approximated from wind speed. "
    "Runway-relative crosswind is not computed."
)


def format_decision(decision: Decision, show_tech: bool = False) -> str:
    """Format a decision: status, headline, bullets and optional audit details."""
    lines: list[str] = []

    lines.append(SEPARATOR)
    lines.append(f"  My call: {decision.status.value}")
    lines.append(SEPARATOR)
    lines.append(decision.title_line)
    lines.append("")
    for bullet in decision.bullets:
        lines.append(f"  - {bullet}")

    if show_tech:
        lines.append("")
        lines.extend(_format_tech(decision))

    lines.append(SEPARATOR)
    return "\n".join(lines)


def _format_tech(decision: Decision) -> list[str]:
    tech = decision.tech
    lines = ["--- Technical details ---", f"  Score: {decision.score}", "  Triggered rules:"]
    if tech.rules_triggered:
        for r in tech.rules_triggered:
            lines.append(f"    {r.rule} (+{r.points}): {r.note}")
    else:
        lines.append("    No rules triggered.")

    lines.append("  Inputs:")
    for line in tech.model_dump_json(indent=2, exclude={"rules_triggered"}).splitlines():
        lines.append(f"    {line}")
    return lines


def format_weather(weather: StationWeather) -> str:
    """Raw METAR/TAF texts for display, departure first."""
    lines: list[str] = []
    for label, text in (
        ("Departure METAR", weather.departure_metar),
        ("Destination METAR", weather.destination_metar),
        ("DEP TAF", weather.departure_taf),
        ("DEST TAF", weather.destination_taf),
    ):
        if text:
            lines.append(f"{label}:")
            lines.append(f"  {text}")
    if weather.has_metar:
        lines.append(CROSSWIND_NOTE)
    return "\n".join(lines)


def _or_unknown(value: object, unit: str = "") -> str:
    if value is None:
        return "unknown"
    return f"{value}{unit}"


def format_metar(parsed: MetarParse) -> str:
    """Format parsed METAR fields, one per line."""
    if parsed.wind_variable:
        wind_dir = "VRB"
    else:
        wind_dir = _or_unknown(parsed.wind_dir)
    return "\n".join([
        f"Raw:        {parsed.raw}",
        f"Station:    {_or_unknown(parsed.station)}",
        f"Wind:       {wind_dir} @ {_or_unknown(parsed.wind_speed, 'kt')}"
        f" gust {_or_unknown(parsed.gust, 'kt')}",
        f"Visibility: {_or_unknown(parsed.visibility_sm, 'sm')}",
        f"Ceiling:    {_or_unknown(parsed.ceiling_ft, 'ft')}",
    ])
