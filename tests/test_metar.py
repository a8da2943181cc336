"""Tests for the METAR parser."""

from __future__ import annotations

import pytest

from pilotready.analysis.metar import parse_metar

KCGF = "KCGF 211751Z 21012G18KT 10SM BKN020 OVC035 22/18 A2992"
KAKR = "KAKR 211751Z VRB04KT 1/2SM"


def test_full_report():
    m = parse_metar(KCGF)
    assert m.raw == KCGF
    assert m.station == "KCGF"
    assert m.wind_dir == 210
    assert m.wind_speed == 12
    assert m.gust == 18
    assert m.visibility_sm == 10
    assert m.ceiling_ft == 2000
    assert not m.wind_variable


def test_variable_wind_fractional_visibility():
    m = parse_metar(KAKR)
    assert m.station == "KAKR"
    assert m.wind_dir is None
    assert m.wind_speed == 4
    assert m.wind_variable
    assert m.gust is None
    assert m.visibility_sm == 0.5
    assert m.ceiling_ft is None


@pytest.mark.parametrize("raw", ["", "   ", "KCGF", "  KCGF  "])
def test_too_short_is_all_absent(raw):
    m = parse_metar(raw)
    assert m.raw == raw
    assert m.station is None
    assert m.wind_dir is None
    assert m.wind_speed is None
    assert m.gust is None
    assert m.visibility_sm is None
    assert m.ceiling_ft is None


def test_garbage_never_raises():
    m = parse_metar("this is not a weather report at all")
    assert m.station == "THIS"
    assert m.wind_speed is None
    assert m.visibility_sm is None
    assert m.ceiling_ft is None


@pytest.mark.parametrize("first, station", [
    ("kcgf", "KCGF"),
    ("K1GF", None),
    ("KCGFX", None),
    ("211751Z", None),
])
def test_station(first, station):
    assert parse_metar(f"{first} 211751Z 21012KT").station == station


def test_three_digit_speed_and_gust():
    m = parse_metar("KXYZ 211751Z 270105G130KT 3SM")
    assert (m.wind_dir, m.wind_speed, m.gust) == (270, 105, 130)


def test_first_wind_group_wins():
    m = parse_metar("KXYZ 211751Z 18005KT 10SM RMK 27030KT")
    assert m.wind_speed == 5


@pytest.mark.parametrize("wind", ["27005MPS", "2705KT", "27005G1KT", "VRB4KT"])
def test_unrecognised_wind(wind):
    assert parse_metar(f"KXYZ 211751Z {wind} 10SM").wind_speed is None


@pytest.mark.parametrize("vis, expected", [
    ("10SM", 10),
    ("3SM", 3),
    ("1/4SM", 0.25),
    ("1 1/2SM", 1.5),
    ("2 3/4SM", 2.75),
    ("P6SM", None),
    ("M1/4SM", None),
    ("9999", None),
    ("100SM", None),
])
def test_visibility_forms(vis, expected):
    assert parse_metar(f"KXYZ 211751Z 21012KT {vis} CLR").visibility_sm == expected


def test_visibility_first_match_wins():
    assert parse_metar("KXYZ 211751Z 5SM 1/2SM").visibility_sm == 5


def test_zero_denominator_stops_scan():
    assert parse_metar("KXYZ 211751Z 1/0SM 10SM").visibility_sm is None


def test_ceiling_is_lowest_qualifying_layer():
    m = parse_metar("KXYZ 211751Z 21012KT 10SM FEW005 SCT008 OVC035 BKN012")
    assert m.ceiling_ft == 1200


def test_vertical_visibility_is_ceiling():
    assert parse_metar("KXYZ 211751Z 00000KT 1/4SM FG VV002").ceiling_ft == 200


def test_surface_layer_counts():
    assert parse_metar("KXYZ 211751Z 00000KT 1/4SM FG BKN000 OVC010").ceiling_ft == 0


@pytest.mark.parametrize("sky", ["CLR", "SKC", "FEW010 SCT020", "BKN20", "OVC0100", "BKN020CB"])
def test_no_ceiling(sky):
    assert parse_metar(f"KXYZ 211751Z 21012KT 10SM {sky}").ceiling_ft is None


def test_fields_resolved_independently():
    """A missing wind group doesn't stop visibility or ceiling parsing."""
    m = parse_metar("KXYZ 211751Z 3SM OVC008")
    assert m.wind_speed is None
    assert m.visibility_sm == 3
    assert m.ceiling_ft == 800


def test_whitespace_runs():
    m = parse_metar("  KCGF\t211751Z   21012KT\n10SM  ")
    assert m.station == "KCGF"
    assert m.wind_speed == 12
    assert m.visibility_sm == 10
