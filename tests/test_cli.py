"""Tests for the command-line interface."""

from __future__ import annotations

import sys

import pytest

from pilotready import cli
from pilotready.storage.profile import ProfileStore


def _run(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["pilotready", *argv])
    cli.main()


def _run_failing(monkeypatch, capsys, *argv: str) -> str:
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, *argv)
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("Error:")
    return out


class TestProfile:
    def test_set_saves(self, monkeypatch, capsys):
        _run(monkeypatch, "profile", "set", "--name", "Jo Doe", "--total-hours", "120")
        assert "Profile saved" in capsys.readouterr().out
        saved = ProfileStore().load()
        assert saved.full_name == "Jo Doe"
        assert saved.total_hours == 120

    def test_negative_hours_is_an_error(self, monkeypatch, capsys):
        out = _run_failing(monkeypatch, capsys, "profile", "set", "--name", "Jo Doe", "--total-hours", "-5")
        assert "total_hours" in out
        assert ProfileStore().load() is None

    def test_single_letter_name_is_an_error(self, monkeypatch, capsys):
        out = _run_failing(monkeypatch, capsys, "profile", "set", "--name", "J")
        assert "--name" in out
        assert ProfileStore().load() is None

    def test_clear(self, monkeypatch, capsys, sample_profile):
        ProfileStore().save(sample_profile)
        _run(monkeypatch, "profile", "clear")
        assert ProfileStore().load() is None


class TestCheck:
    def test_requires_profile(self, monkeypatch, capsys):
        _run_failing(monkeypatch, capsys, "check", "--crosswind", "11")

    def test_crosswind_over_limit(self, monkeypatch, capsys, sample_profile):
        ProfileStore().save(sample_profile)
        _run(monkeypatch, "check", "--crosswind", "11")
        out = capsys.readouterr().out
        assert "My call: CAUTION" in out
        assert "Crosswind 11kt > your max 10kt." in out


def test_metar_requires_input(monkeypatch, capsys):
    _run_failing(monkeypatch, capsys, "metar")
