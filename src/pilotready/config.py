"""Default profile/flight configuration loaded from YAML."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from pilotready.models import FlightInput, PilotProfile

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"


def data_dir() -> Path:
    return Path(os.environ.get("PILOTREADY_DATA_DIR", "data"))


def _config_dir(config_dir: Path | None) -> Path:
    if config_dir is not None:
        return config_dir
    env = os.environ.get("PILOTREADY_CONFIG_DIR")
    return Path(env) if env else CONFIG_DIR


def _load_defaults(config_dir: Path | None) -> dict:
    defaults_file = _config_dir(config_dir) / "defaults.yaml"
    if not defaults_file.exists():
        return {}

    with open(defaults_file) as f:
        data = yaml.safe_load(f)

    return data or {}


def default_profile(config_dir: Path | None = None) -> PilotProfile:
    """Profile used on first run and after a reset.

    Args:
        config_dir: Override for config directory (testing).
    """
    return PilotProfile.model_validate(_load_defaults(config_dir).get("profile") or {})


def default_flight(config_dir: Path | None = None) -> FlightInput:
    """Starting conditions for a new flight check."""
    return FlightInput.model_validate(_load_defaults(config_dir).get("flight") or {})
