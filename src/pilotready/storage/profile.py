"""Pilot profile persistence: one JSON document under a fixed versioned key."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from pilotready.config import data_dir
from pilotready.models import PilotProfile

logger = logging.getLogger(__name__)

PROFILE_KEY = "pilotready.profile.v1"


class ProfileStore:
    """Load/save/clear the pilot profile.

    A missing or unreadable profile loads as ``None``; the caller falls back
    to defaults.
    """

    def __init__(self, root: Path | None = None, key: str = PROFILE_KEY):
        self.root = root or data_dir()
        self.key = key

    @property
    def path(self) -> Path:
        return self.root / f"{self.key}.json"

    def load(self) -> PilotProfile | None:
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text())
            return PilotProfile.model_validate(raw)
        except (OSError, ValueError, ValidationError):
            logger.warning("Ignoring unreadable profile at %s", self.path, exc_info=True)
            return None

    def save(self, profile: PilotProfile) -> Path:
        """Write the whole profile, replacing any previous one."""
        self.root.mkdir(parents=True, exist_ok=True)
        self.path.write_text(profile.model_dump_json(indent=2))
        logger.debug("Profile saved to %s", self.path)
        return self.path

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
