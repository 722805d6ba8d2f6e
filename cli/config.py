"""Environment-variable-based configuration for the command-line runner."""

from __future__ import annotations

import os
from pathlib import Path

PROFILE_PATH: Path = Path(os.environ.get("WORKOUT_ENGINE_PROFILE", "profile.json"))
WORKOUT_PATH: Path = Path(os.environ.get("WORKOUT_ENGINE_WORKOUT", "workout.json"))
LOG_LEVEL: str = os.environ.get("WORKOUT_ENGINE_LOG_LEVEL", "INFO").upper()
SEED: int | None = (
    int(os.environ["WORKOUT_ENGINE_SEED"]) if os.environ.get("WORKOUT_ENGINE_SEED") else None
)
