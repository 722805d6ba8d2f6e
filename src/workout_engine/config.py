"""Engine configuration — immutable, with environment and partial overrides."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass

from workout_engine.models.enums import DEFAULT_CONFIDENCE_THRESHOLD

_ENV_PREFIX = "WORKOUT_ENGINE_"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(_ENV_PREFIX + name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EngineConfig:
    """Recognized pipeline options.

    Attributes:
        enable_detailed_analysis: Reserved for evaluator tuning; no effect
            on the core algorithm.
        prioritize_user_preferences: Restrict fallback library picks to
            exercises the selected equipment supports.
        safety_checks: Gate injury / soreness caveats in workout notes and
            the injury line in rendered prompts.
        max_recommendations: Truncation limit applied by the engine.
        confidence_threshold: Minimum confidence a recommendation needs to
            survive filtering (0-1).
        analysis_timeout: Milliseconds allowed for the evaluator fan-out.
    """

    enable_detailed_analysis: bool = True
    prioritize_user_preferences: bool = True
    safety_checks: bool = True
    max_recommendations: int = 10
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    analysis_timeout: int = 30000

    def with_updates(self, **changes: object) -> EngineConfig:
        """Return a copy with *changes* applied (unknown keys raise TypeError)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config from ``WORKOUT_ENGINE_*`` environment variables."""
        defaults = cls()
        return cls(
            enable_detailed_analysis=_env_bool(
                "ENABLE_DETAILED_ANALYSIS", defaults.enable_detailed_analysis
            ),
            prioritize_user_preferences=_env_bool(
                "PRIORITIZE_USER_PREFERENCES", defaults.prioritize_user_preferences
            ),
            safety_checks=_env_bool("SAFETY_CHECKS", defaults.safety_checks),
            max_recommendations=int(
                os.environ.get(_ENV_PREFIX + "MAX_RECOMMENDATIONS", defaults.max_recommendations)
            ),
            confidence_threshold=float(
                os.environ.get(_ENV_PREFIX + "CONFIDENCE_THRESHOLD", defaults.confidence_threshold)
            ),
            analysis_timeout=int(
                os.environ.get(_ENV_PREFIX + "ANALYSIS_TIMEOUT", defaults.analysis_timeout)
            ),
        )
