"""Enumerations and tuning constants for the workout engine.

String-valued enums serialize to the same tokens the UI layer sends, so
``FitnessLevel("beginner")`` round-trips with raw profile data.
"""

from enum import Enum, IntEnum


class FitnessLevel(str, Enum):
    """Canonical five-level fitness model.

    The presentation-layer experience strings ("New to Exercise",
    "Some Experience", "Advanced Athlete") are aliases resolved by the
    context transformers; they never appear here.
    """

    BEGINNER = "beginner"
    NOVICE = "novice"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ADAPTIVE = "adaptive"


class WorkoutIntensity(str, Enum):
    """Profile-level calculated intensity."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class SessionIntensity(str, Enum):
    """Per-workout intensity derived from the energy rating."""

    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"


class AssistanceLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    FULL = "full"


class RecommendationType(str, Enum):
    EXERCISE = "exercise"
    INTENSITY = "intensity"
    DURATION = "duration"
    EQUIPMENT = "equipment"
    FOCUS = "focus"
    GENERAL = "general"


class RecommendationSource(str, Enum):
    """Which side of the context produced a recommendation."""

    PROFILE = "profile"
    WORKOUT = "workout"
    COMBINED = "combined"


class Priority(IntEnum):
    """Recommendation priority tiers; higher value ranks first.

    Priority is always derived from confidence (see
    ``strategy.ranking.priority_for_confidence``).
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3


class Severity(str, Enum):
    """Validation issue severity. Only ERROR blocks a context."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class EngineStatus(str, Enum):
    """PromptEngine state machine states."""

    IDLE = "idle"
    ANALYZING_PROFILE = "analyzing_profile"
    ANALYZING_WORKOUT = "analyzing_workout"
    GENERATING_RECOMMENDATIONS = "generating_recommendations"
    VALIDATING = "validating"
    COMPLETE = "complete"
    ERROR = "error"


class ErrorType(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CONTEXT = "INVALID_CONTEXT"
    TIMEOUT = "TIMEOUT"


class WorkoutType(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    HIIT = "hiit"


# ---------------------------------------------------------------------------
# Confidence model
# ---------------------------------------------------------------------------

HIGH_PRIORITY_CONFIDENCE = 0.8  # priority == HIGH iff confidence >= this
MEDIUM_PRIORITY_CONFIDENCE = 0.6  # priority == MEDIUM iff confidence >= this
DEFAULT_INSIGHT_CONFIDENCE = 0.7  # evaluator omitted a confidence
DEFAULT_CONFIDENCE_THRESHOLD = 0.7

# Weights used when scoring a source bucket (confidence × weight).
SCORE_WEIGHTS: dict[Priority, float] = {
    Priority.HIGH: 1.0,
    Priority.MEDIUM: 0.7,
    Priority.LOW: 0.4,
}

# ---------------------------------------------------------------------------
# Bucketing boundaries (inclusive upper bounds)
# ---------------------------------------------------------------------------

DURATION_BUCKETS: tuple[tuple[float, str], ...] = (
    (15, "short"),
    (30, "moderate"),
    (45, "standard"),
    (60, "extended"),
)
DURATION_BUCKET_OVERFLOW = "long"

SORENESS_BUCKETS: tuple[tuple[float, str], ...] = (
    (0, "none"),
    (2, "minimal"),
    (4, "mild"),
    (6, "moderate"),
    (8, "significant"),
)
SORENESS_BUCKET_OVERFLOW = "severe"

ENERGY_BUCKETS: tuple[tuple[float, str], ...] = (
    (3, "low"),
    (5, "moderate_low"),
    (7, "moderate"),
    (8, "moderate_high"),
)
ENERGY_BUCKET_OVERFLOW = "high"

# Fallbacks for malformed numeric input
DEFAULT_DURATION_MIN = 45
DEFAULT_ENERGY_RATING = 5
DEFAULT_SORENESS_RATING = 0

# ---------------------------------------------------------------------------
# Soft validation thresholds
# ---------------------------------------------------------------------------

SHORT_DURATION_WARNING_MIN = 15
LOW_ENERGY_WARNING = 3
HIGH_SORENESS_WARNING = 7

# ---------------------------------------------------------------------------
# Fallback workout generation
# ---------------------------------------------------------------------------

MINUTES_PER_EXERCISE = 5
MIN_EXERCISES = 4
MAX_EXERCISES_BY_TIER: dict[str, int] = {
    "beginner": 8,
    "intermediate": 12,
    "advanced": 15,
}
MAX_EXERCISES_DEFAULT = 10

BASE_REST_SECONDS = 60
REST_SECONDS_BY_TIER: dict[str, int] = {
    "beginner": 90,
    "advanced": 45,
}
REST_INTENSITY_SCALE: dict[SessionIntensity, float] = {
    SessionIntensity.LIGHT: 1.2,
    SessionIntensity.INTENSE: 0.8,
}
BETWEEN_SETS_FRACTION = 0.7

WARMUP_FRACTION = 0.10
COOLDOWN_FRACTION = 0.08
MIN_WARMUP_COOLDOWN_MIN = 5

DEFAULT_SETS = 3
DEFAULT_REPS = 12

EXERCISE_RECOMMENDATION_CONFIDENCE = 0.8
NOTE_RECOMMENDATION_CONFIDENCE = 0.9
SORENESS_NOTE_RATING = 7
