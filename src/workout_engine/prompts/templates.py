"""Built-in prompt templates.

Placeholders: {focus} {duration} {energy} {equipment} {recommendations}.
``{recommendations}`` is filled by the selector; the rest by the renderer.
"""

from __future__ import annotations

from workout_engine.models.prompt import PromptTemplate

BEGINNER = "beginner"
INTERMEDIATE = "intermediate"
ADVANCED = "advanced"
RECOVERY = "recovery"
EQUIPMENT_FOCUSED = "equipment_focused"

RECOMMENDATIONS_PLACEHOLDER = "{recommendations}"

TEMPLATES: dict[str, PromptTemplate] = {
    BEGINNER: PromptTemplate(
        template=(
            "Create a {focus} workout for a beginner with {duration} minutes available.\n"
            "Focus on proper form and basic movements.\n"
            "Energy level is {energy}/10.\n"
            "{recommendations}"
        ),
        use_case="beginner_workout",
        confidence=0.9,
    ),
    INTERMEDIATE: PromptTemplate(
        template=(
            "Design a {focus} workout for an intermediate athlete.\n"
            "Duration: {duration} minutes\n"
            "Current energy: {energy}/10\n"
            "Include progressive overload and form cues.\n"
            "{recommendations}"
        ),
        use_case="intermediate_workout",
        confidence=0.85,
    ),
    ADVANCED: PromptTemplate(
        template=(
            "Create an advanced {focus} workout for {duration} minutes.\n"
            "Current energy level: {energy}/10\n"
            "Incorporate complex movements and intensity variations.\n"
            "{recommendations}"
        ),
        use_case="advanced_workout",
        confidence=0.8,
    ),
    RECOVERY: PromptTemplate(
        template=(
            "Design a recovery-focused {focus} workout.\n"
            "Duration: {duration} minutes\n"
            "Energy level: {energy}/10\n"
            "Focus on mobility and active recovery.\n"
            "{recommendations}"
        ),
        use_case="recovery_workout",
        confidence=0.95,
    ),
    EQUIPMENT_FOCUSED: PromptTemplate(
        template=(
            "Create a {focus} workout using: {equipment}.\n"
            "Duration: {duration} minutes\n"
            "Energy level: {energy}/10\n"
            "Maximize equipment usage for variety.\n"
            "{recommendations}"
        ),
        use_case="equipment_workout",
        confidence=0.85,
    ),
}


def get_template(name: str) -> PromptTemplate:
    """Look up a built-in template (KeyError for unknown names)."""
    return TEMPLATES[name]
