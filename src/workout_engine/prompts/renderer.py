"""Render a selected template into the final generation prompt."""

from __future__ import annotations

from collections.abc import Sequence

from workout_engine.config import EngineConfig
from workout_engine.models.context import Context
from workout_engine.models.enums import Priority
from workout_engine.models.prompt import PromptTemplate
from workout_engine.models.recommendation import Recommendation
from workout_engine.strategy.ranking import sort_recommendations

KEY_RECOMMENDATION_LIMIT = 3
NO_EQUIPMENT_LABEL = "bodyweight"


def _label(token: str) -> str:
    return token.replace("_", " ")


def render_prompt(
    template: PromptTemplate,
    context: Context,
    recommendations: Sequence[Recommendation],
    config: EngineConfig | None = None,
) -> str:
    """Fill the workout placeholders and append a personalized context block.

    Args:
        template: Output of ``PromptSelector.select_prompt_template``.
        context: Complete pipeline context.
        recommendations: Ranked recommendations.
        config: ``safety_checks`` gates the injury line.

    Returns:
        The prompt text.
    """
    config = config or EngineConfig()
    workout = context.workout
    profile = context.profile
    if workout is None or profile is None:
        raise ValueError("Rendering requires profile and workout context")

    equipment = ", ".join(_label(e) for e in workout.equipment) or NO_EQUIPMENT_LABEL
    prompt = (
        template.template.replace("{focus}", _label(workout.focus))
        .replace("{duration}", str(workout.duration))
        .replace("{energy}", str(workout.energy_level))
        .replace("{equipment}", equipment)
    )

    lines = [f"User Goal: {profile.primary_goal}"]
    if profile.injuries and config.safety_checks:
        lines.append(f"Injuries to Avoid: {', '.join(_label(i) for i in profile.injuries)}")

    key = [r for r in sort_recommendations(recommendations) if r.priority == Priority.HIGH]
    if key:
        lines.append(
            "Key Recommendations:\n"
            + "\n".join(f"- {r.content}" for r in key[:KEY_RECOMMENDATION_LIMIT])
        )

    return prompt + "\n\nPersonalized Context:\n" + "\n".join(lines)
