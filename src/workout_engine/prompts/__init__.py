from workout_engine.prompts.renderer import render_prompt
from workout_engine.prompts.selector import (
    PromptSelector,
    SelectionFactors,
    determine_complexity_level,
)
from workout_engine.prompts.templates import TEMPLATES, get_template

__all__ = [
    "PromptSelector",
    "SelectionFactors",
    "TEMPLATES",
    "determine_complexity_level",
    "get_template",
    "render_prompt",
]
