"""Serialization module — export plans and results to UI-shaped JSON."""

from workout_engine.serialization.json_export import (
    pipeline_result_to_dict,
    recommendation_to_dict,
    result_to_dict,
    to_dict,
    to_json_string,
)

__all__ = [
    "pipeline_result_to_dict",
    "recommendation_to_dict",
    "result_to_dict",
    "to_dict",
    "to_json_string",
]
