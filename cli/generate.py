"""Command-line runner — generate a workout plan from profile/workout JSON.

Usage:
    python -m cli.generate --profile profile.json --workout workout.json
    python -m cli.generate --profile p.json --workout w.json --seed 7 --full
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import random
import sys
from pathlib import Path

from workout_engine.config import EngineConfig
from workout_engine.exceptions import WorkoutEngineError
from workout_engine.pipeline import WorkoutPipeline
from workout_engine.serialization import pipeline_result_to_dict, to_json_string

from cli.config import LOG_LEVEL, PROFILE_PATH, SEED, WORKOUT_PATH

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> dict:
    with open(path) as f:
        return json.load(f)


def build_config(args: argparse.Namespace) -> EngineConfig:
    """Environment defaults, overridden by any flags given on the command line."""
    config = EngineConfig.from_env()
    changes = {}
    if args.timeout_ms is not None:
        changes["analysis_timeout"] = args.timeout_ms
    if args.threshold is not None:
        changes["confidence_threshold"] = args.threshold
    if args.max_recommendations is not None:
        changes["max_recommendations"] = args.max_recommendations
    return config.with_updates(**changes) if changes else config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a workout plan")
    parser.add_argument("--profile", type=Path, default=PROFILE_PATH, help="Profile JSON file")
    parser.add_argument("--workout", type=Path, default=WORKOUT_PATH, help="Workout JSON file")
    parser.add_argument("--seed", type=int, default=SEED, help="Seed for exercise picks")
    parser.add_argument("--timeout-ms", type=int, default=None, help="Analysis timeout (ms)")
    parser.add_argument("--threshold", type=float, default=None, help="Confidence threshold")
    parser.add_argument("--max-recommendations", type=int, default=None)
    parser.add_argument(
        "--full",
        action="store_true",
        help="Print recommendations, template and prompt as well as the workout",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        profile = _load_json(args.profile)
        workout = _load_json(args.workout)
    except FileNotFoundError as exc:
        logger.error("Input not found: %s", exc.filename)
        return 2
    except json.JSONDecodeError as exc:
        logger.error("Invalid JSON input: %s", exc)
        return 2

    pipeline = WorkoutPipeline(config=build_config(args), rng=random.Random(args.seed))
    try:
        result = asyncio.run(pipeline.run(profile, workout))
    except WorkoutEngineError as exc:
        logger.error("Generation failed (%s): %s", exc.type.value, exc.message)
        return 1

    if args.full:
        print(json.dumps(pipeline_result_to_dict(result), indent=2))
    else:
        print(to_json_string(result.workout))
    return 0


if __name__ == "__main__":
    sys.exit(main())
