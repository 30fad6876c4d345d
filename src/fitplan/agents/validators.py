"""Normalization of AI-generated plans into strict shapes."""

import math
import re
from typing import Any

from ..errors import PlanParseError
from ..models.plan import DietPlan, ExerciseDay, Meal, Routine, WorkoutPlan

DEFAULT_SETS = 1
DEFAULT_REPS = 10
DEFAULT_DAILY_CALORIES = 2000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def coerce_int(value: Any, default: int) -> int:
    """Coerce an upstream numeric field to an integer.

    Integers pass through untouched. Floats are truncated. Text is parsed from
    its leading digits ("12 reps" -> 12). Anything else, or text that parses
    to zero, falls back to ``default``.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1)) or default
    return default


def _require_list(data: dict, key: str, what: str) -> list:
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, list):
        raise PlanParseError(f"{what} is missing the '{key}' array")
    return value


def _require_object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise PlanParseError(f"{what} is not a JSON object")
    return value


def _require_str(data: dict, key: str, what: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise PlanParseError(f"{what} is missing the '{key}' text")
    return value


def _require_strings(values: list, what: str) -> list[str]:
    if not all(isinstance(value, str) for value in values):
        raise PlanParseError(f"{what} must only contain text entries")
    return values


def validate_workout_plan(data: dict) -> WorkoutPlan:
    """Normalize a generated workout plan.

    Keeps only ``schedule``, ``exercises[].day`` and
    ``exercises[].routines[].{name,sets,reps}``.
    """
    schedule = _require_strings(_require_list(data, "schedule", "Workout plan"), "Workout schedule")
    exercises = _require_list(data, "exercises", "Workout plan")

    days = []
    for exercise in exercises:
        routines = _require_list(exercise, "routines", "Workout day")
        days.append(
            ExerciseDay(
                day=_require_str(exercise, "day", "Workout day"),
                routines=[
                    _validate_routine(_require_object(routine, "Routine"))
                    for routine in routines
                ],
            )
        )

    return WorkoutPlan(schedule=schedule, exercises=days)


def validate_diet_plan(data: dict) -> DietPlan:
    """Normalize a generated diet plan to ``dailyCalories`` and ``meals[].{name,foods}``."""
    meals = _require_list(data, "meals", "Diet plan")

    return DietPlan(
        daily_calories=coerce_int(data.get("dailyCalories"), DEFAULT_DAILY_CALORIES),
        meals=[_validate_meal(_require_object(meal, "Meal")) for meal in meals],
    )


def _validate_routine(routine: dict) -> Routine:
    return Routine(
        name=_require_str(routine, "name", "Routine"),
        sets=coerce_int(routine.get("sets"), DEFAULT_SETS),
        reps=coerce_int(routine.get("reps"), DEFAULT_REPS),
    )


def _validate_meal(meal: dict) -> Meal:
    # A meal without foods is kept with an empty list.
    foods = meal["foods"] if meal.get("foods") is not None else []
    if not isinstance(foods, list):
        raise PlanParseError("Meal 'foods' is not an array")
    return Meal(
        name=_require_str(meal, "name", "Meal"),
        foods=_require_strings(foods, "Meal foods"),
    )
