"""Data models for fitplan."""

from .plan import DietPlan, ExerciseDay, Meal, Plan, Routine, WorkoutPlan
from .request import GenerationRequest
from .user import User

__all__ = [
    "DietPlan",
    "ExerciseDay",
    "GenerationRequest",
    "Meal",
    "Plan",
    "Routine",
    "User",
    "WorkoutPlan",
]
