"""AI plan generation."""

from .client import GeminiTextGenerator, GenerationConfig, TextGenerator
from .generator import GenerationResult, PlanGenerator
from .retry import retry_with_backoff
from .timeout import race_with_timeout
from .validators import validate_diet_plan, validate_workout_plan

__all__ = [
    "GeminiTextGenerator",
    "GenerationConfig",
    "GenerationResult",
    "PlanGenerator",
    "race_with_timeout",
    "retry_with_backoff",
    "TextGenerator",
    "validate_diet_plan",
    "validate_workout_plan",
]
