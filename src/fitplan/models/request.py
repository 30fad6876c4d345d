"""Inbound plan generation request."""

from dataclasses import dataclass
from typing import Any

_FIELDS = (
    "user_id",
    "age",
    "height",
    "weight",
    "injuries",
    "workout_days",
    "fitness_goal",
    "fitness_level",
    "dietary_restrictions",
)


@dataclass
class GenerationRequest:
    """Biometrics and preferences for one generation call.

    Values are kept as the caller sent them; they are only embedded into
    prompts, so no coercion happens here.
    """

    user_id: str | None = None
    age: Any = None
    height: Any = None
    weight: Any = None
    injuries: str | None = None
    workout_days: Any = None
    fitness_goal: str | None = None
    fitness_level: str | None = None
    dietary_restrictions: str | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> "GenerationRequest":
        """Create from a request body, ignoring unknown keys."""
        data = data or {}
        values = {name: data.get(name) for name in _FIELDS}
        if values["user_id"] is not None:
            values["user_id"] = str(values["user_id"]).strip() or None
        return cls(**values)
