"""Workout, diet and persisted plan data models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Routine:
    """A single exercise prescription."""

    name: str
    sets: int = 1
    reps: int = 10

    def to_dict(self) -> dict:
        return {"name": self.name, "sets": self.sets, "reps": self.reps}


@dataclass
class ExerciseDay:
    """The routines scheduled for one day."""

    day: str
    routines: list[Routine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "routines": [r.to_dict() for r in self.routines],
        }


@dataclass
class WorkoutPlan:
    """A weekly workout schedule."""

    schedule: list[str]  # Day labels, order-significant
    exercises: list[ExerciseDay]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "schedule": list(self.schedule),
            "exercises": [e.to_dict() for e in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutPlan":
        """Create from an already validated dictionary."""
        return cls(
            schedule=list(data["schedule"]),
            exercises=[
                ExerciseDay(
                    day=e["day"],
                    routines=[
                        Routine(name=r["name"], sets=r["sets"], reps=r["reps"])
                        for r in e["routines"]
                    ],
                )
                for e in data["exercises"]
            ],
        )

    @property
    def days_per_week(self) -> int:
        return len(self.schedule)


@dataclass
class Meal:
    """A named meal and its foods."""

    name: str
    foods: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "foods": list(self.foods)}


@dataclass
class DietPlan:
    """A daily calorie target and the meals that make it up."""

    daily_calories: int
    meals: list[Meal]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "dailyCalories": self.daily_calories,
            "meals": [m.to_dict() for m in self.meals],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DietPlan":
        """Create from an already validated dictionary."""
        return cls(
            daily_calories=data["dailyCalories"],
            meals=[Meal(name=m["name"], foods=list(m["foods"])) for m in data["meals"]],
        )


@dataclass
class Plan:
    """A generated plan as stored for a user."""

    user_id: str
    name: str
    workout_plan: WorkoutPlan
    diet_plan: DietPlan
    email: str | None = None
    image: str = ""
    is_active: bool = True
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to the JSON shape returned by the API."""
        return {
            "_id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "email": self.email,
            "image": self.image,
            "workoutPlan": self.workout_plan.to_dict(),
            "dietPlan": self.diet_plan.to_dict(),
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def get_summary(self) -> str:
        """Generate a short text summary of the plan."""
        summary = f"Plan: {self.name}\n"
        summary += f"Schedule: {', '.join(self.workout_plan.schedule) or 'none'}\n"
        summary += f"Daily calories: {self.diet_plan.daily_calories}\n"

        for day in self.workout_plan.exercises:
            summary += f"  {day.day}:\n"
            for routine in day.routines:
                summary += f"    - {routine.name}: {routine.sets}x{routine.reps}\n"

        for meal in self.diet_plan.meals:
            summary += f"  {meal.name}: {', '.join(meal.foods)}\n"

        return summary
