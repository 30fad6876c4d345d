"""Tests for plan validators."""

import pytest

from fitplan.agents.validators import (
    DEFAULT_DAILY_CALORIES,
    DEFAULT_REPS,
    DEFAULT_SETS,
    coerce_int,
    validate_diet_plan,
    validate_workout_plan,
)
from fitplan.errors import PlanParseError


class TestCoerceInt:
    """Tests for coerce_int."""

    @pytest.mark.parametrize("value", [1, 3, 12, 250])
    def test_integers_preserved(self, value):
        assert coerce_int(value, 99) == value

    @pytest.mark.parametrize("text,expected", [("3", 3), ("12", 12), (" 15", 15), ("8 reps", 8)])
    def test_numeric_text_parsed(self, text, expected):
        assert coerce_int(text, 99) == expected

    @pytest.mark.parametrize("value", ["To failure", "", "As many as possible", None, [], {}, True])
    def test_unparsable_uses_default(self, value):
        assert coerce_int(value, 7) == 7

    def test_float_truncated(self):
        assert coerce_int(3.7, 1) == 3

    def test_non_finite_float_uses_default(self):
        assert coerce_int(float("nan"), 5) == 5
        assert coerce_int(float("inf"), 5) == 5


class TestValidateWorkoutPlan:
    """Tests for validate_workout_plan."""

    def test_numeric_fields_coerced(self):
        plan = validate_workout_plan({
            "schedule": ["Monday"],
            "exercises": [{
                "day": "Monday",
                "routines": [
                    {"name": "Squat", "sets": "4", "reps": 8},
                    {"name": "Plank", "sets": "lots", "reps": "To failure"},
                ],
            }],
        })

        squat, plank = plan.exercises[0].routines
        assert (squat.sets, squat.reps) == (4, 8)
        assert (plank.sets, plank.reps) == (DEFAULT_SETS, DEFAULT_REPS)

    def test_extra_fields_dropped(self):
        plan = validate_workout_plan({
            "schedule": ["Monday", "Thursday"],
            "notes": "warm up first",
            "exercises": [{
                "day": "Monday",
                "focus": "legs",
                "routines": [{"name": "Squat", "sets": 3, "reps": 5, "notes": "belt", "duration": "10m"}],
            }],
        })

        assert plan.to_dict() == {
            "schedule": ["Monday", "Thursday"],
            "exercises": [{
                "day": "Monday",
                "routines": [{"name": "Squat", "sets": 3, "reps": 5}],
            }],
        }

    def test_schedule_order_preserved(self):
        plan = validate_workout_plan({"schedule": ["Friday", "Monday"], "exercises": []})
        assert plan.schedule == ["Friday", "Monday"]

    @pytest.mark.parametrize("data", [
        {"exercises": []},
        {"schedule": []},
        {"schedule": "Monday", "exercises": []},
        {"schedule": [], "exercises": [{"day": "Monday"}]},
        [],
    ])
    def test_missing_arrays_rejected(self, data):
        with pytest.raises(PlanParseError):
            validate_workout_plan(data)

    @pytest.mark.parametrize("schedule", [[1, 2], ["Monday", None], ["Monday", {"day": "Tuesday"}]])
    def test_non_text_schedule_rejected(self, schedule):
        with pytest.raises(PlanParseError):
            validate_workout_plan({"schedule": schedule, "exercises": []})

    @pytest.mark.parametrize("exercise", [
        {"routines": []},
        {"day": 1, "routines": []},
        {"day": "Monday", "routines": [{"sets": 3, "reps": 5}]},
        {"day": "Monday", "routines": [{"name": None, "sets": 3, "reps": 5}]},
    ])
    def test_missing_day_or_routine_name_rejected(self, exercise):
        with pytest.raises(PlanParseError):
            validate_workout_plan({"schedule": ["Monday"], "exercises": [exercise]})


class TestValidateDietPlan:
    """Tests for validate_diet_plan."""

    def test_calories_text_parsed(self):
        plan = validate_diet_plan({"dailyCalories": "2400", "meals": []})
        assert plan.daily_calories == 2400

    def test_calories_number_preserved(self):
        plan = validate_diet_plan({"dailyCalories": 1850, "meals": []})
        assert plan.daily_calories == 1850

    @pytest.mark.parametrize("value", ["lots", None, "", "about right"])
    def test_unparsable_calories_default(self, value):
        plan = validate_diet_plan({"dailyCalories": value, "meals": []})
        assert plan.daily_calories == DEFAULT_DAILY_CALORIES

    def test_extra_fields_dropped(self):
        plan = validate_diet_plan({
            "dailyCalories": 2000,
            "supplements": ["creatine"],
            "meals": [{"name": "Breakfast", "foods": ["Eggs", "Toast"], "notes": "early"}],
        })

        assert plan.to_dict() == {
            "dailyCalories": 2000,
            "meals": [{"name": "Breakfast", "foods": ["Eggs", "Toast"]}],
        }

    def test_missing_meals_rejected(self):
        with pytest.raises(PlanParseError):
            validate_diet_plan({"dailyCalories": 2000})

    @pytest.mark.parametrize("foods", ["Oatmeal", 3, {"item": "Oatmeal"}, ["Oatmeal", 2]])
    def test_malformed_foods_rejected(self, foods):
        with pytest.raises(PlanParseError):
            validate_diet_plan({"dailyCalories": 2000, "meals": [{"name": "Breakfast", "foods": foods}]})

    def test_missing_foods_become_empty(self):
        plan = validate_diet_plan({"dailyCalories": 2000, "meals": [{"name": "Snack"}]})
        assert plan.meals[0].foods == []

    @pytest.mark.parametrize("meal", [{"foods": ["Eggs"]}, {"name": 4, "foods": ["Eggs"]}])
    def test_missing_meal_name_rejected(self, meal):
        with pytest.raises(PlanParseError):
            validate_diet_plan({"dailyCalories": 2000, "meals": [meal]})
