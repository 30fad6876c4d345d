"""Prompt templates for workout and diet generation."""

from ..models.request import GenerationRequest


WORKOUT_PROMPT = """You are an experienced fitness coach creating a personalized workout plan based on:
Age: {age}
Height: {height}
Weight: {weight}
Injuries or limitations: {injuries}
Available days for workout: {workout_days}
Fitness goal: {fitness_goal}
Fitness level: {fitness_level}

As a professional coach:
- Split muscle groups so the same muscles are not trained on consecutive days
- Choose exercises that match the fitness level and work around any injuries
- Structure the week to target the stated fitness goal

SCHEMA RULES:
- Output ONLY the fields shown below, no additional fields
- "sets" and "reps" MUST be integers, never strings
- Do not write things like "reps": "To failure"; use a number such as "reps": 12
- For cardio use "sets": 1, "reps": 1 or another suitable number

Return a JSON object with exactly this structure:
{{
  "schedule": ["Monday", "Wednesday", "Friday"],
  "exercises": [
    {{
      "day": "Monday",
      "routines": [
        {{
          "name": "Exercise Name",
          "sets": 3,
          "reps": 10
        }}
      ]
    }}
  ]
}}

Respond with the JSON object only, no other text."""


DIET_PROMPT = """You are an experienced nutrition coach creating a personalized diet plan based on:
Age: {age}
Height: {height}
Weight: {weight}
Fitness goal: {fitness_goal}
Dietary restrictions: {dietary_restrictions}

As a professional nutrition coach:
- Work out a daily calorie target from the person's stats and goal
- Balance macronutrients across the meals
- Use varied, nutrient-dense foods that respect the dietary restrictions
- Time meals around training for performance and recovery

SCHEMA RULES:
- Output ONLY the fields shown below, no additional fields
- "dailyCalories" MUST be an integer, never a string
- Do not add "supplements", "macros", "notes" or any other field
- Each meal has only a "name" and a "foods" array

Return a JSON object with exactly this structure:
{{
  "dailyCalories": 2000,
  "meals": [
    {{
      "name": "Breakfast",
      "foods": ["Oatmeal with berries", "Greek yogurt", "Black coffee"]
    }},
    {{
      "name": "Lunch",
      "foods": ["Grilled chicken salad", "Whole grain bread", "Water"]
    }}
  ]
}}

Respond with the JSON object only, no other text."""


def _or_none(value) -> str:
    return value if value not in (None, "") else "None"


def build_workout_prompt(request: GenerationRequest) -> str:
    """Format the workout prompt for a request."""
    return WORKOUT_PROMPT.format(
        age=request.age,
        height=request.height,
        weight=request.weight,
        injuries=_or_none(request.injuries),
        workout_days=request.workout_days,
        fitness_goal=request.fitness_goal,
        fitness_level=request.fitness_level,
    )


def build_diet_prompt(request: GenerationRequest) -> str:
    """Format the diet prompt for a request."""
    return DIET_PROMPT.format(
        age=request.age,
        height=request.height,
        weight=request.weight,
        fitness_goal=request.fitness_goal,
        dietary_restrictions=_or_none(request.dietary_restrictions),
    )
