"""Pytest configuration and fixtures."""

import asyncio
import json
import tempfile
from pathlib import Path

import pytest

from fitplan.config import Settings
from fitplan.db import UserRepository, init_db
from fitplan.models.user import User
from fitplan.web.security import hash_password


WORKOUT_RESPONSE = {
    "schedule": ["Monday", "Wednesday", "Friday"],
    "exercises": [
        {
            "day": "Monday",
            "routines": [
                {"name": "Squat", "sets": 4, "reps": "8"},
                {"name": "Plank", "sets": "3 sets", "reps": "To failure"},
            ],
        },
        {
            "day": "Wednesday",
            "routines": [{"name": "Bench Press", "sets": 3, "reps": 10, "notes": "slow"}],
        },
    ],
}

DIET_RESPONSE = {
    "dailyCalories": "2400",
    "meals": [
        {"name": "Breakfast", "foods": ["Oatmeal", "Greek yogurt"]},
        {"name": "Lunch", "foods": ["Chicken salad"], "calories": 600},
    ],
    "macros": {"protein": 180},
}


class FakeTextGenerator:
    """Scripted stand-in for the AI provider.

    Each queue item is returned (str) or raised (exception) in order; the last
    item repeats once the queue is down to one.
    """

    def __init__(self, workout=None, diet=None, delay: float = 0.0):
        self.workout = list(workout) if workout is not None else [json.dumps(WORKOUT_RESPONSE)]
        self.diet = list(diet) if diet is not None else [json.dumps(DIET_RESPONSE)]
        self.delay = delay
        self.prompts: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1

        queue = self.workout if "fitness coach" in prompt else self.diet
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_path(temp_db_path):
    """A temporary database with the schema applied."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def sample_user(db_path):
    """A stored user with password 'correct-horse'."""
    user = User(
        email="a@b.com",
        name="Test User",
        password_hash=hash_password("correct-horse"),
        profile_pic="https://example.com/a.png",
    )
    asyncio.run(UserRepository(db_path).create(user))
    return user


@pytest.fixture
def settings(db_path):
    """Settings pointing at the temporary database with fast retries."""
    return Settings(
        jwt_secret="test-secret",
        gemini_api_key=None,
        database_path=db_path,
        generation_timeout=5.0,
        max_retries=3,
        base_delay=0.0,
    )


@pytest.fixture
def fake_generator():
    return FakeTextGenerator()
