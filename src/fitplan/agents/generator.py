"""Plan generation orchestration."""

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from ..db.repositories import PlanRepository, UserRepository
from ..errors import NotFoundError, PlanParseError, UpstreamConfigError, ValidationError
from ..models.plan import DietPlan, Plan, WorkoutPlan
from ..models.request import GenerationRequest
from .client import TextGenerator
from .prompts import build_diet_prompt, build_workout_prompt
from .retry import retry_with_backoff
from .timeout import race_with_timeout
from .validators import validate_diet_plan, validate_workout_plan

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Result returned to the caller after a plan is stored."""

    plan_id: str
    workout_plan: WorkoutPlan
    diet_plan: DietPlan

    def to_dict(self) -> dict:
        return {
            "planId": self.plan_id,
            "workoutPlan": self.workout_plan.to_dict(),
            "dietPlan": self.diet_plan.to_dict(),
        }


def plan_name(fitness_goal: str | None, created: date) -> str:
    """Display name for a new plan, e.g. ``"Build muscle Plan - 3/7/2025"``."""
    return f"{fitness_goal} Plan - {created.month}/{created.day}/{created.year}"


def parse_json_object(text: str, what: str) -> dict:
    """Parse generated text that must hold a JSON object."""
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise PlanParseError(f"{what} response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PlanParseError(f"{what} response is not a JSON object")
    return data


class PlanGenerator:
    """Generates, validates and stores a workout + diet plan for a user."""

    def __init__(
        self,
        text_generator: TextGenerator | None,
        users: UserRepository,
        plans: PlanRepository,
        timeout: float = 45.0,
        max_retries: int = 3,
        base_delay: float = 1.0,
        cancel_on_timeout: bool = True,
        today: Callable[[], date] = date.today,
    ):
        self.text_generator = text_generator
        self.users = users
        self.plans = plans
        self.timeout = timeout
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.cancel_on_timeout = cancel_on_timeout
        self.today = today

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Run the full generation under the configured deadline.

        Raises:
            GenerationTimeoutError: The deadline passed before the plan was stored
            ValidationError: ``user_id`` is missing
            NotFoundError: The user does not exist
            UpstreamTransientError: The provider kept rate-limiting after all retries
            UpstreamConfigError: The provider is disabled or no API key is configured
            PlanParseError: The provider returned malformed plan data
        """
        return await race_with_timeout(
            self._generate(request),
            self.timeout,
            cancel_on_timeout=self.cancel_on_timeout,
        )

    async def _generate(self, request: GenerationRequest) -> GenerationResult:
        if not request.user_id:
            raise ValidationError("user_id is required")
        if self.text_generator is None:
            raise UpstreamConfigError("AI provider API key is not configured (SERVICE_DISABLED)")

        logger.info("Generating workout and diet plans in parallel for user %s", request.user_id)

        workout_text, diet_text = await self._generate_both(
            build_workout_prompt(request),
            build_diet_prompt(request),
        )
        logger.info("Both plans generated for user %s", request.user_id)

        workout_plan = validate_workout_plan(parse_json_object(workout_text, "Workout plan"))
        diet_plan = validate_diet_plan(parse_json_object(diet_text, "Diet plan"))

        user = await self.users.get(request.user_id)
        if user is None:
            raise NotFoundError("User not found")

        plan = Plan(
            user_id=user.id,
            name=plan_name(request.fitness_goal, self.today()),
            email=user.email,
            image=user.profile_pic or "",
            workout_plan=workout_plan,
            diet_plan=diet_plan,
            is_active=True,
        )
        plan_id = await self.plans.create(plan)
        logger.info("Stored plan %s for user %s", plan_id, user.id)

        return GenerationResult(plan_id=plan_id, workout_plan=workout_plan, diet_plan=diet_plan)

    async def _generate_both(self, workout_prompt: str, diet_prompt: str) -> tuple[str, str]:
        """Dispatch both prompts concurrently; either failure fails both."""
        tasks = [
            asyncio.ensure_future(self._complete(workout_prompt)),
            asyncio.ensure_future(self._complete(diet_prompt)),
        ]
        try:
            workout_text, diet_text = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        return workout_text, diet_text

    async def _complete(self, prompt: str) -> str:
        return await retry_with_backoff(
            lambda: self.text_generator.generate(prompt),
            max_retries=self.max_retries,
            base_delay=self.base_delay,
        )
