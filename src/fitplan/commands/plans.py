"""Plan inspection commands."""

import click

from ..db import PlanRepository, UserRepository
from .base import async_command, echo_error, echo_info, ensure_initialized, format_table


@click.group()
def plans():
    """Inspect generated plans."""
    pass


@plans.command("list")
@click.argument("email")
@click.pass_context
@async_command
async def list_plans(ctx: click.Context, email: str):
    """List the plans generated for a user."""
    settings = ensure_initialized(ctx)

    user = await UserRepository(settings.database_path).get_by_email(email)
    if user is None:
        echo_error(f"No user with email {email}")
        ctx.exit(1)

    user_plans = await PlanRepository(settings.database_path).list_by_user(user.id)
    if not user_plans:
        echo_info(f"No plans for {email}")
        return

    rows = [
        [
            p.id,
            p.name,
            str(p.workout_plan.days_per_week),
            str(p.diet_plan.daily_calories),
            "yes" if p.is_active else "no",
        ]
        for p in user_plans
    ]
    click.echo(format_table(["ID", "Name", "Days", "Calories", "Active"], rows))


@plans.command("show")
@click.argument("plan_id")
@click.pass_context
@async_command
async def show_plan(ctx: click.Context, plan_id: str):
    """Show a plan's workout and diet."""
    settings = ensure_initialized(ctx)

    plan = await PlanRepository(settings.database_path).get(plan_id)
    if plan is None:
        echo_error(f"Plan {plan_id} not found")
        ctx.exit(1)

    click.echo(plan.get_summary())
