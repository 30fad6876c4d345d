"""User provisioning commands."""

import click

from ..db import UserRepository
from ..models.user import User
from ..web.security import hash_password
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table


@click.group()
def users():
    """Manage users."""
    pass


@users.command("add")
@click.argument("email")
@click.option("--name", default="", help="Display name")
@click.option("--image", default=None, help="Profile image URL")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.pass_context
@async_command
async def add_user(ctx: click.Context, email: str, name: str, image: str | None, password: str):
    """Create a user that can log in to the API."""
    settings = ensure_initialized(ctx)
    repo = UserRepository(settings.database_path)

    if await repo.get_by_email(email):
        echo_error(f"A user with email {email} already exists")
        ctx.exit(1)

    user = User(
        email=email,
        name=name,
        password_hash=hash_password(password),
        profile_pic=image,
    )
    user_id = await repo.create(user)
    echo_success(f"Created user {email} (ID: {user_id})")


@users.command("list")
@click.pass_context
@async_command
async def list_users(ctx: click.Context):
    """List all users."""
    settings = ensure_initialized(ctx)
    all_users = await UserRepository(settings.database_path).list_all()

    if not all_users:
        echo_info("No users yet. Add one with 'fitplan users add'.")
        return

    rows = [
        [u.id, u.email, u.name or "-", u.created_at.strftime("%Y-%m-%d") if u.created_at else "-"]
        for u in all_users
    ]
    click.echo(format_table(["ID", "Email", "Name", "Created"], rows))
