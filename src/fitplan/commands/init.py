"""Initialize database command."""

import asyncio

import click

from ..db import init_db
from .base import echo_info, echo_success, get_settings


@click.command()
@click.pass_context
def init(ctx: click.Context):
    """Create the fitplan database and its schema."""
    settings = get_settings(ctx)

    echo_info(f"Initializing database at {settings.database_path}")
    asyncio.run(init_db(settings.database_path))
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Add a user:")
    click.echo("     fitplan users add you@example.com")
    click.echo()
    click.echo("  2. Start the API:")
    click.echo("     fitplan serve")
