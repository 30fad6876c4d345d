"""CLI entry point for fitplan."""

import click

from . import __version__
from .commands import init, plans, serve, users


@click.group()
@click.version_option(version=__version__, prog_name="fitplan")
@click.pass_context
def main(ctx: click.Context):
    """fitplan: AI-generated workout and diet plans.

    Example usage:

        # Create the database
        fitplan init

        # Add a user who can log in
        fitplan users add you@example.com

        # Run the API
        fitplan serve --port 5600
    """
    ctx.ensure_object(dict)


# Register commands
main.add_command(init)
main.add_command(users)
main.add_command(plans)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
