"""Web server command."""

import click

from .base import ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: $PORT or 5600)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int | None, reload: bool):
    """Start the API server.

    Examples:

        # Start on the configured port
        fitplan serve

        # Expose to network (all interfaces)
        fitplan serve --host 0.0.0.0 --port 8080
    """
    settings = ensure_initialized(ctx)
    port = port or settings.port

    import uvicorn

    from ..web import create_app

    click.echo(click.style("Starting fitplan API server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()

    uvicorn.run(
        create_app(settings) if not reload else "fitplan.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
