"""FastAPI application for fitplan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..agents.client import GeminiTextGenerator, TextGenerator
from ..agents.generator import PlanGenerator
from ..config import Settings
from ..db.engine import init_db
from ..db.repositories import PlanRepository, UserRepository
from ..errors import AuthError
from .routers import auth, fitness

logger = logging.getLogger(__name__)


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=401, content={"success": False, "message": str(exc)})


def create_app(
    settings: Settings | None = None,
    text_generator: TextGenerator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings (read from the environment if omitted)
        text_generator: AI backend; a Gemini client is built when omitted and
            an API key is configured
    """
    if settings is None:
        settings = Settings.from_env()

    logging.basicConfig(level=settings.log_level)

    if text_generator is None and settings.gemini_api_key:
        text_generator = GeminiTextGenerator(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
        )
    if text_generator is None:
        logger.warning("GEMINI_API_KEY is not set; plan generation will be unavailable")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        await init_db(settings.database_path)
        logger.info("Database ready at %s", settings.database_path)
        yield

    app = FastAPI(
        title="fitplan",
        description="AI-generated workout and diet plans",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    users = UserRepository(settings.database_path)
    plans = PlanRepository(settings.database_path)

    # Shared, read-only per request
    app.state.settings = settings
    app.state.users = users
    app.state.plans = plans
    app.state.plan_generator = PlanGenerator(
        text_generator=text_generator,
        users=users,
        plans=plans,
        timeout=settings.generation_timeout,
        max_retries=settings.max_retries,
        base_delay=settings.base_delay,
        cancel_on_timeout=settings.cancel_on_timeout,
    )

    app.add_exception_handler(AuthError, auth_error_handler)

    app.include_router(auth.router)
    app.include_router(fitness.router)

    @app.get("/")
    async def root():
        return {"message": "Fitness API Server is running!"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
