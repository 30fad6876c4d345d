"""Runtime configuration loaded from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def database_path_from_url(url: str | None) -> Path:
    """Resolve a ``DATABASE_URL`` into a SQLite file path.

    Accepts ``sqlite:///relative/path.db``, ``sqlite:////absolute/path.db``
    or a bare filesystem path.
    """
    if not url:
        return DATA_DIR / "fitplan.db"
    if url.startswith("sqlite:///"):
        url = url[len("sqlite:///"):]
    return Path(url)


@dataclass
class Settings:
    """Application settings."""

    jwt_secret: str | None = None
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-1.5-flash"
    port: int = 5600
    frontend_url: str = "http://localhost:3000"
    database_path: Path = DATA_DIR / "fitplan.db"
    token_expiry_hours: float = 1
    generation_timeout: float = 45.0
    max_retries: int = 3
    base_delay: float = 1.0
    cancel_on_timeout: bool = True
    require_password: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Settings":
        """Build settings from environment variables (and a .env file if present)."""
        load_dotenv(env_file)
        return cls(
            jwt_secret=os.getenv("JSON_WEB_SECRET") or None,
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
            port=int(os.getenv("PORT", 5600)),
            frontend_url=os.getenv("FRONTEND_URL", "http://localhost:3000"),
            database_path=database_path_from_url(os.getenv("DATABASE_URL")),
            token_expiry_hours=float(os.getenv("TOKEN_EXPIRY_HOURS", 1)),
            generation_timeout=float(os.getenv("GENERATION_TIMEOUT_SECONDS", 45)),
            max_retries=int(os.getenv("GENERATION_MAX_RETRIES", 3)),
            base_delay=float(os.getenv("GENERATION_BASE_DELAY_SECONDS", 1.0)),
            cancel_on_timeout=_env_bool("GENERATION_CANCEL_ON_TIMEOUT", True),
            require_password=_env_bool("REQUIRE_PASSWORD", False),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
