import logging
import os

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load .env for local dev; deployments use real env vars
load_dotenv(override=False)


def _bool(name: str, default: bool) -> bool:
    """
    Helper to parse boolean environment variables.
    Accepts: 1, true, yes, on (case-insensitive).
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseSettings):
    """
    Application configuration loaded from environment variables.
    Uses pydantic for validation and parsing.
    """

    CATALOG_DIR: str | None = Field(
        None, description="Directory with exercises.json and meals.json (defaults to bundled data)"
    )
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    API_PREFIX: str = Field("/api/v1", description="Prefix for API routers")
    CORS_ORIGINS: str = Field(
        "http://localhost:3000,http://127.0.0.1:3000",
        description="Comma-separated list of allowed CORS origins",
    )
    HOST: str = Field("0.0.0.0", description="Bind address for the API server")
    PORT: int = Field(8080, description="Port for the API server")

    # Feature flags
    FF_MEAL_OPTIONS: bool = Field(
        default_factory=lambda: _bool("FF_MEAL_OPTIONS", True),
        description="Expose per-slot meal swap options",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


SETTINGS = Config()  # pyright: ignore[reportCallIssue]
