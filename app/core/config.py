from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    database_url: str = "sqlite:///./weather.db"
    # None means "use the client's built-in Open-Meteo endpoint"
    weather_api_base_url: str | None = None
    weather_api_timeout_seconds: float = 10.0
    log_level: str = "INFO"
    auto_create_schema: bool = True
    frontend_origins: list[str] = field(default_factory=list)

    @classmethod
    def load(cls) -> "Settings":
        # Load .env file if present (no-op if not)
        load_dotenv()

        # Comma-separated, e.g. FRONTEND_ORIGINS="http://localhost:3000,http://10.5.0.2:3000"
        raw_origins = os.getenv("FRONTEND_ORIGINS", "http://localhost:3000,http://localhost:8000")
        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            weather_api_base_url=os.getenv("WEATHER_API_BASE_URL") or None,
            weather_api_timeout_seconds=float(os.getenv("WEATHER_API_TIMEOUT_SECONDS", "10")),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            auto_create_schema=_as_bool(os.getenv("AUTO_CREATE_SCHEMA"), True),
            frontend_origins=[o.strip() for o in raw_origins.split(",") if o.strip()],
        )


settings = Settings.load()
