# 📄 File: growguide/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# Reads the service's knobs (database address, log format, allowed web origins...) from the
# environment so the same code runs on a laptop, in tests and in production.
#
# 🧪 Purpose (Technical Summary):
# pydantic-settings model with .env support, normalizing validators for enumerated values
# and derived properties (assembled async database URL, CORS origin list, environment checks).
#
# 🔗 Dependencies:
# - pydantic / pydantic-settings
#
# 🔄 Connected Modules / Calls From:
# - growguide.main (application factory, uvicorn runner)
# - growguide.shared.config.database (engine configuration)
# - growguide.shared.utils.logging (log level, format, file)
# - migrations/env.py (database URL)

from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_CHOICES: Dict[str, Tuple[str, ...]] = {
    "ENVIRONMENT": ("development", "staging", "production", "test"),
    "LOG_LEVEL": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    "LOG_FORMAT": ("json", "text"),
}


class Settings(BaseSettings):
    """
    GrowGuide configuration.

    Values come from the process environment first, then an optional
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # --- service -------------------------------------------------------------
    APP_NAME: str = Field(default="GrowGuide API")
    APP_VERSION: str = Field(default="1.0.0")
    APP_DESCRIPTION: str = Field(default="Cultivation tracking with setup-wide day entries")
    ENVIRONMENT: str = Field(default="development", description="development/staging/production/test")
    DEBUG: bool = Field(default=False, description="Expose /docs and error types in 500 bodies")

    # --- logging -------------------------------------------------------------
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json", description="json or text")
    LOG_FILE: Optional[str] = Field(default=None, description="Also write logs to this file")

    # --- uvicorn -------------------------------------------------------------
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    RELOAD: bool = Field(default=False, description="Auto-reload (development only)")
    WORKERS: int = Field(default=1, ge=1)

    # --- database ------------------------------------------------------------
    DATABASE_URL: Optional[str] = Field(default=None, description="Full async URL; overrides DB_*")
    DB_HOST: str = Field(default="localhost")
    DB_PORT: int = Field(default=5432)
    DB_NAME: str = Field(default="growguide")
    DB_USER: str = Field(default="postgres")
    DB_PASSWORD: str = Field(default="")
    DB_ECHO: bool = Field(default=False, description="Log every SQL statement")
    DB_POOL_SIZE: int = Field(default=10, ge=1)
    DB_MAX_OVERFLOW: int = Field(default=20, ge=0)
    DB_POOL_TIMEOUT: int = Field(default=30, ge=1, description="Seconds to wait for a pooled connection")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Seconds before a connection is replaced")

    # --- http ----------------------------------------------------------------
    CORS_ORIGINS: str = Field(default="http://localhost:3000", description="Comma separated")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True)
    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Per-client limits on write endpoints")

    @field_validator("ENVIRONMENT", "LOG_FORMAT")
    @classmethod
    def lowercase_choice(cls, v: str, info) -> str:
        return cls._pick(info.field_name, v.lower())

    @field_validator("LOG_LEVEL")
    @classmethod
    def uppercase_choice(cls, v: str, info) -> str:
        return cls._pick(info.field_name, v.upper())

    @classmethod
    def _pick(cls, field_name: str, value: str) -> str:
        allowed = _CHOICES[field_name]
        if value not in allowed:
            raise ValueError(f"{field_name} must be one of {', '.join(allowed)}")
        return value

    @field_validator("CORS_ORIGINS")
    @classmethod
    def check_origins(cls, v: str) -> str:
        for origin in v.split(","):
            origin = origin.strip()
            if origin != "*" and not origin.startswith(("http://", "https://")):
                raise ValueError(f"CORS origin must be '*' or an http(s) URL: {origin!r}")
        return v

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings()
