"""
Centralized configuration management using pydantic-settings.
This module provides a single source of truth for all application configuration.
"""

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gamehub.utils.logger import setup_logger

# Real environment variables win over .env entries
load_dotenv()


logger = setup_logger("core_config")

SUPPORTED_DATABASE_PREFIXES = ("postgresql+asyncpg://", "sqlite+aiosqlite://")


class Settings(BaseSettings):
    """
    Application settings managed by pydantic-settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_prefix="",
    )

    # ===== Database Configuration =====
    app_database_url: str | None = Field(
        default=None,
        alias="GAMEHUB_DATABASE_URL",
        description="Application database URL (postgresql+asyncpg:// or sqlite+aiosqlite://)",
    )

    gamehub_schema: str = Field(
        default="gamehub",
        alias="GAMEHUB_SCHEMA",
        description="Postgres schema holding the GameHub tables (ignored on SQLite)",
    )

    # ===== Authentication Configuration =====
    jwt_secret_key: str | None = Field(
        default=None,
        alias="JWT_SECRET_KEY",
        description="Secret used to sign session tokens. Required at startup.",
    )

    jwt_algorithm: str = Field(
        default="HS256",
        alias="JWT_ALGORITHM",
        description="JWT signing algorithm",
    )

    access_token_expire_days: int = Field(
        default=7,
        alias="ACCESS_TOKEN_EXPIRE_DAYS",
        description="Session token lifetime in days",
    )

    bcrypt_rounds: int = Field(
        default=10,
        ge=4,
        le=31,
        alias="BCRYPT_ROUNDS",
        description="bcrypt cost factor for password hashing",
    )

    # ===== Game Results Configuration =====
    history_limit: int = Field(
        default=20,
        ge=1,
        alias="HISTORY_LIMIT",
        description="Number of most recent results returned by history endpoints",
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0", alias="SERVER_HOST", description="Server host address"
    )

    server_port: int = Field(
        default=5000, alias="SERVER_PORT", description="Server port number"
    )

    server_workers: int = Field(
        default=1, alias="SERVER_WORKERS", description="Number of uvicorn workers"
    )

    # ===== CORS Configuration =====
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:8081",  # Frontend dev server
            "http://localhost:5173",  # Vite default port
            "http://127.0.0.1:8081",
        ],
        alias="CORS_ALLOW_ORIGINS",
        description="CORS allowed origins",
    )

    cors_allow_credentials: bool = Field(
        default=True,
        alias="CORS_ALLOW_CREDENTIALS",
        description="Whether to allow credentials in CORS requests",
    )

    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_METHODS",
        description="CORS allowed methods",
    )

    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_HEADERS",
        description="CORS allowed headers",
    )

    db_unavailable_hint: str = Field(
        default="Database connection failed. The server may be offline or network connectivity is down.",
        alias="DB_UNAVAILABLE_HINT",
        description="User-facing message returned when the database is unreachable",
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Normalize the database URL and warn about missing critical values."""
        if self.app_database_url and self.app_database_url.startswith(
            "postgresql://"
        ):
            self.app_database_url = self.app_database_url.replace(
                "postgresql://", "postgresql+asyncpg://", 1
            )

        if not self.app_database_url:
            logger.warning("GAMEHUB_DATABASE_URL environment variable not set.")

        if not self.jwt_secret_key:
            logger.warning(
                "JWT_SECRET_KEY environment variable not set. The API will refuse to start."
            )

        logger.debug(f"Using database schema: {self.schema_name}")
        return self

    @property
    def is_sqlite(self) -> bool:
        return bool(self.app_database_url) and self.app_database_url.startswith(
            "sqlite"
        )

    @property
    def schema_name(self) -> str | None:
        # SQLite has no schemas; tables live in the main database
        if self.is_sqlite:
            return None
        return self.gamehub_schema


# Global settings instance
settings = Settings()
