from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (and `.env`).
    """

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "PharmaLink API"
    PROJECT_DESCRIPTION: str = "Medication request broadcast between customers and nearby pharmacies"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    HOST: str = Field("0.0.0.0", description="Bind address for `pharmalink`")
    PORT: int = Field(8001, description="Listen port for `pharmalink`")
    ALLOWED_ORIGINS: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:5174", "http://localhost:5175"],
        description="CORS origins allowed outside debug mode",
    )

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("pharmalink", description="Database name")
    DB_USER: str = Field("postgres", description="Database user")
    DB_PASSWORD: str | None = Field(None, description="Database password")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Timeout waiting for a pooled connection")

    # Identity provider (bearer tokens)
    IDENTITY_JWT_SECRET: str = Field("dev-only-secret-not-for-production", description="Token verification key")
    IDENTITY_JWT_ALGORITHM: str = Field("HS256", description="Token signing algorithm")
    IDENTITY_JWT_AUDIENCE: str | None = Field(None, description="Expected token audience")

    # Request broadcast
    REQUEST_EXPIRY_MINUTES: int = Field(5, description="Broadcast window for a medication request")
    DEFAULT_SEARCH_RADIUS_KM: float = Field(5.0, description="Default radius for requests and nearby search")
    PENDING_REQUESTS_LIMIT: int = Field(50, description="Max open requests returned to a pharmacy")

    # Push notifications (Firebase Cloud Messaging HTTP v1)
    FCM_PROJECT_ID: str | None = Field(None, description="Firebase project id")
    FCM_ACCESS_TOKEN: str | None = Field(None, description="OAuth2 bearer token for FCM")
    FCM_BASE_URL: str = Field("https://fcm.googleapis.com/v1", description="FCM API base URL")
    PUSH_TIMEOUT_SECONDS: float = Field(10.0, description="Timeout per push call")

    # Rate limiting
    RATE_LIMIT_PER_MINUTE: int = Field(100, description="Requests per minute per client IP")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("json", description="'json', 'colored' or 'plain'")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")
    SENTRY_TRACES_SAMPLE_RATE: float = Field(0.0, ge=0.0, le=1.0, description="Share of requests traced")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("json", "colored", "plain"):
            raise ValueError("LOG_FORMAT must be 'json', 'colored' or 'plain'")
        return v

    @computed_field
    @property
    def database_url(self) -> str:
        """Synchronous PostgreSQL URL (used by Alembic)."""
        return self._build_url("postgresql")

    @computed_field
    @property
    def async_database_url(self) -> str:
        """asyncpg URL used by the application engine."""
        return self._build_url("postgresql+asyncpg")

    @computed_field
    @property
    def is_development(self) -> bool:
        """True in debug mode or a development-like environment."""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local", "test"]

    @computed_field
    @property
    def push_enabled(self) -> bool:
        return bool(self.FCM_PROJECT_ID and self.FCM_ACCESS_TOKEN)

    def _build_url(self, scheme: str) -> str:
        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            password = quote_plus(self.DB_PASSWORD)
            return f"{scheme}://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"{scheme}://{user}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


# Cached settings instance
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
