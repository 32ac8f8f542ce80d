"""Application configuration using Pydantic settings."""

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # API Configuration
    API_TITLE: str = "Blog API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Blogging backend with users, posts, comments and categories"
    API_PREFIX: str = "/api"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    TESTING: bool = False

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = Field(default=8000, ge=1, le=65535)

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./blog.db", description="Async SQLAlchemy database URL"
    )
    DATABASE_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True

    # JWT Configuration
    JWT_SECRET_KEY: str = Field(
        default="dev-jwt-secret-key-super-long-for-local-use-only-change-me",
        min_length=32,
        description="Secret key for signing access tokens",
    )
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "blog-api"

    # Password hashing
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # CORS
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8080"]
    ALLOWED_METHODS: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    ALLOWED_HEADERS: list[str] = ["*"]

    # Monitoring
    LOG_LEVEL: str = "INFO"

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed = ["development", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("ALLOWED_ORIGINS")
    @classmethod
    def validate_origins(cls, v):
        """Validate CORS origins."""
        validated_origins = []
        for origin in v:
            if origin == "*":
                validated_origins.append(origin)
                continue
            try:
                AnyHttpUrl(origin)
            except ValueError:
                raise ValueError(f"Invalid origin URL: {origin}")
            validated_origins.append(origin)
        return validated_origins


# Global settings instance
settings = Settings()
