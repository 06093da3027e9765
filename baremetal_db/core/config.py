"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class PostgreSQLConfig(BaseModel):
    """PostgreSQL database configuration."""

    db: str = Field(default="baremetal", alias="POSTGRES_DB", description="PostgreSQL database name")
    user: str = Field(default="baremetal", alias="POSTGRES_USER", description="PostgreSQL database user")
    password: str = Field(default="changeme", alias="POSTGRES_PASSWORD", description="PostgreSQL database password")
    host: str = Field(default="postgres", alias="POSTGRES_HOST", description="PostgreSQL database host address")
    port: int = Field(default=5432, alias="POSTGRES_PORT", description="PostgreSQL database port number")

    model_config = {"populate_by_name": True}

    def to_url(self) -> str:
        """Build an asyncpg connection URL from the individual settings."""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


class LogfireConfig(BaseModel):
    """Logfire monitoring configuration."""

    enabled: bool = Field(default=False, alias="LOGFIRE_ENABLED", description="Enable Logfire instrumentation")
    token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN", description="Logfire write token")
    service_name: str = Field(
        default="baremetal-db", alias="LOGFIRE_SERVICE_NAME", description="Service name reported to Logfire"
    )
    environment: str = Field(
        default="development", alias="LOGFIRE_ENVIRONMENT", description="Deployment environment name"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="BAREMETAL_DB_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Logging format (simple, detailed, json)",
        alias="BAREMETAL_DB_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="BAREMETAL_DB_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write logs to a file in addition to the console",
        alias="BAREMETAL_DB_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="",
        description="Async database connection URL; built from POSTGRES_* when empty",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo generated SQL through the sqlalchemy.engine logger",
        alias="DATABASE_ECHO",
    )
    lock_timeout_seconds: int = Field(
        default=300,
        ge=1,
        description="Postgres lock_timeout applied to explicit transactions",
        alias="DATABASE_LOCK_TIMEOUT_SECONDS",
    )

    # Raw POSTGRES_* / LOGFIRE_* values, regrouped by the properties below
    postgres_db: Optional[str] = Field(default=None, alias="POSTGRES_DB")
    postgres_user: Optional[str] = Field(default=None, alias="POSTGRES_USER")
    postgres_password: Optional[str] = Field(default=None, alias="POSTGRES_PASSWORD")
    postgres_host: Optional[str] = Field(default=None, alias="POSTGRES_HOST")
    postgres_port: Optional[int] = Field(default=None, alias="POSTGRES_PORT")
    logfire_enabled: Optional[bool] = Field(default=None, alias="LOGFIRE_ENABLED")
    logfire_token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN")
    logfire_service_name: Optional[str] = Field(default=None, alias="LOGFIRE_SERVICE_NAME")
    logfire_environment: Optional[str] = Field(default=None, alias="LOGFIRE_ENVIRONMENT")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def postgres(self) -> PostgreSQLConfig:
        """Get PostgreSQL configuration from environment variables."""
        return PostgreSQLConfig.model_validate(self.model_dump(by_alias=True, exclude_none=True))

    @property
    def logfire(self) -> LogfireConfig:
        """Get Logfire configuration from environment variables."""
        return LogfireConfig.model_validate(self.model_dump(by_alias=True, exclude_none=True))

    @property
    def resolved_database_url(self) -> str:
        """Database URL to connect to, falling back to the PostgreSQL settings."""
        return self.database_url or self.postgres.to_url()


settings = Settings()
