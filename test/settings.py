"""
Test Configuration Settings.

This module defines the test environment configuration using Pydantic's BaseSettings.
Pydantic automatically loads configuration from the test/.env file via env_file configuration.

Environment variables use double underscore (__) as delimiters for nested properties.
For example: DATABASE__ENABLE_POSTGRES_TESTS maps to test_settings.database.enable_postgres_tests
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TestPostgresConfig(BaseModel):
    """PostgreSQL container configuration for e2e tests."""

    image: str = Field(default="postgres:16", description="Docker image started by testcontainers")
    db: str = Field(default="baremetal_test", description="Database created in the container")
    user: str = Field(default="baremetal", description="Database user")
    password: str = Field(default="baremetal", description="Database password")

    model_config = ConfigDict(strict=False)


class TestDatabaseConfig(BaseModel):
    """Database configuration container for tests."""

    url: str = Field(
        default="sqlite+aiosqlite:///:memory:",
        description="Test database connection URL (defaults to in-memory SQLite)",
    )
    enable_postgres_tests: bool = Field(
        default=False,
        description="Enable PostgreSQL-based tests (requires Docker for testcontainers)",
    )
    postgres: TestPostgresConfig = Field(default_factory=TestPostgresConfig, description="PostgreSQL configuration")

    model_config = ConfigDict(strict=False)


class TestSettings(BaseSettings):
    """
    Test environment settings model.

    Environment variables use double underscore (__) as delimiters for nested properties.
    Examples:
    - DATABASE__ENABLE_POSTGRES_TESTS → test_settings.database.enable_postgres_tests
    - DATABASE__POSTGRES__IMAGE → test_settings.database.postgres.image
    """

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    database: TestDatabaseConfig = Field(
        default_factory=TestDatabaseConfig,
        description="Database configuration (SQLite, PostgreSQL)",
    )


test_settings = TestSettings()
