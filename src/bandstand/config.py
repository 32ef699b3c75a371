"""
Configuration management for Bandstand
"""

import ipaddress

from pydantic import field_validator
from pydantic_settings import BaseSettings

GRAPHQL_IDES = ("playground", "graphiql")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphql_ide: str = "playground"  # 'playground', 'graphiql'
    max_batch_operations: int = 10

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    @field_validator("api_host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        if value == "localhost":
            return value
        try:
            ipaddress.ip_address(value)
        except ValueError as e:
            raise ValueError(f"api_host must be an IP address or 'localhost', got {value!r}") from e
        return value

    @field_validator("api_port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if not 0 <= value <= 65535:
            raise ValueError(f"api_port must be between 0 and 65535, got {value}")
        return value

    @field_validator("graphql_ide")
    @classmethod
    def _check_ide(cls, value: str) -> str:
        value = value.lower()
        if value not in GRAPHQL_IDES:
            raise ValueError(f"graphql_ide must be one of {', '.join(GRAPHQL_IDES)}")
        return value

    @field_validator("max_batch_operations")
    @classmethod
    def _check_batch_limit(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_batch_operations must be at least 1")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    class Config:
        env_file = ".env"
        env_prefix = "BANDSTAND_"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        api_host=settings.api_host,
        api_port=settings.api_port,
        environment=settings.environment,
    )


def get_bind_address() -> str:
    """Get the host:port the API server listens on."""
    return f"{settings.api_host}:{settings.api_port}"
