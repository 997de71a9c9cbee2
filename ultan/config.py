"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at load time (fail fast)
- Type safety with Pydantic
- Utility functions never read configuration; only logging setup and the
  HTTP helper do
"""

import os
from functools import lru_cache
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

# Load environment variables from .env file
load_dotenv()

Environment = Literal["development", "staging", "production"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", description="Logging level")
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class HttpConfig(BaseModel):
    """Settings for the default client created by ``req_flow``."""

    timeout_seconds: float | None = Field(
        default=None, gt=0.0, description="Request timeout; None disables the timeout"
    )


class UltanConfig(BaseModel):
    """Top-level configuration combining all sections."""

    environment: Environment = Field(default="development", description="Environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)

    @model_validator(mode="after")
    def validate_debug_environment(self) -> "UltanConfig":
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def _env_to_literal(val: str) -> Environment:
    v = val.strip().lower()
    if v in {"dev", "development"}:
        return "development"
    if v in {"stage", "staging"}:
        return "staging"
    return "production"


def _level_to_literal(val: str) -> LogLevel:
    v = val.strip().upper()
    return cast(LogLevel, v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO")


def _parse_optional_float(val: str | None) -> float | None:
    if val is None or not val.strip():
        return None
    return float(val)


def load_config_from_env() -> UltanConfig:
    """Load configuration from environment variables with validation."""
    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    http_config = HttpConfig(
        timeout_seconds=_parse_optional_float(os.getenv("HTTP_TIMEOUT_SECONDS")),
    )

    return UltanConfig(
        environment=environment,
        debug=debug,
        logging=logging_config,
        http=http_config,
    )


@lru_cache
def get_config() -> UltanConfig:
    """Get cached configuration."""
    return load_config_from_env()
