"""Application settings and configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Level generator configuration settings.

    Settings can be configured via:

    1. Environment variables (e.g., LEVELGEN_LOG_LEVEL=DEBUG)
    2. .env file in the working directory
    3. Default values defined below

    All settings use the LEVELGEN_ prefix for environment variables.

    .. rubric:: Examples

    Write a bare list instead of a variable assignment::

        export LEVELGEN_VARIABLE_NAME=""

    Or create a .env file::

        LEVELGEN_LOG_LEVEL=WARNING
        LEVELGEN_INDENT=4
    """

    # Logging Configuration
    log_level: Annotated[
        LogLevel,
        Field(default="INFO", description="Minimum level of the diagnostics written to stderr"),
    ]
    log_format: Annotated[
        str,
        Field(default="{message}", description="loguru format of the diagnostics"),
    ]

    # Output Configuration
    variable_name: Annotated[
        str,
        Field(
            default="levels",
            pattern=r"^([A-Za-z_$][A-Za-z0-9_$]*)?$",
            description="Name of the variable the level list is assigned to. "
            "If empty, a bare list is written.",
        ),
    ]
    indent: Annotated[
        int,
        Field(default=2, description="Number of spaces per indentation step", ge=0),
    ]

    model_config = SettingsConfigDict(
        env_prefix="LEVELGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        validate_assignment=True,
        extra="ignore",
    )

    def log_startup_config(self) -> None:
        """Log the active configuration at DEBUG level."""
        logger.debug("Configuration:")
        logger.debug(f"  Log level: {self.log_level}")
        logger.debug(f"  Variable name: {self.variable_name!r}")
        logger.debug(f"  Indent: {self.indent}")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: The application settings instance.
    """
    return Settings()  # type: ignore
