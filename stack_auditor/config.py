"""Configuration management for the CloudFormation stack template auditor.

This module handles loading and validating configuration from environment
variables with sensible defaults.
"""

from typing import Optional

from botocore.config import Config
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Auditor settings loaded from environment variables.

    All settings have sensible defaults. Concurrency limits are read once
    when services are built and do not change during a call.
    """

    # AWS Configuration
    aws_region: str = Field(
        default="us-east-1",
        description="Default AWS region",
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION"),
    )
    aws_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts botocore makes per API call",
        validation_alias="AWS_MAX_ATTEMPTS",
    )
    aws_retry_mode: str = Field(
        default="adaptive",
        description="botocore retry mode (legacy, standard, adaptive)",
        validation_alias="AWS_RETRY_MODE",
    )

    # Concurrency Configuration
    template_concurrency: int = Field(
        default=1,
        ge=1,
        description="Template requests in flight per region",
        validation_alias="STACK_AUDITOR_TEMPLATE_CONCURRENCY",
    )
    region_concurrency: int = Field(
        default=5,
        ge=1,
        description="Regions audited at once by the world-wide aggregator",
        validation_alias="STACK_AUDITOR_REGION_CONCURRENCY",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    def boto_config(self) -> Config:
        """Build the botocore Config shared by all regional clients."""
        return Config(
            retries={
                "max_attempts": self.aws_max_attempts,
                "mode": self.aws_retry_mode,
            }
        )


def get_settings() -> Settings:
    """
    Get auditor settings.

    Loads settings from environment variables and .env file.
    """
    return Settings()


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def settings() -> Settings:
    """
    Get the global settings instance.

    Creates the settings instance on first call and caches it.
    """
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings
