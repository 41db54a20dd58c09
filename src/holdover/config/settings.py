"""
Application settings using Pydantic.

Provides environment-based configuration loading with HOLDOVER_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Parameter publishing
    parameter_prefix: str = "/accelerator"
    parameter_backend: str = "memory"  # memory, ssm, template

    # AWS
    aws_region: str = "us-east-1"

    # Name normalization
    name_tag: str = "Name"
    zone_marker: str = "_az"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "HOLDOVER_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
