"""
Configuration management for the geo converters.

Uses pydantic-settings for environment variable loading with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Geo converter configuration."""

    # Raise for shapes the geo command encoder cannot express instead of
    # emitting an empty argument list
    strict_geo_commands: bool = True

    # Logging (command line only)
    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "GEO_CONVERTERS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
