"""
Configuration management for exprcalc.

Settings come from EXPRCALC_* environment variables or a .env file. The
defaults reproduce the stock calculator behavior.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="EXPRCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Evaluation
    division_epsilon: float = Field(default=1e-9, gt=0)
    output_precision: int = Field(default=2, ge=0)

    # Self-test
    self_test_tolerance: float = Field(default=1e-5, gt=0)


# Global settings instance
settings = Settings()
