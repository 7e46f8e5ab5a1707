"""
Configuration management for the DTSX flat file specification exporter.
"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DTSX_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Input
    input_directory: str = Field(default=".")
    file_pattern: str = Field(default="*.dtsx")
    input_encoding: str = Field(default="utf-8-sig")  # Visual Studio writes a BOM

    # Output
    output_directory: str = Field(default=".")
    output_encoding: str = Field(default="utf-8")

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Reload settings from the environment (and .env file)."""
    return Settings()
