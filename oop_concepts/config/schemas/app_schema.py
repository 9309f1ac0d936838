"""Main application configuration schema."""
from typing import Literal

from pydantic import BaseModel, Field

from oop_concepts.domain.employee import DEFAULT_COMPANY

from .logging_schema import LoggingConfig

OutputFormat = Literal["json", "yaml", "table", "list"]


class OutputConfig(BaseModel):
    """CLI output settings."""

    format: OutputFormat = Field("json", description="Default output format")


class DemoDefaults(BaseModel):
    """Values used by demos when the caller supplies none."""

    person_name: str = Field("John", min_length=1)
    person_age: int = Field(30, ge=0)
    counter_increments: int = Field(2, ge=0)
    company: str = Field(DEFAULT_COMPANY, min_length=1)


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
    defaults: DemoDefaults = Field(default_factory=lambda: DemoDefaults())
