"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOCATION = "us-central1"
DEFAULT_MODEL_NAME = "text-bison@001"
DEFAULT_METADATA_TOKEN_URL = (
    "http://metadata.google.internal/computeMetadata/v1/instance/service-accounts/default/token"
)


class Settings(BaseSettings):
    """Strongly typed application configuration."""

    project_id: str | None = Field(default=None, alias="PROJECT_ID")
    location: str = Field(default=DEFAULT_LOCATION, alias="LOCATION")
    model_name: str = Field(default=DEFAULT_MODEL_NAME, alias="MODEL_NAME")
    metadata_token_url: str = Field(
        default=DEFAULT_METADATA_TOKEN_URL, alias="METADATA_TOKEN_URL"
    )
    metadata_timeout: float = Field(
        default=5.0, alias="METADATA_TIMEOUT", description="Seconds"
    )
    prediction_timeout: float = Field(
        default=10.0, alias="PREDICTION_TIMEOUT", description="Seconds"
    )
    prediction_temperature: float = Field(default=0.7, alias="PREDICTION_TEMPERATURE")
    prediction_max_output_tokens: int = Field(
        default=512, alias="PREDICTION_MAX_OUTPUT_TOKENS"
    )
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", alias="LOG_LEVEL"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @field_validator("project_id", mode="before")
    @classmethod
    def _blank_project_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("location", mode="before")
    @classmethod
    def _default_location(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_LOCATION
        return value

    @field_validator("model_name", mode="before")
    @classmethod
    def _default_model_name(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_MODEL_NAME
        return value


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of settings."""

    return Settings()
