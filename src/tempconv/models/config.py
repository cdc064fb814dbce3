from __future__ import annotations

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tempconv.models.temperature import TemperatureUnit


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TEMPCONV_",
        extra="ignore",
    )

    source_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    target_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    output_format: str | None = None

    @field_validator("source_unit", "target_unit", mode="before")
    @classmethod
    def _accept_symbols(cls, value: Any) -> Any:
        # Allow TEMPCONV_SOURCE_UNIT=K as well as =kelvin
        if isinstance(value, str):
            return TemperatureUnit.parse(value)
        return value
