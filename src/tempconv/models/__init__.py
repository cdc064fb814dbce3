from __future__ import annotations

from tempconv.models.config import AppSettings
from tempconv.models.temperature import (
    ConversionRequest,
    ConversionResult,
    TemperatureUnit,
    ValidationErrorCode,
    format_temperature,
)

__all__ = [
    # config
    "AppSettings",
    # temperature
    "ConversionRequest",
    "ConversionResult",
    "TemperatureUnit",
    "ValidationErrorCode",
    "format_temperature",
]
