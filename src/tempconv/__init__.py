"""Convert temperatures between Celsius, Fahrenheit and Kelvin."""

from __future__ import annotations

from tempconv.engine import convert, convert_value, parse_temperature
from tempconv.errors import ConversionError, InvalidNumberError, SameUnitError
from tempconv.models.temperature import (
    ConversionRequest,
    ConversionResult,
    TemperatureUnit,
    ValidationErrorCode,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionRequest",
    "ConversionResult",
    "InvalidNumberError",
    "SameUnitError",
    "TemperatureUnit",
    "ValidationErrorCode",
    "convert",
    "convert_value",
    "parse_temperature",
]
