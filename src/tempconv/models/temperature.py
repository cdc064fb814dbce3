"""Pydantic v2 models for temperature conversion requests and results."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, computed_field


class TemperatureUnit(StrEnum):
    """Supported temperature scales."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        """Single-letter display symbol (``C``, ``F`` or ``K``)."""
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, text: str) -> TemperatureUnit:
        """Look up a unit by name or symbol, case-insensitively.

        Raises :class:`ValueError` for anything else.
        """
        key = text.strip().lower()
        for unit in cls:
            if key in (unit.value, unit.symbol.lower()):
                return unit
        raise ValueError(f"Unknown temperature unit: {text!r}")


_SYMBOLS: dict[TemperatureUnit, str] = {
    TemperatureUnit.CELSIUS: "C",
    TemperatureUnit.FAHRENHEIT: "F",
    TemperatureUnit.KELVIN: "K",
}


class ValidationErrorCode(StrEnum):
    """Reasons a conversion request is rejected."""

    INVALID_NUMBER = "invalid_number"
    SAME_UNIT = "same_unit"


def format_temperature(value: float, unit: TemperatureUnit) -> str:
    """Render ``"{value}°{symbol}"`` without a trailing ``.0`` (``32°F``, ``273.15°K``)."""
    if value.is_integer() and abs(value) < 1e16:
        text = str(int(value))
    else:
        text = repr(value)
    return f"{text}°{unit.symbol}"


class ConversionRequest(BaseModel):
    """A single conversion request as entered by the user."""

    model_config = ConfigDict(frozen=True)

    raw_value: str
    source_unit: TemperatureUnit
    target_unit: TemperatureUnit


class ConversionResult(BaseModel):
    """Outcome of a conversion: a rounded value or a validation failure.

    On success ``value`` / ``unit`` hold the converted temperature and
    ``input_value`` / ``source_unit`` echo the parsed input.  On failure
    ``error`` and ``message`` are set and the value fields are ``None``.
    """

    model_config = ConfigDict(frozen=True)

    value: float | None = None
    unit: TemperatureUnit | None = None
    input_value: float | None = None
    source_unit: TemperatureUnit | None = None
    error: ValidationErrorCode | None = None
    message: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display(self) -> str:
        """The converted value as ``"{value}°{symbol}"``; empty on failure."""
        if self.value is None or self.unit is None:
            return ""
        return format_temperature(self.value, self.unit)

    @property
    def input_display(self) -> str:
        if self.input_value is None or self.source_unit is None:
            return ""
        return format_temperature(self.input_value, self.source_unit)

    @classmethod
    def success(
        cls,
        value: float,
        unit: TemperatureUnit,
        *,
        input_value: float | None = None,
        source_unit: TemperatureUnit | None = None,
    ) -> ConversionResult:
        return cls(value=value, unit=unit, input_value=input_value, source_unit=source_unit)

    @classmethod
    def failure(cls, error: ValidationErrorCode, message: str) -> ConversionResult:
        return cls(error=error, message=message)
