"""Exceptions raised when a conversion request fails validation."""

from __future__ import annotations

from tempconv.models.temperature import ValidationErrorCode


class ConversionError(Exception):
    """Base class for user-facing conversion failures.

    Every subclass carries a :class:`ValidationErrorCode` so callers can
    classify the failure without inspecting the message.
    """

    code: ValidationErrorCode
    default_message: str = "Conversion failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidNumberError(ConversionError):
    """The raw input is empty or not a finite number."""

    code = ValidationErrorCode.INVALID_NUMBER
    default_message = "Please enter a valid number"


class SameUnitError(ConversionError):
    """Source and target units are identical."""

    code = ValidationErrorCode.SAME_UNIT
    default_message = "Please select different input and output units"
