"""Unit conversion helpers shared across the codebase."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from tempconv.models.temperature import TemperatureUnit

_KELVIN_OFFSET = 273.15


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius (unrounded)."""
    return (f - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit (unrounded)."""
    return c * 9.0 / 5.0 + 32.0


def kelvin_to_celsius(k: float) -> float:
    return k - _KELVIN_OFFSET


def celsius_to_kelvin(c: float) -> float:
    return c + _KELVIN_OFFSET


def to_celsius(value: float, unit: TemperatureUnit) -> float:
    """Normalise *value* expressed in *unit* to Celsius."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return fahrenheit_to_celsius(value)
    if unit is TemperatureUnit.KELVIN:
        return kelvin_to_celsius(value)
    return value


def from_celsius(celsius: float, unit: TemperatureUnit) -> float:
    """Express a Celsius temperature in *unit*."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return celsius_to_fahrenheit(celsius)
    if unit is TemperatureUnit.KELVIN:
        return celsius_to_kelvin(celsius)
    return celsius


def round_half_away(value: float, places: int = 2) -> float:
    """Round *value* to *places* decimals, ties away from zero.

    Rounds the shortest decimal representation of the float, so ``1.005``
    becomes ``1.01`` rather than the ``1.0`` that binary rounding gives.
    Negative zero is returned as ``0.0``; non-finite values are returned
    unchanged.
    """
    if math.isinf(value) or math.isnan(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # quantize() needs every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0
