"""Temperature conversion engine.

Pure functions only: no I/O, no shared state.  Every conversion goes
through Celsius (source -> Celsius -> target) and the final value is
rounded to two decimals, ties away from zero.

:func:`convert` is the entry point for raw user input and never raises
for validation failures; it returns a failed :class:`ConversionResult`
instead.  :func:`parse_temperature` and :func:`convert_value` raise the
:mod:`tempconv.errors` exceptions for callers that prefer them.
"""

from __future__ import annotations

import logging
import math

from tempconv._internal.units import from_celsius, round_half_away, to_celsius
from tempconv.errors import ConversionError, InvalidNumberError, SameUnitError
from tempconv.models.temperature import ConversionRequest, ConversionResult, TemperatureUnit

logger = logging.getLogger(__name__)

RESULT_PLACES = 2


def _coerce_unit(unit: TemperatureUnit | str) -> TemperatureUnit:
    if isinstance(unit, TemperatureUnit):
        return unit
    return TemperatureUnit.parse(unit)


def parse_temperature(raw_value: str) -> float:
    """Parse *raw_value* as a finite decimal number.

    Surrounding whitespace is ignored.  Empty text, non-numeric text,
    ``nan`` and ``inf`` raise :class:`InvalidNumberError`.
    """
    text = raw_value.strip()
    if not text or "_" in text:
        raise InvalidNumberError()
    try:
        value = float(text)
    except ValueError:
        raise InvalidNumberError() from None
    if not math.isfinite(value):
        raise InvalidNumberError()
    return value


def convert_value(
    value: float,
    source_unit: TemperatureUnit | str,
    target_unit: TemperatureUnit | str,
) -> float:
    """Convert a numeric *value* between units, rounded to two decimals.

    Raises :class:`SameUnitError` when both units are the same, and
    :class:`InvalidNumberError` when *value* is too large to convert
    (the result overflows to infinity).
    """
    source = _coerce_unit(source_unit)
    target = _coerce_unit(target_unit)
    if source is target:
        raise SameUnitError()
    converted = from_celsius(to_celsius(value, source), target)
    if not math.isfinite(converted):
        raise InvalidNumberError()
    return round_half_away(converted, RESULT_PLACES)


def convert(
    raw_value: str,
    source_unit: TemperatureUnit | str,
    target_unit: TemperatureUnit | str,
) -> ConversionResult:
    """Validate and convert raw user input.

    Validation short-circuits in order: the number is checked before the
    units, so ``convert("abc", "celsius", "celsius")`` reports an invalid
    number.
    """
    request = ConversionRequest(
        raw_value=raw_value,
        source_unit=_coerce_unit(source_unit),
        target_unit=_coerce_unit(target_unit),
    )
    return convert_request(request)


def convert_request(request: ConversionRequest) -> ConversionResult:
    """Run a prepared :class:`ConversionRequest` through the engine."""
    try:
        value = parse_temperature(request.raw_value)
        result = convert_value(value, request.source_unit, request.target_unit)
    except ConversionError as exc:
        logger.debug("Rejected %r: %s", request.raw_value, exc.code)
        return ConversionResult.failure(exc.code, exc.message)

    logger.debug(
        "Converted %s %s -> %s %s",
        value,
        request.source_unit,
        result,
        request.target_unit,
    )
    return ConversionResult.success(
        result,
        request.target_unit,
        input_value=value,
        source_unit=request.source_unit,
    )
