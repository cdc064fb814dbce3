"""JSON envelopes for piped or scripted use of the CLI.

Every document is a single object::

    {"ok": true,  "command": "convert", "data": {...},  "timestamp": "..."}
    {"ok": false, "command": "convert", "error": {"code": ..., "message": ...},
     "timestamp": "..."}

Output is strict RFC 8259 JSON: ``NaN``/``Infinity`` are refused rather
than written as bare tokens.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel

from tempconv.models.temperature import ConversionResult, TemperatureUnit


def _serialize(obj: Any) -> Any:
    if isinstance(obj, TemperatureUnit):
        return {"name": obj.value, "symbol": obj.symbol}
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", exclude_none=True)
    if isinstance(obj, list):
        return [_serialize(item) for item in obj]
    return obj


def _envelope(*, ok: bool, command: str, **body: Any) -> str:
    document: dict[str, Any] = {
        "ok": ok,
        "command": command,
        **body,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)


def format_json_response(*, data: Any, command: str) -> str:
    """Success envelope; units become ``{"name", "symbol"}`` objects."""
    return _envelope(ok=True, command=command, data=_serialize(data))


def format_json_error(*, code: str, message: str, command: str) -> str:
    return _envelope(ok=False, command=command, error={"code": code, "message": message})


def format_conversion(result: ConversionResult, *, command: str) -> str:
    """Success envelope for a converted value, error envelope for a rejected one.

    The error ``code`` is the :class:`ValidationErrorCode` value
    (``invalid_number`` or ``same_unit``).
    """
    if result.ok:
        return format_json_response(data=result, command=command)
    assert result.error is not None
    return format_json_error(
        code=result.error.value,
        message=result.message or "",
        command=command,
    )
