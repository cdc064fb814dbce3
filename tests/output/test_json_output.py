from __future__ import annotations

import json

import pytest

from tempconv.models.temperature import ConversionResult, TemperatureUnit, ValidationErrorCode
from tempconv.output.json_output import (
    format_conversion,
    format_json_error,
    format_json_response,
)


class TestFormatJsonResponse:
    """Tests for :func:`format_json_response`."""

    def test_with_result_model(self) -> None:
        result = ConversionResult.success(
            32.0,
            TemperatureUnit.FAHRENHEIT,
            input_value=0.0,
            source_unit=TemperatureUnit.CELSIUS,
        )
        raw = format_json_response(data=result, command="convert")
        parsed = json.loads(raw)

        assert parsed["ok"] is True
        assert parsed["command"] == "convert"
        assert parsed["data"]["value"] == 32.0
        assert parsed["data"]["unit"] == "fahrenheit"
        assert parsed["data"]["input_value"] == 0.0
        assert parsed["data"]["source_unit"] == "celsius"
        assert parsed["data"]["ok"] is True
        assert "timestamp" in parsed

    def test_excludes_none_fields(self) -> None:
        result = ConversionResult.success(273.15, TemperatureUnit.KELVIN)
        parsed = json.loads(format_json_response(data=result, command="convert"))

        assert "error" not in parsed["data"]
        assert "message" not in parsed["data"]
        assert "input_value" not in parsed["data"]

    def test_with_list(self) -> None:
        data = [{"name": "celsius", "symbol": "C"}, {"name": "kelvin", "symbol": "K"}]
        parsed = json.loads(format_json_response(data=data, command="units"))

        assert parsed["data"] == data

    def test_with_list_of_models(self) -> None:
        results = [
            ConversionResult.success(32.0, TemperatureUnit.FAHRENHEIT),
            ConversionResult.failure(ValidationErrorCode.SAME_UNIT, "same"),
        ]
        parsed = json.loads(format_json_response(data=results, command="convert"))

        assert parsed["data"][0]["value"] == 32.0
        assert parsed["data"][1]["error"] == "same_unit"
        assert parsed["data"][1]["ok"] is False

    def test_timestamp_is_iso_utc(self) -> None:
        parsed = json.loads(format_json_response(data={"x": 1}, command="test"))
        ts = parsed["timestamp"]
        assert "+" in ts or ts.endswith("Z") or "+00:00" in ts


class TestFormatJsonError:
    """Tests for :func:`format_json_error`."""

    def test_basic_error(self) -> None:
        raw = format_json_error(
            code="invalid_number", message="Please enter a valid number", command="convert"
        )
        parsed = json.loads(raw)

        assert parsed["ok"] is False
        assert parsed["command"] == "convert"
        assert parsed["error"]["code"] == "invalid_number"
        assert parsed["error"]["message"] == "Please enter a valid number"
        assert "timestamp" in parsed

    def test_error_has_only_code_and_message(self) -> None:
        parsed = json.loads(format_json_error(code="x", message="y", command="convert"))
        assert parsed["error"] == {"code": "x", "message": "y"}
        assert "data" not in parsed


class TestUnitSerialization:
    def test_unit_is_name_and_symbol(self) -> None:
        parsed = json.loads(format_json_response(data=list(TemperatureUnit), command="units"))

        assert parsed["data"][0] == {"name": "celsius", "symbol": "C"}
        assert [u["symbol"] for u in parsed["data"]] == ["C", "F", "K"]


class TestFormatConversion:
    def test_success(self) -> None:
        result = ConversionResult.success(
            -40.0,
            TemperatureUnit.CELSIUS,
            input_value=-40.0,
            source_unit=TemperatureUnit.FAHRENHEIT,
        )
        parsed = json.loads(format_conversion(result, command="convert"))

        assert parsed["ok"] is True
        assert parsed["data"]["value"] == -40.0
        assert parsed["data"]["source_unit"] == "fahrenheit"

    @pytest.mark.parametrize(
        ("code", "message"),
        [
            (ValidationErrorCode.INVALID_NUMBER, "Please enter a valid number"),
            (ValidationErrorCode.SAME_UNIT, "Please select different input and output units"),
        ],
    )
    def test_failure_becomes_error_envelope(
        self, code: ValidationErrorCode, message: str
    ) -> None:
        parsed = json.loads(
            format_conversion(ConversionResult.failure(code, message), command="convert")
        )

        assert parsed["ok"] is False
        assert parsed["command"] == "convert"
        assert parsed["error"] == {"code": code.value, "message": message}
        assert "data" not in parsed


class TestStrictJson:
    def test_non_finite_number_refused(self) -> None:
        with pytest.raises(ValueError, match="JSON compliant"):
            format_json_response(data={"value": float("inf")}, command="convert")
