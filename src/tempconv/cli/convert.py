"""CLI commands for temperature conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from tempconv.cli._options import global_options
from tempconv.engine import convert
from tempconv.models.temperature import TemperatureUnit

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext


class UnitType(click.ParamType):
    """Click parameter accepting a unit name or symbol (``celsius``, ``C``)."""

    name = "unit"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> TemperatureUnit:
        if isinstance(value, TemperatureUnit):
            return value
        try:
            return TemperatureUnit.parse(value)
        except ValueError:
            choices = ", ".join(f"{u.value} ({u.symbol})" for u in TemperatureUnit)
            self.fail(f"{value!r} is not a temperature unit. Choose from: {choices}", param, ctx)

    def get_metavar(self, param: click.Parameter, ctx: click.Context) -> str:
        return "[C|F|K]"


UNIT = UnitType()


@click.command(
    "convert",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("value", metavar="VALUE")
@click.option(
    "--from",
    "-f",
    "source_unit",
    type=UNIT,
    default=None,
    help="Unit of VALUE (default: TEMPCONV_SOURCE_UNIT or celsius)",
)
@click.option(
    "--to",
    "-t",
    "target_unit",
    type=UNIT,
    default=None,
    help="Unit to convert to (default: TEMPCONV_TARGET_UNIT or fahrenheit)",
)
@global_options
def convert_cmd(
    app_ctx: AppContext,
    value: str,
    source_unit: TemperatureUnit | None,
    target_unit: TemperatureUnit | None,
) -> None:
    """Convert VALUE from one temperature unit to another.

    VALUE is taken as typed; negative numbers need no escaping
    (``tempconv convert -40 --from F --to C``).
    """
    result = convert(
        value,
        source_unit or app_ctx.settings.source_unit,
        target_unit or app_ctx.settings.target_unit,
    )
    app_ctx.formatter.output(result, command="convert")
    if not result.ok:
        click.get_current_context().exit(1)


@click.command("units")
@global_options
def units_cmd(app_ctx: AppContext) -> None:
    """List the supported temperature units."""
    app_ctx.formatter.output(list(TemperatureUnit), command="units")
