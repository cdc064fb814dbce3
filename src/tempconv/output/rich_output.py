from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from tempconv.models.temperature import ConversionResult, TemperatureUnit


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversion result
    # ------------------------------------------------------------------

    def conversion_result(self, result: ConversionResult) -> None:
        """Print the input/output card, or the error line for a failed result."""
        if not result.ok:
            self.error(result.message or "Conversion failed")
            return

        table = Table(title="Temperature Conversion")
        table.add_column("Input", justify="right", style="cyan")
        table.add_column("")
        table.add_column("Output", justify="right", style="bold green")
        table.add_row(result.input_display, "→", result.display)

        self._con.print(table)
        self.command_result(True, "Temperature converted successfully!")

    # ------------------------------------------------------------------
    # Unit list
    # ------------------------------------------------------------------

    def unit_list(self, units: list[TemperatureUnit]) -> None:
        """Print a table of *units* and their symbols."""
        table = Table(title="Units")
        table.add_column("Name", style="cyan")
        table.add_column("Symbol", justify="center")

        for unit in units:
            table.add_row(unit.value, f"°{unit.symbol}")

        self._con.print(table)

    # ------------------------------------------------------------------
    # Command result helpers
    # ------------------------------------------------------------------

    def command_result(self, success: bool, message: str = "") -> None:
        """Print a coloured OK / FAILED indicator."""
        text = "[green]OK[/green]" if success else "[red]FAILED[/red]"
        if message:
            text += f"  {message}"
        self._con.print(text)

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")
