from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from tempconv.models.temperature import ConversionResult
from tempconv.output.json_output import format_conversion, format_json_error, format_json_response
from tempconv.output.rich_output import RichOutput

if TYPE_CHECKING:
    from io import TextIOBase

    from tempconv.models.temperature import TemperatureUnit


class OutputFormatter:
    """Route command output to JSON or Rich rendering.

    The format is *force_format* when given.  Otherwise a TTY *stream*
    (``sys.stdout`` by default) gets ``"rich"`` and anything piped or
    redirected gets ``"json"``.  ``"quiet"`` renders like ``"rich"`` but
    on stderr, leaving stdout empty.
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        if force_format is not None:
            self._format = force_format
        elif hasattr(self._stream, "isatty") and self._stream.isatty():
            self._format = "rich"
        else:
            self._format = "json"

        if self._format == "quiet":
            console = Console(stderr=True)
        elif stream is not None:
            console = Console(file=stream)
        else:
            console = Console()
        self._rich = RichOutput(console)

    @property
    def format(self) -> str:  # noqa: A003
        """The active format: ``"rich"``, ``"json"`` or ``"quiet"``."""
        return self._format

    def output(
        self, data: ConversionResult | list[TemperatureUnit], *, command: str
    ) -> None:
        """Render a conversion result or a list of units.

        A failed :class:`ConversionResult` is written as an error (JSON error
        envelope or a red Rich line); callers decide the exit status.
        """
        if self._format == "json":
            if isinstance(data, ConversionResult):
                text = format_conversion(data, command=command)
            else:
                text = format_json_response(data=data, command=command)
            print(text, file=self._stream)  # noqa: T201
        elif isinstance(data, ConversionResult):
            self._rich.conversion_result(data)
        else:
            self._rich.unit_list(data)

    def output_error(self, *, code: str, message: str, command: str) -> None:
        """Report a failure that has no :class:`ConversionResult` behind it."""
        if self._format == "json":
            print(  # noqa: T201
                format_json_error(code=code, message=message, command=command),
                file=self._stream,
            )
        else:
            self._rich.error(message)
