"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging
import sys

import click
from pydantic import ValidationError

from tempconv.models.config import AppSettings
from tempconv.output.formatter import OutputFormatter

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    settings: AppSettings = dataclasses.field(default_factory=AppSettings)
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else self.output_format
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter

    def configure_logging(self) -> None:
        """Route log records to stderr: DEBUG when verbose, WARNING otherwise."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr, force=True)


def _settings_error_message(exc: ValidationError) -> str:
    fields = "; ".join(
        f"TEMPCONV_{'_'.join(str(part) for part in err['loc']).upper()}: {err['msg']}"
        for err in exc.errors()
    )
    return f"Invalid setting ({fields})"


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert temperatures between Celsius, Fahrenheit and Kelvin."""
    try:
        settings = AppSettings()
    except ValidationError as exc:
        formatter = OutputFormatter(force_format="quiet" if quiet else output_format)
        formatter.output_error(
            code="invalid_settings",
            message=_settings_error_message(exc),
            command=ctx.invoked_subcommand or "unknown",
        )
        ctx.exit(1)

    ctx.obj = AppContext(
        output_format=output_format or settings.output_format,
        quiet=quiet,
        verbose=verbose,
        settings=settings,
    )
    ctx.obj.configure_logging()


# ---------------------------------------------------------------------------
# Register subcommands
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from tempconv.cli.convert import convert_cmd, units_cmd

    cli.add_command(convert_cmd)
    cli.add_command(units_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler.

    Click runs in non-standalone mode: ``ctx.exit(n)`` comes back as the
    return value and Ctrl-C surfaces as :class:`click.exceptions.Abort`.
    """
    try:
        rv = cli(args=argv, standalone_mode=False)
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.exceptions.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except SystemExit:
        raise
    except Exception as exc:
        # The Click context is already torn down here; recover the command from argv
        OutputFormatter().output_error(
            code=type(exc).__name__,
            message=str(exc),
            command=_command_from_args(sys.argv[1:] if argv is None else argv),
        )
        raise SystemExit(1) from exc

    if isinstance(rv, int) and rv != 0:
        raise SystemExit(rv)


def _command_from_args(args: list[str]) -> str:
    """Return the first registered subcommand named in *args*."""
    return next((arg for arg in args if arg in cli.commands), "unknown")
