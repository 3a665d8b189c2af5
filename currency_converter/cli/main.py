"""
CLI interface for Currency Converter.

Provides command-line access to conversion and the interactive screen.
"""

import logging
import math
import sys
from typing import Optional

import typer
from rich.console import Console

from currency_converter.config.loader import CONFIG_ENV_VAR, AppConfig, load_app_config
from currency_converter.config.log import setup_logging
from currency_converter.core.conversion import convert as convert_amount
from currency_converter.core.currencies import CURRENCY_TABLE
from currency_converter.core.formatting import format_amount, validate_decimal_places
from currency_converter.core.session import ConverterSession
from currency_converter.ui.app import ConverterTUI, run_clock
from currency_converter.ui.display import create_currency_table

app = typer.Typer()
console = Console()
logger = logging.getLogger(__name__)

EXIT_CODE_OK = 0
EXIT_CODE_ERROR = 1


def _get_config(ctx: typer.Context) -> AppConfig:
    return ctx.obj if isinstance(ctx.obj, AppConfig) else AppConfig()


def _session_from_config(config: AppConfig) -> ConverterSession:
    return ConverterSession(
        base_code=config.defaults.base_currency,
        target_code=config.defaults.target_currency,
        decimal_places=config.defaults.decimal_places,
        dark_theme=config.display.dark_theme,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="Path to a YAML configuration file"
    ),
):
    """Currency Converter CLI."""
    try:
        config = load_app_config(config_path) if config_path else AppConfig()
    except Exception as e:
        console.print(f"[red]Error loading configuration:[/] {str(e)}")
        sys.exit(EXIT_CODE_ERROR)

    setup_logging(config.logging.numeric_level)
    if config_path:
        logger.info("Loaded configuration from %s", config_path)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        console.print("Currency Converter - Use --help to see available commands")


@app.command()
def currencies():
    """List supported currencies and their rates."""
    console.print(create_currency_table(CURRENCY_TABLE))


@app.command()
def convert(
    ctx: typer.Context,
    amount: float = typer.Argument(..., min=0, help="Amount to convert"),
    from_code: str = typer.Argument(..., metavar="FROM", help="Currency to convert from"),
    to_code: str = typer.Argument(..., metavar="TO", help="Currency to convert to"),
    places: Optional[int] = typer.Option(
        None,
        "--places",
        "-p",
        help="Decimal places (0, 2, 4 or 6)"
    ),
):
    """Convert an amount between two currencies."""
    config = _get_config(ctx)
    try:
        if not math.isfinite(amount):
            raise ValueError(f"Amount must be a finite number, got {amount}")
        decimal_places = validate_decimal_places(
            places if places is not None else config.defaults.decimal_places
        )
        source = CURRENCY_TABLE.lookup(from_code)
        target = CURRENCY_TABLE.lookup(to_code)
        if source is None:
            raise ValueError(f"Unsupported currency: {from_code}")
        if target is None:
            raise ValueError(f"Unsupported currency: {to_code}")

        converted = convert_amount(amount, source, target)
        if not math.isfinite(converted):
            raise ValueError(f"Amount too large to convert: {amount}")

        result = format_amount(converted, decimal_places, target.code)
        console.print(result)
        sys.exit(EXIT_CODE_OK)
    except ValueError as e:
        console.print(f"[red]Error:[/] {str(e)}")
        sys.exit(EXIT_CODE_ERROR)


@app.command()
def run(ctx: typer.Context):
    """Open the interactive converter screen."""
    session = _session_from_config(_get_config(ctx))
    ConverterTUI(session, console=console).run()


@app.command()
def clock(
    ctx: typer.Context,
    refreshes: int = typer.Option(
        10,
        "--refreshes",
        "-r",
        min=1,
        help="Number of clock refreshes to show, one per configured interval"
    ),
):
    """Show a live clock."""
    config = _get_config(ctx)
    session = _session_from_config(config)
    run_clock(session, console, refreshes=refreshes, interval=config.display.clock_interval)


if __name__ == "__main__":
    app()
