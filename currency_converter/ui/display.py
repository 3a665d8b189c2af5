"""Rich display components for the converter screen."""

from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from currency_converter.core.currencies import Currency
from currency_converter.core.formatting import format_amount, format_clock
from currency_converter.core.history import ConversionRecord
from currency_converter.core.session import ConverterState

from .theme import TITLE, Theme, theme_for

HELP_TEXT = (
    "[bold]<number>[/] or [bold]amount <number>[/]  set the amount\n"
    "[bold]from <CODE>[/] / [bold]to <CODE>[/]        choose currencies\n"
    "[bold]swap[/]                          exchange the currencies\n"
    "[bold]places <0|2|4|6>[/]              decimal places\n"
    "[bold]save[/]                          save the conversion to history\n"
    "[bold]theme[/]                         toggle light/dark\n"
    "[bold]help[/] / [bold]quit[/]"
)


def currency_label(currency: Currency) -> str:
    return f"{currency.flag} {currency.code}".strip()


def create_header(state: ConverterState) -> Table:
    theme = theme_for(state.dark_theme)
    header = Table.grid(expand=True)
    header.add_column(justify="left")
    header.add_column(justify="right")
    header.add_row(Text(TITLE, style=theme.primary), Text(theme.icon))
    return header


def create_clock_text(state: ConverterState) -> Text:
    theme = theme_for(state.dark_theme)
    return Text(format_clock(state.now), style=theme.muted)


def create_clock_panel(state: ConverterState) -> Panel:
    theme = theme_for(state.dark_theme)
    return Panel(create_clock_text(state), title="Clock", border_style=theme.border, box=box.ROUNDED)


def create_settings_table(state: ConverterState) -> Table:
    theme = theme_for(state.dark_theme)
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style=theme.primary, width=18)
    table.add_column("Value")

    table.add_row("Decimal Places:", str(state.decimal_places))
    table.add_row(f"Amount in {state.base.code}:", state.amount_input or "—")
    table.add_row("From:", currency_label(state.base))
    table.add_row("To:", currency_label(state.target))
    return table


def create_preview(state: ConverterState, preview: str) -> RenderableType:
    """Live conversion result, or a hint when no amount is entered."""
    theme = theme_for(state.dark_theme)
    if not preview:
        return Text("Enter amount to convert", style=theme.muted)
    body = Text(f"{state.target.flag} {preview}".strip(), style=f"bold {theme.accent}")
    return Panel(body, title="Preview", border_style=theme.border, box=box.ROUNDED)


def format_history_line(record: ConversionRecord, decimal_places: int) -> str:
    """One history entry rendered at the current precision."""
    source = format_amount(record.from_amount, decimal_places, record.from_currency.code)
    target = format_amount(record.to_amount, decimal_places, record.to_currency.code)
    return f"{source} → {target}"


def create_history_table(state: ConverterState, history: Sequence[ConversionRecord]) -> Optional[Table]:
    if not history:
        return None

    theme = theme_for(state.dark_theme)
    table = Table(title="Recent Conversions", box=box.ROUNDED, border_style=theme.border, expand=True)
    table.add_column("Conversion")
    table.add_column("Time", style=theme.muted, justify="right")
    for record in history:
        table.add_row(format_history_line(record, state.decimal_places), record.timestamp)
    return table


def create_help_panel(theme: Theme) -> Panel:
    return Panel(HELP_TEXT, title="Commands", border_style=theme.border, box=box.ROUNDED)


def create_message(message: str, theme: Theme, error: bool = False) -> Text:
    return Text(message, style=theme.error if error else theme.muted)


def build_screen(
    state: ConverterState,
    preview: str,
    history: Sequence[ConversionRecord],
    messages: Iterable[RenderableType] = (),
) -> Group:
    """Compose the whole converter screen."""
    parts = [
        create_header(state),
        create_clock_text(state),
        create_settings_table(state),
        create_preview(state, preview),
    ]
    history_table = create_history_table(state, history)
    if history_table is not None:
        parts.append(history_table)
    parts.extend(messages)
    return Group(*parts)


def create_currency_table(currencies: Iterable[Currency]) -> Table:
    table = Table(title="Supported Currencies", box=box.ROUNDED)
    table.add_column("Code", style="bold")
    table.add_column("Name")
    table.add_column("Rate per USD", justify="right")
    for currency in currencies:
        table.add_row(currency_label(currency), currency.name, f"{currency.rate:g}")
    return table
