"""Interactive converter screen."""

import logging
import time
from typing import Callable, List, Optional

from rich.console import Console, RenderableType
from rich.live import Live

from currency_converter.core.session import ConverterSession

from .display import build_screen, create_clock_panel, create_help_panel, create_message
from .input_handler import Command, CommandKind, get_command_line, parse_command
from .theme import theme_for

logger = logging.getLogger(__name__)


class ConverterTUI:
    """Terminal front end for a ConverterSession.

    Every command is one UI event: it updates the session, then the whole
    screen is redrawn with a fresh clock.
    """

    def __init__(
        self,
        session: ConverterSession,
        console: Optional[Console] = None,
        read_line: Callable[[], str] = get_command_line,
    ) -> None:
        self.session = session
        self.console = console or Console()
        self.read_line = read_line
        self._messages: List[RenderableType] = []

    def run(self) -> None:
        """Main loop; returns when the user quits."""
        self._messages.append(create_help_panel(self._theme))
        while True:
            self.render()
            try:
                line = self.read_line()
            except (KeyboardInterrupt, EOFError):
                self.console.print("\n[yellow]Goodbye![/]")
                break

            if not self.handle_line(line):
                self.console.print("[green]Goodbye![/]")
                break

    @property
    def _theme(self):
        return theme_for(self.session.state.dark_theme)

    def render(self) -> None:
        self.session.tick()
        self.console.clear()
        self.console.print(build_screen(
            self.session.state,
            self.session.preview(),
            self.session.history,
            self._messages,
        ))
        self._messages = []

    def handle_line(self, line: str) -> bool:
        """Parse and apply one line of input.

        Returns:
            False when the user asked to quit, True otherwise
        """
        try:
            command = parse_command(line)
            return self.apply(command)
        except ValueError as e:
            logger.debug("Command %r failed: %s", line, e)
            self._messages.append(create_message(str(e), self._theme, error=True))
            return True

    def apply(self, command: Command) -> bool:
        """Apply a parsed command to the session.

        Raises:
            ValueError: If the command argument is invalid
        """
        session = self.session
        kind = command.kind

        if kind == CommandKind.QUIT:
            return False
        if kind == CommandKind.AMOUNT:
            if not session.set_amount_input(command.argument or ""):
                raise ValueError(f"Invalid amount: {command.argument}")
        elif kind == CommandKind.FROM:
            session.select_base(command.argument)
        elif kind == CommandKind.TO:
            session.select_target(command.argument)
        elif kind == CommandKind.SWAP:
            session.swap()
        elif kind == CommandKind.PLACES:
            session.set_decimal_places(_parse_places(command.argument))
        elif kind == CommandKind.SAVE:
            if session.save() is None:
                raise ValueError("Enter an amount greater than 0 before saving")
            self._messages.append(create_message("Saved to history", self._theme))
        elif kind == CommandKind.THEME:
            session.toggle_theme()
        elif kind == CommandKind.HELP:
            self._messages.append(create_help_panel(self._theme))
        return True


def _parse_places(text: Optional[str]) -> int:
    try:
        return int(text)
    except (TypeError, ValueError):
        raise ValueError(f"Decimal places must be a whole number, got {text!r}")


def run_clock(
    session: ConverterSession,
    console: Console,
    refreshes: int,
    interval: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Show a live clock, refreshing it from the calling thread."""
    with Live(create_clock_panel(session.state), console=console, auto_refresh=False) as live:
        for i in range(refreshes):
            session.tick()
            live.update(create_clock_panel(session.state), refresh=True)
            if i < refreshes - 1:
                sleep(interval)
