"""Command parsing and prompt helpers for the converter screen."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.prompt import Prompt


class CommandKind(Enum):
    """UI events the converter screen understands."""
    AMOUNT = "amount"
    FROM = "from"
    TO = "to"
    SWAP = "swap"
    PLACES = "places"
    SAVE = "save"
    THEME = "theme"
    HELP = "help"
    QUIT = "quit"
    REFRESH = "refresh"


ALIASES = {
    "q": CommandKind.QUIT,
    "exit": CommandKind.QUIT,
    "s": CommandKind.SAVE,
    "?": CommandKind.HELP,
}

# Commands that need an argument
ARGUMENT_COMMANDS = {CommandKind.FROM, CommandKind.TO, CommandKind.PLACES}


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    argument: Optional[str] = None


def parse_command(line: str) -> Command:
    """Turn a line of user input into a Command.

    A bare number sets the amount; an empty line just redraws the screen.

    Raises:
        ValueError: If the command is unknown or misses its argument
    """
    text = line.strip()
    if not text:
        return Command(CommandKind.REFRESH)

    word, _, rest = text.partition(" ")
    rest = rest.strip()
    keyword = word.lower()

    kind = ALIASES.get(keyword)
    if kind is None:
        try:
            kind = CommandKind(keyword)
        except ValueError:
            # Anything else is treated as amount text and filtered later
            if keyword[0].isdigit() or keyword[0] in ".-+":
                return Command(CommandKind.AMOUNT, text)
            raise ValueError(f"Unknown command: {word}")

    if kind == CommandKind.AMOUNT:
        return Command(kind, rest)
    if kind in ARGUMENT_COMMANDS:
        if not rest:
            raise ValueError(f"'{kind.value}' needs an argument")
        return Command(kind, rest)
    return Command(kind)


def get_command_line(prompt: str = "Command") -> str:
    return Prompt.ask(f"[cyan]{prompt}[/]", default="", show_default=False)
