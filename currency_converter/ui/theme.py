"""Screen themes and constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    name: str
    icon: str
    primary: str
    muted: str
    accent: str
    error: str
    border: str


LIGHT_THEME = Theme(
    name="light",
    icon="☀️",
    primary="bold blue",
    muted="grey50",
    accent="green",
    error="red",
    border="blue",
)

DARK_THEME = Theme(
    name="dark",
    icon="\U0001F319",
    primary="bold cyan",
    muted="grey62",
    accent="bright_green",
    error="bright_red",
    border="magenta",
)

TITLE = "Currency Converter"


def theme_for(dark: bool) -> Theme:
    return DARK_THEME if dark else LIGHT_THEME
