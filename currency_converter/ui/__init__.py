"""
Rich-based terminal screen for Currency Converter.

Modules:
- app.py: Interactive loop and command handling
- display.py: Rich renderables for the converter screen
- input_handler.py: Command parsing and prompts
- theme.py: Light and dark color themes
"""

__all__ = [
    "app",
    "display",
    "input_handler",
    "theme",
]
