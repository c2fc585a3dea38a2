"""Terminal output: colours, console access and incremental frame updates."""

from echelon.terminal.color import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    MAGENTA,
    RED,
    RESET_SEQUENCE,
    WHITE,
    YELLOW,
    ColorSchema,
    color_sequence,
    colored_text,
    default_color_schema,
)
from echelon.terminal.console import (
    DISABLE_AUTO_WRAP,
    ENABLE_AUTO_WRAP,
    UNKNOWN_SIZE,
    ProcessTerminal,
    Terminal,
)
from echelon.terminal.incremental import (
    calculate_incremental_update,
    calculate_incremental_update_max_lines,
    incremental_update,
)

__all__ = [
    # Colours
    "BLACK",
    "BLUE",
    "CYAN",
    "GREEN",
    "MAGENTA",
    "RED",
    "RESET_SEQUENCE",
    "WHITE",
    "YELLOW",
    "ColorSchema",
    "color_sequence",
    "colored_text",
    "default_color_schema",
    # Console
    "DISABLE_AUTO_WRAP",
    "ENABLE_AUTO_WRAP",
    "UNKNOWN_SIZE",
    "ProcessTerminal",
    "Terminal",
    # Incremental updates
    "calculate_incremental_update",
    "calculate_incremental_update_max_lines",
    "incremental_update",
]
