"""ANSI colour helpers and the success/failure/neutral colour schema."""

from __future__ import annotations

from dataclasses import dataclass

RESET_SEQUENCE = "\x1b[0m"

BLACK = 0
RED = 1
GREEN = 2
YELLOW = 3
BLUE = 4
MAGENTA = 5
CYAN = 6
WHITE = 7


@dataclass(frozen=True)
class ColorSchema:
    """Colours used for title lines by completion state."""

    success_color: int = GREEN
    failure_color: int = RED
    neutral_color: int = YELLOW


def default_color_schema() -> ColorSchema:
    """Green for success, red for failure, yellow while running."""
    return ColorSchema()


def color_sequence(code: int) -> str:
    """Return the SGR foreground sequence for *code*; negative codes reset."""
    if code < 0:
        return RESET_SEQUENCE
    return f"\x1b[3{code}m"


def colored_text(color: int, text: str) -> str:
    return f"{color_sequence(color)}{text}{RESET_SEQUENCE}"
