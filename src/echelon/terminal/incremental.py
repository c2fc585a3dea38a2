"""Incremental frame updates.

Given the lines emitted for the previous frame and the lines of the new
frame, compute the terminal control sequence that turns one into the other,
rewriting only the lines that changed.

Cursor invariant: before and after every update the cursor sits at column 0
of the row directly below the last emitted line.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

_CURSOR_UP_FMT = "\x1b[{}A"
_CURSOR_DOWN_FMT = "\x1b[{}B"
_ERASE_TO_LINE_END = "\x1b[K"
_ERASE_BELOW = "\x1b[J"


class Writer(Protocol):
    def write(self, data: str) -> object: ...

    def flush(self) -> object: ...


def _last_lines(lines: Sequence[str], max_lines: int | None) -> list[str]:
    if max_lines is None:
        return list(lines)
    if max_lines <= 0:
        return []
    return list(lines[-max_lines:])


def incremental_update(
    before: Sequence[str],
    after: Sequence[str],
    max_lines: int | None = None,
) -> str:
    """Return the control sequence transforming *before* into *after*.

    When *max_lines* is given only the last *max_lines* lines of either frame
    are compared and emitted; older lines scroll out of the window.
    """
    before = _last_lines(before, max_lines)
    after = _last_lines(after, max_lines)

    if before == after:
        return ""

    out: list[str] = []
    if before:
        out.append(_CURSOR_UP_FMT.format(len(before)))

    unchanged = 0
    for i, line in enumerate(after):
        if i < len(before) and before[i] == line:
            unchanged += 1
            continue
        if unchanged:
            out.append(_CURSOR_DOWN_FMT.format(unchanged))
            unchanged = 0
        out.append("\r")
        out.append(line)
        out.append(_ERASE_TO_LINE_END)
        out.append("\n")

    if unchanged:
        out.append(_CURSOR_DOWN_FMT.format(unchanged))

    if len(after) < len(before):
        out.append("\r")
        out.append(_ERASE_BELOW)

    return "".join(out)


def calculate_incremental_update(
    out: Writer, before: Sequence[str], after: Sequence[str]
) -> None:
    """Write the update for an output of unknown height and flush it."""
    out.write(incremental_update(before, after))
    out.flush()


def calculate_incremental_update_max_lines(
    out: Writer,
    before: Sequence[str],
    after: Sequence[str],
    max_lines: int,
) -> None:
    """Write the update limited to the last *max_lines* lines and flush it."""
    out.write(incremental_update(before, after, max_lines))
    out.flush()
