"""Terminal abstraction for the interactive renderer's output side.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that writes to a text stream, reports its size (``-1`` when
unknown, e.g. when output is redirected) and primes the console for ANSI
escape sequences where the platform requires it.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

DISABLE_AUTO_WRAP = "\x1b[?7l"
ENABLE_AUTO_WRAP = "\x1b[?7h"

# Windows console mode flag
_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
_STD_OUTPUT_HANDLE = -11
_STD_ERROR_HANDLE = -12

UNKNOWN_SIZE = -1


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the byte sink and size queries used while drawing."""

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def prepare(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by a text stream (``sys.stdout`` by default).

    Writes are buffered by the stream and pushed out on :meth:`flush`, so a
    whole frame update reaches the terminal in one piece.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdout
        self._write_log_path: str = os.environ.get("ECHELON_WRITE_LOG", "")

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        return self._query_size()[0]

    @property
    def rows(self) -> int:
        return self._query_size()[1]

    # -- priming ------------------------------------------------------------

    def prepare(self) -> None:
        """Enable ANSI escape processing on Windows consoles.

        Nothing needs to be done on other platforms.
        """
        if sys.platform != "win32":
            return
        for handle_id in (_STD_OUTPUT_HANDLE, _STD_ERROR_HANDLE):
            if not _enable_virtual_terminal(handle_id):
                logger.debug("could not enable VT processing on handle %d", handle_id)

    # -- write --------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to the stream and optionally to the write log."""
        self._stream.write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                logger.debug("cannot append to write log %s", self._write_log_path)

    def flush(self) -> None:
        self._stream.flush()

    # -- private ------------------------------------------------------------

    def _query_size(self) -> tuple[int, int]:
        try:
            fd = self._stream.fileno()
            if not os.isatty(fd):
                return UNKNOWN_SIZE, UNKNOWN_SIZE
            size = os.get_terminal_size(fd)
        except (AttributeError, ValueError, OSError):
            return UNKNOWN_SIZE, UNKNOWN_SIZE
        return size.columns, size.lines


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _enable_virtual_terminal(handle_id: int) -> bool:
    """Add ENABLE_VIRTUAL_TERMINAL_PROCESSING to a Windows console handle."""
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
    handle = kernel32.GetStdHandle(handle_id)
    mode = wintypes.DWORD()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return False
    return bool(
        kernel32.SetConsoleMode(
            handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING
        )
    )
