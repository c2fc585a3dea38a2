"""Fixed-width textual progress bar attached to a scope node."""

from __future__ import annotations

import logging
import threading

import grapheme

from echelon.errors import BarStyleError
from echelon.terminal.color import GREEN, colored_text

logger = logging.getLogger(__name__)

# Glyph order: left boundary, fill, tip, space, right boundary
DEFAULT_STYLE = "╢▌▌░╟"
# Similar to the bar drawn by wget
SIMPLE_STYLE = "[=>-]"

FINISHED_MARKER = colored_text(GREEN, "Done")


def _split_style(style: str) -> list[str]:
    glyphs = list(grapheme.graphemes(style))
    if len(glyphs) != 5:
        raise BarStyleError(style, len(glyphs))
    return glyphs


class Bar:
    """Horizontal progress bar.

    Tracks ``current`` out of ``total`` along with an integer ``percentage``
    in ``[0, 100]``. All mutators are thread safe; the bar has its own lock
    so progress updates do not contend with the owning node.
    """

    def __init__(self, total: int, style: str | None = None) -> None:
        try:
            glyphs = _split_style(style if style is not None else DEFAULT_STYLE)
        except BarStyleError:
            logger.debug("falling back to the default bar style for %r", style)
            glyphs = _split_style(DEFAULT_STYLE)
        self._lbound, self._fill, self._tip, self._space, self._rbound = glyphs
        self._lock = threading.Lock()
        self._total = max(total, 0)
        self._current = 0
        self._percentage = 0

    # -- properties ---------------------------------------------------------

    @property
    def total(self) -> int:
        return self._total

    @property
    def current(self) -> int:
        with self._lock:
            return self._current

    @property
    def percentage(self) -> int:
        with self._lock:
            return self._percentage

    @property
    def style(self) -> str:
        with self._lock:
            return self._lbound + self._fill + self._tip + self._space + self._rbound

    # -- progress -----------------------------------------------------------

    def set_progress(self, value: int) -> None:
        with self._lock:
            self._current = min(max(value, 0), self._total)
            self._sync_percentage()

    def add_progress(self, delta: int) -> None:
        with self._lock:
            self._current = min(max(self._current + delta, 0), self._total)
            self._sync_percentage()

    def set_percentage(self, value: int) -> None:
        with self._lock:
            self._percentage = min(max(value, 0), 100)
            self._current = self._total * self._percentage // 100

    def add_percentage(self, delta: int) -> None:
        with self._lock:
            self._percentage = min(max(self._percentage + delta, 0), 100)
            self._current = self._total * self._percentage // 100

    def is_finished(self) -> bool:
        with self._lock:
            return self._percentage == 100

    def _sync_percentage(self) -> None:
        if self._total <= 0:
            self._percentage = 0
            return
        self._percentage = 100 * self._current // self._total

    # -- style --------------------------------------------------------------

    def set_style(self, style: str | None) -> None:
        """Replace the five bar glyphs; ``None`` restores :data:`DEFAULT_STYLE`.

        Raises :class:`BarStyleError` without touching the current style when
        *style* does not consist of exactly five glyphs.
        """
        glyphs = _split_style(style if style is not None else DEFAULT_STYLE)
        with self._lock:
            self._lbound, self._fill, self._tip, self._space, self._rbound = glyphs

    # -- rendering ----------------------------------------------------------

    def render(self, width: int) -> str:
        """Render the bar into *width* columns.

        Returns an empty string when there is no room for the boundaries and
        the finished marker once the bar reaches 100%.
        """
        if width <= 2:
            return ""
        with self._lock:
            if self._percentage == 100:
                return FINISHED_MARKER
            usable = width - 2
            filled = usable * self._percentage // 100
            remaining = usable - 1 - filled
            # A full bar needs no tip
            if filled == usable:
                remaining += 1
            filled = max(filled, 0)
            remaining = max(remaining, 0)
            return (
                self._lbound
                + self._fill * filled
                + self._tip
                + self._space * remaining
                + self._rbound
            )

    def __str__(self) -> str:
        return f"Bar({self._current}/{self._total}, {self._percentage}%)"
