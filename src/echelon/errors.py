"""Exceptions raised by echelon."""

from __future__ import annotations


class EchelonError(Exception):
    """Base class for all echelon errors."""


class BarStyleError(EchelonError, ValueError):
    """A progress bar style is not made of exactly five glyphs."""

    def __init__(self, style: str, count: int) -> None:
        super().__init__(
            f"invalid bar style {style!r}: expected 5 glyphs, got {count}"
        )
        self.style = style
        self.count = count
