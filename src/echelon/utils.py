"""Text helpers shared by the renderers: duration formatting and cell widths.

Width measurement strips ANSI escape sequences and segments the remainder into
grapheme clusters so that emoji status glyphs and CJK titles are measured the
way a terminal lays them out.
"""

from __future__ import annotations

import math
import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Duration formatting
# ---------------------------------------------------------------------------

_SECONDS_IN_MINUTE = 60
_MINUTES_IN_HOUR = 60
_DECIMALS_THRESHOLD = 10.0


def format_duration(seconds: float, show_decimals: bool) -> str:
    """Format an elapsed time in seconds for a title line.

    * under 10s with *show_decimals* -> ``"3.4s"``
    * under a minute -> ``"42s"``
    * under an hour -> ``"MM:SS"``
    * otherwise -> ``"HH:MM:SS"``
    """
    seconds = max(seconds, 0.0)
    if seconds < _DECIMALS_THRESHOLD and show_decimals:
        # Truncate to whole milliseconds before rounding to one decimal.
        return f"{math.floor(seconds * 1000) / 1000:.1f}s"
    whole = int(math.floor(seconds))
    secs = whole % _SECONDS_IN_MINUTE
    if seconds < _SECONDS_IN_MINUTE:
        return f"{secs}s"
    minutes = (whole // _SECONDS_IN_MINUTE) % _MINUTES_IN_HOUR
    if seconds < _SECONDS_IN_MINUTE * _MINUTES_IN_HOUR:
        return f"{minutes:02d}:{secs:02d}"
    hours = whole // (_SECONDS_IN_MINUTE * _MINUTES_IN_HOUR)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


# ---------------------------------------------------------------------------
# Width measurement
# ---------------------------------------------------------------------------

# CSI sequences (colours, erase) and OSC 8 hyperlinks
_STRIP_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]|\x1b\]8;;[^\x07]*\x07")

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def grapheme_width(g: str) -> int:
    """Return the terminal cell width of a single grapheme cluster."""
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        if 0x2600 <= cp <= 0x27BF and unicodedata.east_asian_width(g) == "W":
            return 2
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        # VS16, ZWJ, skin tone modifiers, regional indicators
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2
    if unicodedata.category(first).startswith("M") or unicodedata.category(first) == "Cf":
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Calculate the number of terminal cells *text* occupies.

    ANSI escape sequences contribute nothing; tabs count as 3 cells.
    """
    if not text:
        return 0

    stripped = _STRIP_RE.sub("", text)
    if not stripped:
        return 0
    stripped = stripped.replace("\t", "   ")

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def starts_with_wide_glyph(text: str) -> bool:
    """Return ``True`` when the first visible grapheme of *text* is double width."""
    stripped = _STRIP_RE.sub("", text)
    for g in grapheme.graphemes(stripped):
        return grapheme_width(g) == 2
    return False
