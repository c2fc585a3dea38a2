"""Configuration of the interactive renderer."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field

from echelon.renderers.bar import DEFAULT_STYLE
from echelon.terminal.color import ColorSchema, default_color_schema
from echelon.utils import starts_with_wide_glyph

UNIX_PROGRESS_FRAMES = (
    "🕐", "🕑", "🕒", "🕓", "🕔", "🕕", "🕖", "🕗", "🕘", "🕙", "🕚", "🕛",
)
WINDOWS_PROGRESS_FRAMES = ("\\", "|", "/", "-")


@dataclass(frozen=True)
class InteractiveRendererConfig:
    """Timing, glyphs and colours used by the interactive renderer.

    Durations are in seconds.
    """

    colors: ColorSchema = field(default_factory=default_color_schema)
    refresh_rate: float = 0.2
    progress_indicator_frames: tuple[str, ...] = UNIX_PROGRESS_FRAMES
    progress_indicator_cycle_duration: float = 1.0
    success_status: str = "✅"
    failure_status: str = "❌"
    pending_status: str = "⏸"
    description_lines_when_failed: int = 100
    default_visible_lines: int = 5
    bar_style: str = DEFAULT_STYLE

    def current_progress_indicator_frame(self, now: float | None = None) -> str:
        """Return the spinner frame for wall-clock time *now*.

        The frame depends only on the time, so independent renderers animate
        in step without sharing a counter.
        """
        frames = self.progress_indicator_frames
        if not frames:
            return ""
        if now is None:
            now = time.time()
        cycle = self.progress_indicator_cycle_duration
        if cycle <= 0:
            return frames[0]
        per_frame = cycle / len(frames)
        index = int((now % cycle) // per_frame)
        if 0 <= index < len(frames):
            return frames[index]
        return frames[0]

    def has_wide_prefix(self) -> bool:
        """Whether any status glyph or spinner frame is two cells wide.

        Children are indented by the same amount whatever state their parent
        is in, so one wide glyph widens the indent for every state.
        """
        glyphs = (
            self.pending_status,
            self.success_status,
            self.failure_status,
            *self.progress_indicator_frames,
        )
        return any(starts_with_wide_glyph(glyph) for glyph in glyphs)


def default_unix_rendering_config() -> InteractiveRendererConfig:
    return InteractiveRendererConfig()


def default_windows_rendering_config() -> InteractiveRendererConfig:
    return InteractiveRendererConfig(
        refresh_rate=0.25,
        progress_indicator_frames=WINDOWS_PROGRESS_FRAMES,
        success_status="+",
        failure_status="-",
    )


def default_rendering_config() -> InteractiveRendererConfig:
    """Return the default configuration for the current platform."""
    if sys.platform == "win32":
        return default_windows_rendering_config()
    return default_unix_rendering_config()
