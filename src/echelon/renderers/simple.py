"""Line-by-line renderer for non-interactive output such as CI logs."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from typing import TextIO

from echelon.events import ScopeFinished, ScopeMessage, ScopeProgress, ScopeStarted
from echelon.terminal.color import ColorSchema, colored_text, default_color_schema
from echelon.terminal.console import ProcessTerminal
from echelon.utils import format_duration


def quoted_if_needed(s: str) -> str:
    """Wrap *s* in single quotes unless it already contains a quote."""
    if "'" in s or '"' in s:
        return s
    return f"'{s}'"


class SimpleRenderer:
    """Prints one line per event and ignores progress updates."""

    def __init__(
        self,
        out: TextIO | None = None,
        colors: ColorSchema | None = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._colors = colors if colors is not None else default_color_schema()
        self._start_times: dict[str, float] = {}
        ProcessTerminal(self._out).prepare()

    def render_scope_started(self, entry: ScopeStarted) -> None:
        if not entry.path:
            return
        key = "/".join(entry.path)
        if key in self._start_times:
            # duplicate event
            return
        self._start_times[key] = time.monotonic()
        message = f"Started {quoted_if_needed(entry.path[-1])}"
        self._render_entry(colored_text(self._colors.neutral_color, message))

    def render_scope_finished(self, entry: ScopeFinished) -> None:
        if not entry.path:
            return
        now = time.monotonic()
        started = self._start_times.get("/".join(entry.path), now)
        duration = format_duration(now - started, True)
        name = quoted_if_needed(entry.path[-1])
        if entry.success:
            message = f"{name} succeeded in {duration}!"
            self._render_entry(colored_text(self._colors.success_color, message))
        else:
            message = f"{name} failed in {duration}!"
            self._render_entry(colored_text(self._colors.neutral_color, message))

    def render_message(self, entry: ScopeMessage) -> None:
        self._render_entry(entry.message)

    def render_process(self, entry: ScopeProgress) -> None:
        """Progress is not shown in line-by-line output."""

    def scope_has_started(self, path: Sequence[str]) -> bool:
        """Whether the scope at *path* has started; finished scopes count too."""
        if not path:
            return True
        return "/".join(path) in self._start_times

    def _render_entry(self, message: str) -> None:
        self._out.write(message + "\n")
        self._out.flush()
