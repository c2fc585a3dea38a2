"""Interactive renderer: a live, redrawing tree of scopes.

Scope events mutate a tree of :class:`~echelon.renderers.node.Node` objects
on the logger's consumer thread while a separate drawing thread periodically
renders the tree and writes only the lines that changed.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from types import TracebackType

from echelon.events import ScopeFinished, ScopeMessage, ScopeProgress, ScopeStarted
from echelon.renderers.config import InteractiveRendererConfig, default_rendering_config
from echelon.renderers.frame import render_frame
from echelon.renderers.node import Node
from echelon.terminal.console import (
    DISABLE_AUTO_WRAP,
    ENABLE_AUTO_WRAP,
    ProcessTerminal,
    Terminal,
)
from echelon.terminal.incremental import (
    calculate_incremental_update,
    calculate_incremental_update_max_lines,
)

logger = logging.getLogger(__name__)


class InteractiveRenderer:
    """Renders scopes as an indented tree that is redrawn in place.

    Typical use::

        renderer = InteractiveRenderer()
        renderer.run_in_background()
        log = Logger(LogLevel.INFO, renderer)
        ...
        log.finish(True)
        renderer.stop_drawing()
    """

    def __init__(
        self,
        terminal: Terminal | None = None,
        config: InteractiveRendererConfig | None = None,
    ) -> None:
        self.terminal: Terminal = terminal if terminal is not None else ProcessTerminal()
        self.config = config if config is not None else default_rendering_config()
        self.root = Node("root", self.config, is_root=True)

        # Lines emitted by the previous frame
        self._current_frame_lines: list[str] = []
        self._draw_lock = threading.Lock()
        # Queried once: changing the row budget mid-session would desync the diff
        self._terminal_height = self.terminal.rows
        self._primed = False
        self._draw_thread: threading.Thread | None = None

    @property
    def current_frame_lines(self) -> list[str]:
        with self._draw_lock:
            return list(self._current_frame_lines)

    # ------------------------------------------------------------------
    # LogRenderer
    # ------------------------------------------------------------------

    def _find_node(self, path: Sequence[str]) -> Node:
        node = self.root
        for scope in path:
            node = node.find_or_create_child(scope)
        return node

    def render_scope_started(self, entry: ScopeStarted) -> None:
        self._find_node(entry.path).start(entry.total)

    def render_scope_finished(self, entry: ScopeFinished) -> None:
        self._find_node(entry.path).finish(entry.success)

    def render_message(self, entry: ScopeMessage) -> None:
        self._find_node(entry.path).append_description(entry.message + "\n")

    def render_process(self, entry: ScopeProgress) -> None:
        self._find_node(entry.path).apply_progress(entry.kind, entry.value)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def start_drawing(self) -> None:
        """Draw frames every ``refresh_rate`` seconds until the root completes."""
        self._prime()
        while not self.root.has_completed():
            self.draw_frame()
            self.root.wait_completion(self.config.refresh_rate)
        self.draw_frame()

    def stop_drawing(self) -> None:
        """Complete the root scope and flush one last frame."""
        self.root.complete()
        if self._draw_thread is not None:
            self._draw_thread.join()
            self._draw_thread = None
        self.draw_frame()
        if self._primed:
            self.terminal.write(ENABLE_AUTO_WRAP)
            self.terminal.flush()

    def run_in_background(self) -> threading.Thread:
        """Run :meth:`start_drawing` on a daemon thread and return it."""
        thread = threading.Thread(
            target=self.start_drawing, name="echelon-draw", daemon=True
        )
        self._draw_thread = thread
        thread.start()
        return thread

    def draw_frame(self) -> None:
        """Render the tree and write the difference to the previous frame.

        Safe to call from several threads; draws never interleave.
        """
        with self._draw_lock:
            width = self.terminal.columns
            new_frame_lines = render_frame(self.root, max(width, 0))
            if self._terminal_height > 0:
                # The cursor parks on the row below the last line
                calculate_incremental_update_max_lines(
                    self.terminal,
                    self._current_frame_lines,
                    new_frame_lines,
                    max(self._terminal_height - 1, 1),
                )
            else:
                calculate_incremental_update(
                    self.terminal, self._current_frame_lines, new_frame_lines
                )
            self._current_frame_lines = new_frame_lines

    def _prime(self) -> None:
        with self._draw_lock:
            if self._primed:
                return
            try:
                self.terminal.prepare()
            except (OSError, AttributeError):
                logger.debug("terminal preparation failed", exc_info=True)
            # Wrapped lines would break incremental redraws
            self.terminal.write(DISABLE_AUTO_WRAP)
            self.terminal.flush()
            self._primed = True

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> InteractiveRenderer:
        self.run_in_background()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop_drawing()
