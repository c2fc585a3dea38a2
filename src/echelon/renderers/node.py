"""Scope tree nodes for the interactive renderer.

Each node mirrors one scope: its title, status glyph, timing, free-form
description lines, children in first-creation order and an optional progress
bar. Nodes are safe to use from several threads: every node guards its own
fields with a reader/writer lock, so rendering one subtree never blocks
mutation of a sibling.
"""

from __future__ import annotations

import threading
import time

from echelon._sync import ReadWriteLock
from echelon.events import ProgressKind
from echelon.renderers.bar import Bar
from echelon.renderers.config import InteractiveRendererConfig
from echelon.terminal.color import colored_text
from echelon.utils import format_duration, visible_width

_INDENT_STEP = 2
_ELLIPSIS = "..."


def _now() -> float:
    return time.monotonic()


class Node:
    """A scope in the rendered tree."""

    def __init__(
        self,
        title: str,
        config: InteractiveRendererConfig,
        is_root: bool = False,
    ) -> None:
        self._lock = ReadWriteLock()
        self._done = threading.Event()
        self._config = config
        self._is_root = is_root
        self._title = title
        self._status = config.pending_status
        self._title_color = config.colors.neutral_color
        self._description: list[str] = []
        self._visible_description_lines = config.default_visible_lines
        self._start_time: float | None = None
        self._end_time: float | None = None
        self._children: list[Node] = []
        self._bar: Bar | None = None

    def __repr__(self) -> str:
        return f"Node({self._title!r})"

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def title(self) -> str:
        with self._lock.read():
            return self._title

    @property
    def status(self) -> str:
        with self._lock.read():
            return self._status

    @property
    def title_color(self) -> int:
        with self._lock.read():
            return self._title_color

    @property
    def is_root(self) -> bool:
        return self._is_root

    @property
    def children(self) -> list[Node]:
        """Snapshot of the children in creation order."""
        with self._lock.read():
            return list(self._children)

    @property
    def description(self) -> list[str]:
        with self._lock.read():
            return list(self._description)

    @property
    def visible_description_lines(self) -> int:
        with self._lock.read():
            return self._visible_description_lines

    @property
    def start_time(self) -> float | None:
        with self._lock.read():
            return self._start_time

    @property
    def end_time(self) -> float | None:
        with self._lock.read():
            return self._end_time

    @property
    def bar(self) -> Bar | None:
        with self._lock.read():
            return self._bar

    def description_length(self) -> int:
        with self._lock.read():
            return len(self._description)

    def has_started(self) -> bool:
        """A completed node has also started."""
        with self._lock.read():
            return self._start_time is not None

    def has_completed(self) -> bool:
        with self._lock.read():
            return self._end_time is not None

    def is_running(self) -> bool:
        with self._lock.read():
            return self._start_time is not None and self._end_time is None

    def execution_duration(self, now: float | None = None) -> float:
        """Seconds since start while running, or start-to-end once finished."""
        with self._lock.read():
            return self._elapsed(_now() if now is None else now)

    def wait_completion(self, timeout: float | None = None) -> bool:
        """Block until this node completes; children are not awaited."""
        return self._done.wait(timeout)

    # ------------------------------------------------------------------
    # Tree structure
    # ------------------------------------------------------------------

    def find_or_create_child(self, title: str) -> Node:
        """Return the most recently added child called *title*, creating it if absent.

        A completed node no longer grows: the new child is returned detached,
        so late events for a collapsed subtree land nowhere visible.
        """
        with self._lock.write():
            # Newest first: repeated scopes with the same name target the last one
            for child in reversed(self._children):
                if child.title == title:
                    return child
            child = Node(title, self._config)
            if self._end_time is None:
                self._children.append(child)
            return child

    def add_new_child(self, child: Node) -> None:
        with self._lock.write():
            self._children.append(child)

    def start_new_child(self, title: str, total: int = 0) -> Node:
        child = Node(title, self._config)
        child.start(total)
        self.add_new_child(child)
        return child

    def clear_all_children(self) -> None:
        with self._lock.write():
            self._children = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, total: int = 0) -> None:
        """Record the start time once; attach a bar when *total* is positive."""
        with self._lock.write():
            if self._start_time is None:
                self._start_time = _now()
            if total > 0 and self._bar is None:
                self._bar = Bar(total, self._config.bar_style)

    def complete_with_color(self, status: str, color: int) -> None:
        """Mark the node complete; only the first call has any effect."""
        with self._lock.write():
            if self._end_time is not None:
                return
            self._status = status
            self._title_color = color
            self._mark_complete()

    def complete(self) -> None:
        with self._lock.write():
            if self._end_time is not None:
                return
            self._mark_complete()

    def finish(self, success: bool) -> None:
        """Complete the node with the configured success or failure look.

        A successful non-root node collapses to its title line. A failed node
        widens its description window so the failure context stays visible.
        Does nothing once the node has completed.
        """
        with self._lock.write():
            if self._end_time is not None:
                return
            config = self._config
            if success:
                if not self._is_root:
                    self._children = []
                    self._description = []
                self._status = config.success_status
                self._title_color = config.colors.success_color
            else:
                self._visible_description_lines = config.description_lines_when_failed
                self._status = config.failure_status
                self._title_color = config.colors.failure_color
            self._mark_complete()

    def _mark_complete(self) -> None:
        # Caller holds the write lock
        self._end_time = _now()
        if self._start_time is None:
            self._start_time = self._end_time
        self._done.set()

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def update_title(self, text: str) -> None:
        with self._lock.write():
            self._title = text

    def update_config(self, config: InteractiveRendererConfig) -> None:
        with self._lock.write():
            self._config = config

    def set_title_color(self, color: int) -> None:
        with self._lock.write():
            self._title_color = color

    def set_status(self, text: str) -> None:
        with self._lock.write():
            self._status = text

    def set_visible_description_lines(self, count: int) -> None:
        """Limit the description to *count* lines; negative means unlimited."""
        with self._lock.write():
            self._visible_description_lines = count

    def set_description(self, description: list[str]) -> None:
        with self._lock.write():
            self._description = list(description)

    def clear_description(self) -> None:
        self.set_description([])

    def append_description(self, text: str) -> None:
        """Append possibly multi-line *text* without starting a new line first.

        The first line of *text* continues the current last line, so partial
        lines can be streamed over several calls. Ignored once completed.
        """
        segments = text.replace("\r\n", "\n").split("\n")
        with self._lock.write():
            if self._end_time is not None:
                return
            if not self._description:
                self._description = segments
                return
            self._description[-1] += segments[0]
            self._description.extend(segments[1:])

    def apply_progress(self, kind: ProgressKind, value: int) -> None:
        """Forward a progress update to the bar; ignored for nodes without one."""
        bar = self.bar
        if bar is None:
            return
        if kind is ProgressKind.SET_PROGRESS:
            bar.set_progress(value)
        elif kind is ProgressKind.ADD_PROGRESS:
            bar.add_progress(value)
        elif kind is ProgressKind.SET_PERCENTAGE:
            bar.set_percentage(value)
        elif kind is ProgressKind.ADD_PERCENTAGE:
            bar.add_percentage(value)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, width: int = 0, indent: int = 0) -> list[str]:
        """Render this node, its children and its description as lines.

        *width* is the terminal width used to size the progress bar; a
        non-positive width leaves no room for it.
        """
        title_line = self._title_line(width, indent)
        child_indent = indent + _INDENT_STEP
        with self._lock.read():
            config = self._config
        # Double-width glyphs take two cells; keep children under the title text
        if config.has_wide_prefix():
            child_indent += 1

        lines = [title_line]
        for child in self.children:
            lines.extend(child.render(width, child_indent))

        pad = " " * child_indent
        with self._lock.read():
            description = self._description
            visible = self._visible_description_lines
            if 0 <= visible < len(description):
                lines.append(pad + _ELLIPSIS)
                description = description[len(description) - visible:]
            lines.extend(pad + line for line in description)
        return lines

    def _title_line(self, width: int, indent: int) -> str:
        with self._lock.read():
            running = self._start_time is not None and self._end_time is None
            duration = format_duration(self._elapsed(_now()), not self._children)
            if running:
                prefix = self._config.current_progress_indicator_frame()
            else:
                prefix = self._status
            title = self._title
            if self._title_color >= 0:
                title = colored_text(self._title_color, title)
            bar = self._bar

        line = f"{' ' * indent}{prefix} {title} {duration}"
        if bar is not None:
            rendered = bar.render(width - visible_width(line) - 1)
            if rendered:
                line = f"{line} {rendered}"
        return line

    def _elapsed(self, now: float) -> float:
        # Caller holds the lock
        if self._start_time is None:
            return 0.0
        if self._end_time is None:
            return now - self._start_time
        return self._end_time - self._start_time
