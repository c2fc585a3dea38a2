"""Scoped loggers feeding a single ordered event stream.

Every :class:`Logger` derived from the same root shares one channel. Producer
calls hand their event to the channel and block until the single consumer
thread is ready for it; the consumer dispatches events to the renderer one at
a time, in order. Opening a scope emits its start event before the child
logger is returned, so anything logged through the child is seen after it.
"""

from __future__ import annotations

import logging
import queue
import threading
from types import TracebackType
from typing import Any

from echelon.events import (
    DEFAULT_PROGRESS,
    NO_PROGRESS,
    LogLevel,
    ProgressKind,
    ScopeEvent,
    ScopeFinished,
    ScopeMessage,
    ScopeProgress,
    ScopeStarted,
)
from echelon.renderers.base import LogRenderer

logger = logging.getLogger(__name__)


class _Channel:
    """Hand-off queue with exactly one consumer thread."""

    def __init__(self, renderer: LogRenderer) -> None:
        self._queue: queue.Queue[ScopeEvent] = queue.Queue(maxsize=1)
        self._renderer = renderer
        self._thread = threading.Thread(
            target=self._stream_entries, name="echelon-events", daemon=True
        )
        self._thread.start()

    def put(self, event: ScopeEvent) -> None:
        self._queue.put(event)

    def _stream_entries(self) -> None:
        logger.debug("event consumer started for %r", self._renderer)
        while True:
            event = self._queue.get()
            try:
                self._dispatch(event)
            except Exception:
                logger.exception("renderer failed on %r", event)
            finally:
                self._queue.task_done()

    def _dispatch(self, event: ScopeEvent) -> None:
        if isinstance(event, ScopeStarted):
            self._renderer.render_scope_started(event)
        elif isinstance(event, ScopeFinished):
            self._renderer.render_scope_finished(event)
        elif isinstance(event, ScopeMessage):
            self._renderer.render_message(event)
        elif isinstance(event, ScopeProgress):
            self._renderer.render_process(event)

    def join(self) -> None:
        self._queue.join()


class Logger:
    """A logger bound to one scope path.

    Create the root with ``Logger(level, renderer)`` and open nested scopes
    with :meth:`scoped` or :meth:`bar`. Every opened scope must be finished,
    on error paths too, or the renderer never sees the tree complete; using
    the child logger as a context manager takes care of that.
    """

    def __init__(
        self,
        level: LogLevel,
        renderer: LogRenderer,
        *,
        _path: tuple[str, ...] = (),
        _channel: _Channel | None = None,
    ) -> None:
        self._level = level
        self._path = _path
        self._channel = _channel if _channel is not None else _Channel(renderer)
        self._renderer = renderer

    def __repr__(self) -> str:
        return f"Logger({'/'.join(self._path) or '<root>'})"

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def path(self) -> tuple[str, ...]:
        return self._path

    def emit(self, event: ScopeEvent) -> None:
        """Hand *event* to the consumer, blocking until it is accepted."""
        self._channel.put(event)

    def flush(self) -> None:
        """Wait until every event emitted so far has been rendered."""
        self._channel.join()

    # -- scopes -------------------------------------------------------------

    def scoped(self, scope: str, total: int = NO_PROGRESS) -> Logger:
        """Open a child scope and return its logger.

        A positive *total* gives the scope a progress bar of that size.
        """
        child = Logger(
            self._level,
            self._renderer,
            _path=self._path + (scope,),
            _channel=self._channel,
        )
        self.emit(ScopeStarted(child._path, total))
        return child

    def bar(self, scope: str, total: int = DEFAULT_PROGRESS) -> Logger:
        """Open a child scope that shows a progress bar."""
        return self.scoped(scope, total)

    def finish(self, success: bool = True) -> None:
        self.emit(ScopeFinished(self._path, success))

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.finish(exc_type is None)

    # -- messages -----------------------------------------------------------

    def is_level_enabled(self, level: LogLevel) -> bool:
        return level <= self._level

    def log(self, level: LogLevel, fmt: str, *args: Any) -> None:
        if self.is_level_enabled(level):
            self.emit(ScopeMessage(self._path, level, fmt, args))

    def trace(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.TRACE, fmt, *args)

    def debug(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.INFO, fmt, *args)

    def warn(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.WARN, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.ERROR, fmt, *args)

    # -- progress -----------------------------------------------------------

    def set_progress(self, progress: int) -> None:
        self.emit(ScopeProgress(self._path, ProgressKind.SET_PROGRESS, progress))

    def add_progress(self, delta: int) -> None:
        self.emit(ScopeProgress(self._path, ProgressKind.ADD_PROGRESS, delta))

    def set_percentage(self, percentage: int) -> None:
        self.emit(ScopeProgress(self._path, ProgressKind.SET_PERCENTAGE, percentage))

    def add_percentage(self, delta: int) -> None:
        self.emit(ScopeProgress(self._path, ProgressKind.ADD_PERCENTAGE, delta))
