"""Renderer interface consumed by the logger's event loop."""

from __future__ import annotations

from typing import Protocol

from echelon.events import ScopeFinished, ScopeMessage, ScopeProgress, ScopeStarted


class LogRenderer(Protocol):
    """Receives scope events in the order they were emitted."""

    def render_scope_started(self, entry: ScopeStarted) -> None:
        """A scope opened; create or revive its node."""
        ...

    def render_scope_finished(self, entry: ScopeFinished) -> None:
        """A scope finished, successfully or not."""
        ...

    def render_message(self, entry: ScopeMessage) -> None:
        """A message was logged inside a scope."""
        ...

    def render_process(self, entry: ScopeProgress) -> None:
        """The progress of a scope changed."""
        ...
