"""echelon: hierarchical progress and log output for concurrent work."""

from echelon.errors import BarStyleError, EchelonError
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
from echelon.logger import Logger
from echelon.renderers import (
    Bar,
    InteractiveRenderer,
    InteractiveRendererConfig,
    LogRenderer,
    Node,
    SimpleRenderer,
    default_rendering_config,
    render_frame,
)
from echelon.terminal import ProcessTerminal, Terminal, incremental_update
from echelon.utils import format_duration, visible_width

__all__ = [
    # Errors
    "BarStyleError",
    "EchelonError",
    # Events
    "DEFAULT_PROGRESS",
    "NO_PROGRESS",
    "LogLevel",
    "ProgressKind",
    "ScopeEvent",
    "ScopeFinished",
    "ScopeMessage",
    "ScopeProgress",
    "ScopeStarted",
    # Logger
    "Logger",
    # Renderers
    "Bar",
    "InteractiveRenderer",
    "InteractiveRendererConfig",
    "LogRenderer",
    "Node",
    "SimpleRenderer",
    "default_rendering_config",
    "render_frame",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    "incremental_update",
    # Utilities
    "format_duration",
    "visible_width",
]
