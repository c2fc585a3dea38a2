"""Scope events exchanged between loggers and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Union

# Total passed with a start event when the node shows no progress bar
NO_PROGRESS = 0
# Total used for bars whose size is not known up front
DEFAULT_PROGRESS = 100


class LogLevel(IntEnum):
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4


class ProgressKind(Enum):
    SET_PROGRESS = "set_progress"
    ADD_PROGRESS = "add_progress"
    SET_PERCENTAGE = "set_percentage"
    ADD_PERCENTAGE = "add_percentage"


# ============================================================================
# Event Types
# ============================================================================


@dataclass(frozen=True)
class ScopeStarted:
    path: tuple[str, ...]
    total: int = NO_PROGRESS


@dataclass(frozen=True)
class ScopeFinished:
    path: tuple[str, ...]
    success: bool


@dataclass(frozen=True)
class ScopeMessage:
    path: tuple[str, ...]
    level: LogLevel
    format: str
    args: tuple[Any, ...] = ()

    @property
    def message(self) -> str:
        """The message text, ``%``-formatted when arguments were given."""
        if not self.args:
            return self.format
        return self.format % self.args


@dataclass(frozen=True)
class ScopeProgress:
    path: tuple[str, ...]
    kind: ProgressKind
    value: int


ScopeEvent = Union[ScopeStarted, ScopeFinished, ScopeMessage, ScopeProgress]
