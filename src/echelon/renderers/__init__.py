"""Renderers turning scope events into terminal output."""

from echelon.renderers.bar import DEFAULT_STYLE, SIMPLE_STYLE, Bar
from echelon.renderers.base import LogRenderer
from echelon.renderers.config import (
    InteractiveRendererConfig,
    default_rendering_config,
    default_unix_rendering_config,
    default_windows_rendering_config,
)
from echelon.renderers.frame import render_frame
from echelon.renderers.interactive import InteractiveRenderer
from echelon.renderers.node import Node
from echelon.renderers.simple import SimpleRenderer

__all__ = [
    "DEFAULT_STYLE",
    "SIMPLE_STYLE",
    "Bar",
    "InteractiveRenderer",
    "InteractiveRendererConfig",
    "LogRenderer",
    "Node",
    "SimpleRenderer",
    "default_rendering_config",
    "default_unix_rendering_config",
    "default_windows_rendering_config",
    "render_frame",
]
