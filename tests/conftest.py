import pytest

from echelon.renderers.config import InteractiveRendererConfig
from echelon.terminal.color import ColorSchema


@pytest.fixture
def plain_config() -> InteractiveRendererConfig:
    """Uncoloured, single-width glyphs so rendered lines are easy to compare."""
    return InteractiveRendererConfig(
        colors=ColorSchema(success_color=-1, failure_color=-1, neutral_color=-1),
        refresh_rate=0.01,
        progress_indicator_frames=("*",),
        success_status="+",
        failure_status="x",
        pending_status="=",
        description_lines_when_failed=100,
        default_visible_lines=5,
    )
