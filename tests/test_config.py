"""Tests for echelon.renderers.config."""

from __future__ import annotations

import dataclasses

import pytest

from echelon.renderers.config import (
    UNIX_PROGRESS_FRAMES,
    WINDOWS_PROGRESS_FRAMES,
    InteractiveRendererConfig,
    default_rendering_config,
    default_unix_rendering_config,
    default_windows_rendering_config,
)


class TestSpinnerFrame:
    @pytest.mark.parametrize(
        ("now", "expected"),
        [(10.0, "a"), (10.3, "b"), (10.6, "c"), (10.9, "d"), (11.1, "a")],
    )
    def test_frame_from_wall_clock(self, now: float, expected: str) -> None:
        config = InteractiveRendererConfig(
            progress_indicator_frames=("a", "b", "c", "d"),
            progress_indicator_cycle_duration=1.0,
        )
        assert config.current_progress_indicator_frame(now) == expected

    def test_independent_configs_agree(self) -> None:
        first = default_unix_rendering_config()
        second = default_unix_rendering_config()
        for now in (0.0, 1234.567, 99999.99):
            assert first.current_progress_indicator_frame(
                now
            ) == second.current_progress_indicator_frame(now)

    def test_zero_cycle_uses_first_frame(self) -> None:
        config = InteractiveRendererConfig(progress_indicator_cycle_duration=0)
        assert config.current_progress_indicator_frame(5.5) == UNIX_PROGRESS_FRAMES[0]

    def test_frame_without_explicit_time(self) -> None:
        config = default_unix_rendering_config()
        assert config.current_progress_indicator_frame() in UNIX_PROGRESS_FRAMES


class TestDefaults:
    def test_unix_defaults(self) -> None:
        config = default_unix_rendering_config()
        assert config.success_status == "✅"
        assert config.failure_status == "❌"
        assert config.description_lines_when_failed == 100
        assert config.default_visible_lines == 5

    def test_windows_defaults(self) -> None:
        config = default_windows_rendering_config()
        assert config.progress_indicator_frames == WINDOWS_PROGRESS_FRAMES
        assert (config.success_status, config.failure_status) == ("+", "-")

    def test_platform_default(self, monkeypatch) -> None:
        monkeypatch.setattr("sys.platform", "win32")
        assert default_rendering_config() == default_windows_rendering_config()
        monkeypatch.setattr("sys.platform", "linux")
        assert default_rendering_config() == default_unix_rendering_config()

    def test_overrides_with_replace(self) -> None:
        config = dataclasses.replace(default_unix_rendering_config(), refresh_rate=1.5)
        assert config.refresh_rate == 1.5
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.refresh_rate = 2.0  # type: ignore[misc]


class TestWidePrefix:
    def test_unix_glyphs_are_wide(self) -> None:
        assert default_unix_rendering_config().has_wide_prefix()

    def test_windows_glyphs_are_narrow(self) -> None:
        config = dataclasses.replace(
            default_windows_rendering_config(), pending_status="="
        )
        assert not config.has_wide_prefix()

    def test_one_wide_frame_is_enough(self) -> None:
        config = InteractiveRendererConfig(
            progress_indicator_frames=("-", "\U0001f550"),
            success_status="+",
            failure_status="x",
            pending_status="=",
        )
        assert config.has_wide_prefix()
