"""Tests for echelon.terminal.incremental -- frame diffing."""

from __future__ import annotations

import io

from echelon.terminal.incremental import (
    calculate_incremental_update,
    calculate_incremental_update_max_lines,
    incremental_update,
)

from .virtual_terminal import Screen


def _replay(*frames: list[str], max_lines: int | None = None) -> Screen:
    screen = Screen()
    previous: list[str] = []
    for frame in frames:
        screen.feed(incremental_update(previous, frame, max_lines))
        previous = frame
    return screen


# ---------------------------------------------------------------------------
# Unconstrained mode
# ---------------------------------------------------------------------------


class TestUnconstrained:
    def test_first_frame_writes_every_line(self) -> None:
        out = incremental_update([], ["a", "b"])
        assert out == "\ra\x1b[K\n\rb\x1b[K\n"

    def test_identical_frames_emit_nothing(self) -> None:
        assert incremental_update(["a", "b"], ["a", "b"]) == ""
        assert incremental_update([], []) == ""

    def test_only_changed_lines_are_rewritten(self) -> None:
        out = incremental_update(["a", "b", "c"], ["a", "B", "c"])
        assert "\x1b[3A" in out
        assert "B" in out
        assert "a" not in out.replace("\x1b[3A", "")
        assert "c" not in out

    def test_unchanged_runs_collapse_to_one_cursor_move(self) -> None:
        out = incremental_update(["a", "b", "c", "d"], ["a", "b", "c", "D"])
        assert out == "\x1b[4A\x1b[3B\rD\x1b[K\n"

    def test_growing_frame(self) -> None:
        screen = _replay(["a", "b"], ["a", "c", "d"])
        assert screen.content == ["a", "c", "d"]

    def test_shrinking_frame_erases_leftover_lines(self) -> None:
        out = incremental_update(["a", "b", "c"], ["a"])
        assert out.endswith("\r\x1b[J")
        screen = _replay(["a", "b", "c"], ["a"])
        assert screen.content == ["a"]
        assert screen.lines == ["a", ""]

    def test_frame_to_empty(self) -> None:
        screen = _replay(["a", "b"], [])
        assert screen.content == []

    def test_longer_line_replaced_by_shorter(self) -> None:
        screen = _replay(["a long line"], ["short"])
        assert screen.content == ["short"]

    def test_sequence_of_frames_matches_last_frame(self) -> None:
        frames = [
            ["job 1"],
            ["job 1", "  step a"],
            ["job 1", "  step a", "  step b"],
            ["job 1 done"],
            ["job 1 done", "job 2"],
        ]
        screen = _replay(*frames)
        assert screen.content == frames[-1]


# ---------------------------------------------------------------------------
# Height-bounded mode
# ---------------------------------------------------------------------------


class TestHeightBounded:
    def test_only_last_lines_are_emitted(self) -> None:
        out = incremental_update([], ["1", "2", "3", "4", "5"], max_lines=3)
        assert out == "\r3\x1b[K\n\r4\x1b[K\n\r5\x1b[K\n"

    def test_cursor_moves_up_by_retained_window_only(self) -> None:
        before = [str(i) for i in range(10)]
        after = before + ["10"]
        out = incremental_update(before, after, max_lines=4)
        assert out.startswith("\x1b[4A")
        assert "\x1b[10A" not in out

    def test_scrolling_window_tracks_tail(self) -> None:
        frames = [[str(i) for i in range(n)] for n in range(1, 8)]
        screen = _replay(*frames, max_lines=3)
        assert screen.content[-3:] == ["4", "5", "6"]

    def test_zero_budget_emits_nothing(self) -> None:
        assert incremental_update([], ["a"], max_lines=0) == ""

    def test_unbounded_when_frame_fits(self) -> None:
        assert incremental_update(["a"], ["b"], max_lines=5) == incremental_update(
            ["a"], ["b"]
        )


# ---------------------------------------------------------------------------
# Writer helpers
# ---------------------------------------------------------------------------


class TestWriterHelpers:
    def test_calculate_incremental_update_writes_to_stream(self) -> None:
        out = io.StringIO()
        calculate_incremental_update(out, [], ["x"])
        assert out.getvalue() == "\rx\x1b[K\n"

    def test_calculate_incremental_update_max_lines(self) -> None:
        out = io.StringIO()
        calculate_incremental_update_max_lines(out, [], ["x", "y"], 1)
        assert out.getvalue() == "\ry\x1b[K\n"
