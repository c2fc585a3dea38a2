"""Tests for echelon.terminal.console -- the process terminal."""

from __future__ import annotations

import io

from echelon.renderers.interactive import InteractiveRenderer
from echelon.terminal.console import UNKNOWN_SIZE, ProcessTerminal


class TestProcessTerminal:
    def test_unknown_size_when_not_a_tty(self) -> None:
        terminal = ProcessTerminal(io.StringIO())
        assert terminal.columns == UNKNOWN_SIZE
        assert terminal.rows == UNKNOWN_SIZE

    def test_write_and_flush(self) -> None:
        stream = io.StringIO()
        terminal = ProcessTerminal(stream)
        terminal.write("abc")
        terminal.flush()
        assert stream.getvalue() == "abc"

    def test_write_log(self, tmp_path, monkeypatch) -> None:
        log_path = tmp_path / "writes.log"
        monkeypatch.setenv("ECHELON_WRITE_LOG", str(log_path))
        terminal = ProcessTerminal(io.StringIO())
        terminal.write("one")
        terminal.write("two")
        assert log_path.read_text(encoding="utf-8") == "onetwo"

    def test_prepare_is_noop_off_windows(self, monkeypatch) -> None:
        monkeypatch.setattr("sys.platform", "linux")
        ProcessTerminal(io.StringIO()).prepare()

    def test_redirected_output_uses_unbounded_diff(self, plain_config) -> None:
        stream = io.StringIO()
        renderer = InteractiveRenderer(ProcessTerminal(stream), plain_config)
        for i in range(50):
            renderer.root.find_or_create_child(f"job {i}")
        renderer.draw_frame()
        assert stream.getvalue().count("\n") == 50
