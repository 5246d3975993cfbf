"""Tests for the console helpers in community_health.utils."""

from __future__ import annotations

from pathlib import Path

import pytest

from community_health.utils import (
    BANNER_EDGE,
    SEPARATOR,
    print_completion_banner,
    print_error,
    print_header,
    print_separator,
    print_summary_table,
    print_warning,
    print_written_files,
)


pytestmark = pytest.mark.unit


class TestPromptOutput:
    def test_header_keeps_brackets_literal(self, capture_console):
        print_header("[❗] – Questions are mandatory", target=capture_console)
        assert "[❗] – Questions are mandatory" in capture_console.file.getvalue()

    def test_separator(self, capture_console):
        print_separator(target=capture_console)
        assert SEPARATOR in capture_console.file.getvalue()


class TestStatusMessages:
    def test_warning_to_target(self, capture_console):
        print_warning("careful [here]", target=capture_console)
        assert "careful [here]" in capture_console.file.getvalue()

    def test_error_goes_to_stderr(self, capsys):
        print_error("Error: [Errno 13] Permission denied")
        captured = capsys.readouterr()
        assert "[Errno 13] Permission denied" in captured.err
        assert captured.out == ""

    def test_summary_table(self, capsys):
        print_summary_table({"Files": "14"}, title="Run")
        out = capsys.readouterr().out
        assert "Run" in out
        assert "Files" in out
        assert "14" in out

    def test_written_files_relative(self, capsys, tmp_path: Path):
        print_written_files([tmp_path / "docs" / "SUPPORT.md"], tmp_path)
        out = capsys.readouterr().out
        assert "docs/SUPPORT.md" in out
        assert str(tmp_path) not in out

    def test_written_files_outside_root(self, capsys, tmp_path: Path):
        print_written_files([Path("/elsewhere/x.md")], tmp_path)
        assert "/elsewhere/x.md" in capsys.readouterr().out

    def test_completion_banner(self, capsys):
        print_completion_banner()
        out = capsys.readouterr().out
        assert "Community health files setup has been done successfully!" in out

    def test_banner_edge_is_whole_star_repeats(self):
        assert BANNER_EDGE == "⋆⋅☆⋅⋆" * 5

    def test_completion_banner_edges(self, capsys):
        print_completion_banner()
        out = capsys.readouterr().out
        assert out.count(BANNER_EDGE) == 2
        assert BANNER_EDGE + "⋆" not in out
