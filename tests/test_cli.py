"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from canvas2kanban.cli import build_parser, main


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep handlers from binding to a per-test captured stderr."""
    monkeypatch.setattr("canvas2kanban.cli.configure_logging", lambda level=None: None)


class TestBuildParser:
    """Tests for build_parser function."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["board.canvas"])

        assert args.canvas == Path("board.canvas")
        assert args.color == "6"
        assert args.suffix == "-archive"
        assert args.dry_run is False

    def test_log_level_is_case_insensitive(self) -> None:
        args = build_parser().parse_args(["board.canvas", "--log-level", "debug"])
        assert args.log_level == "DEBUG"


class TestMain:
    """Tests for main function."""

    def test_archives_and_reports(self, backlog_canvas, write_canvas, capsys) -> None:
        canvas_path = write_canvas(backlog_canvas)

        exit_code = main([str(canvas_path), "--color", "6"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Archived 2 cards to board-archive.md" in out
        assert "  Backlog: 1" in out
        assert "  Uncategorized: 1" in out
        assert (canvas_path.parent / "board-archive.md").exists()

    def test_nothing_to_archive(self, backlog_canvas, write_canvas, capsys) -> None:
        canvas_path = write_canvas(backlog_canvas)

        exit_code = main([str(canvas_path), "--color", "2"])

        assert exit_code == 0
        assert "No cards found to archive" in capsys.readouterr().out

    def test_dry_run(self, backlog_canvas, write_canvas, capsys) -> None:
        canvas_path = write_canvas(backlog_canvas)

        exit_code = main([str(canvas_path), "--dry-run"])

        assert exit_code == 0
        assert "Would archive 2 cards" in capsys.readouterr().out
        assert json.loads(canvas_path.read_text(encoding="utf-8")) == backlog_canvas

    def test_error_exit_code(self, tmp_path: Path, capsys) -> None:
        canvas_path = tmp_path / "bad.canvas"
        canvas_path.write_text("not json", encoding="utf-8")

        exit_code = main([str(canvas_path)])

        assert exit_code == 1
        assert "Error archiving cards" in capsys.readouterr().err

    def test_bad_log_level_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["board.canvas", "--log-level", "loud"])
