"""Tests for file utilities module."""

from __future__ import annotations

from pathlib import Path

import pytest

from canvas2kanban.exceptions import PreconditionError
from canvas2kanban.file_utils import (
    archive_path_for,
    read_text_async,
    read_text_if_exists_async,
    write_text_async,
)


class TestArchivePathFor:
    """Tests for archive_path_for function."""

    def test_sits_next_to_canvas(self, tmp_path: Path) -> None:
        """Archive path is the canvas stem plus suffix, in the same folder."""
        result = archive_path_for(tmp_path / "Project Board.canvas", "-archive")
        assert result == tmp_path / "Project Board-archive.md"

    def test_empty_suffix(self, tmp_path: Path) -> None:
        assert archive_path_for(tmp_path / "board.canvas", "") == tmp_path / "board.md"

    def test_missing_parent_raises(self, tmp_path: Path) -> None:
        """Raises before any write when the folder does not exist."""
        with pytest.raises(PreconditionError):
            archive_path_for(tmp_path / "gone" / "board.canvas", "-archive")


class TestAsyncFileOperations:
    """Tests for async file operation helpers."""

    @pytest.mark.asyncio
    async def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "test.md"

        await write_text_async(path, "## Todo\n- [ ] a\n")

        assert await read_text_async(path) == "## Todo\n- [ ] a\n"

    @pytest.mark.asyncio
    async def test_crlf_is_preserved(self, tmp_path: Path) -> None:
        """Line endings are neither translated on write nor on read."""
        path = tmp_path / "crlf.md"

        await write_text_async(path, "a\r\nb\r\n")

        assert path.read_bytes() == b"a\r\nb\r\n"
        assert await read_text_async(path) == "a\r\nb\r\n"

    @pytest.mark.asyncio
    async def test_unicode_content(self, tmp_path: Path) -> None:
        path = tmp_path / "unicode.md"
        content = "- [ ] カードを整理 🗂️"

        await write_text_async(path, content)

        assert await read_text_async(path) == content

    @pytest.mark.asyncio
    async def test_read_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await read_text_async(tmp_path / "nonexistent.md")

    @pytest.mark.asyncio
    async def test_read_if_exists(self, tmp_path: Path) -> None:
        path = tmp_path / "maybe.md"
        assert await read_text_if_exists_async(path) is None

        path.write_text("x", encoding="utf-8")
        assert await read_text_if_exists_async(path) == "x"
