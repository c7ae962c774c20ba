"""File helpers for reading and writing canvases and archives."""

from __future__ import annotations

import asyncio
from pathlib import Path

from canvas2kanban.config import ARCHIVE_EXTENSION
from canvas2kanban.exceptions import PreconditionError


def archive_path_for(canvas_path: Path, suffix: str) -> Path:
    """Get the archive path that sits next to a canvas file.

    Args:
        canvas_path: Path to the ``.canvas`` file.
        suffix: Text appended to the canvas stem (e.g. ``"-archive"``).

    Returns:
        ``<canvas dir>/<canvas stem><suffix>.md``.

    Raises:
        PreconditionError: If the canvas's parent directory does not exist.
    """
    parent = canvas_path.parent
    if not parent.is_dir():
        raise PreconditionError(
            f"Cannot determine parent folder for the canvas file: {canvas_path}"
        )
    return parent / f"{canvas_path.stem}{suffix}{ARCHIVE_EXTENSION}"


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(_read_text, path, encoding)


async def read_text_if_exists_async(path: Path, encoding: str = "utf-8") -> str | None:
    """Read a file's text, or return None when the file does not exist."""
    if not path.is_file():
        return None
    return await read_text_async(path, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file asynchronously using a thread pool.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.
    """
    await asyncio.to_thread(_write_text, path, content, encoding)


def _read_text(path: Path, encoding: str) -> str:
    # newline="" keeps \r\n intact for the merger
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def _write_text(path: Path, content: str, encoding: str) -> None:
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
