"""Merge archived cards into a Kanban Markdown document."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Sequence

from canvas2kanban.config import (
    CARD_PREFIX,
    HEADING_MARKER,
    KANBAN_HEADER,
    LINE_BREAK_MARKER,
)

_CRLF = "\r\n"
_LF = "\n"
_CRLF_HEADER = KANBAN_HEADER.replace(_LF, _CRLF)
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_Line = tuple[str, str]  # (text, line ending)


@dataclass
class _OpenSection:
    """State of the section walk while inside a ``## name`` section."""

    name: str
    heading_index: int  # index of the heading line in the output


def ensure_header(document: str) -> str:
    """Prepend the Kanban front matter unless the document already starts with it.

    The header is recognized with either LF or CRLF line endings; a missing
    header is written in the style of the document's first line ending.
    """
    if document.startswith(KANBAN_HEADER) or document.startswith(_CRLF_HEADER):
        return document
    return KANBAN_HEADER.replace(_LF, _detect_newline(document)) + document


def format_card_line(text: str) -> str:
    """Render card text as a single unchecked Kanban item."""
    return CARD_PREFIX + _LINE_BREAK_RE.sub(LINE_BREAK_MARKER, text)


def parse_heading(line: str) -> str | None:
    """Return the section name for a ``## `` heading line, else None."""
    if not line.startswith(HEADING_MARKER):
        return None
    return line[len(HEADING_MARKER) :].strip()


def merge_sections(
    document: str, entries_by_group: Mapping[str, Sequence[str]]
) -> str:
    """Merge card texts into the document, one section per group.

    Entries for a group whose ``## name`` heading already exists go directly
    under the first such heading, ahead of the section's existing lines, and
    take that heading's line ending. Groups without a heading are appended at
    the end in mapping order, using the document's first line ending. Every
    existing line keeps its own ending, so documents with mixed line endings
    come back unchanged outside the inserted lines.

    Parameters
    ----------
    document : str
        Current archive text; may be empty.
    entries_by_group : Mapping[str, Sequence[str]]
        Raw card texts keyed by group name. Not modified.

    Returns
    -------
    str
        The merged document, always starting with the Kanban header.
    """
    document = ensure_header(document)
    newline = _detect_newline(document)
    lines = _split_lines(document, newline)
    pending = _pending_entries(entries_by_group)

    merged: list[_Line] = []
    section: _OpenSection | None = None  # None means outside any section
    for text, ending in lines:
        name = parse_heading(text)
        if name is not None:
            _flush_section(section, merged, pending)
            section = _OpenSection(name=name, heading_index=len(merged))
        merged.append((text, ending))
    _flush_section(section, merged, pending)

    for name, entry_lines in pending.items():
        merged.extend(
            (text, newline) for text in ["", HEADING_MARKER + name, "", *entry_lines]
        )

    if not document.endswith(_LF):
        merged[-1] = (merged[-1][0], "")
    return "".join(text + ending for text, ending in merged)


def _flush_section(
    section: _OpenSection | None,
    merged: list[_Line],
    pending: dict[str, list[str]],
) -> None:
    if section is None:
        return
    entry_lines = pending.pop(section.name, None)
    if entry_lines:
        insert_at = section.heading_index + 1
        heading_ending = merged[section.heading_index][1]
        merged[insert_at:insert_at] = [(entry, heading_ending) for entry in entry_lines]


def _pending_entries(
    entries_by_group: Mapping[str, Sequence[str]],
) -> dict[str, list[str]]:
    pending: dict[str, list[str]] = {}
    for name, entries in entries_by_group.items():
        if not entries:
            continue
        pending.setdefault(name.strip(), []).extend(
            format_card_line(entry) for entry in entries
        )
    return pending


def _detect_newline(document: str) -> str:
    first_break = document.find(_LF)
    if first_break > 0 and document[first_break - 1] == "\r":
        return _CRLF
    return _LF


def _split_lines(document: str, newline: str) -> list[_Line]:
    # An unterminated last line borrows the document's newline so lines can be
    # appended after it; merge_sections drops it again at the end.
    parts = document.split(_LF)
    terminated = parts[-1] == ""
    if terminated:
        parts.pop()

    lines: list[_Line] = []
    for part in parts:
        if part.endswith("\r"):
            lines.append((part[:-1], _CRLF))
        else:
            lines.append((part, _LF))
    if not terminated:
        lines[-1] = (parts[-1], newline)
    return lines
