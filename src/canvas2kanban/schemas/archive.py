"""Archive run output model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ArchiveResult(BaseModel):
    """Outcome of archiving one canvas.

    Attributes:
        canvas_path: The canvas the cards were taken from.
        archive_path: The Markdown archive the cards were merged into.
        archived_count: Number of cards moved to the archive.
        groups: Cards archived per group, in archive order.
        changed: False when nothing was found to archive or on a dry run.
        message: User-facing notice describing the outcome.
    """

    canvas_path: Path
    archive_path: Path
    archived_count: int = Field(default=0, ge=0)
    groups: dict[str, int] = Field(default_factory=dict)
    changed: bool = False
    message: str
