"""Pydantic models for the archive API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from canvas2kanban.config import CANVAS2KANBAN_ARCHIVE_COLOR


class ArchiveRequest(BaseModel):
    """Request model for the /api/archive endpoint.

    Attributes
    ----------
    canvas_path : str
        Path of the ``.canvas`` file on the server's filesystem.
    color : str | None
        Card color to archive; the configured default when omitted.
    suffix : str | None
        Archive file name suffix; the configured default when omitted.
    dry_run : bool
        Compute the result without writing files.

    """

    canvas_path: str = Field(..., description="Path to the .canvas file")
    color: str | None = Field(default=None, description="Card color to archive")
    suffix: str | None = Field(default=None, description="Archive file name suffix")
    dry_run: bool = Field(default=False, description="Report without writing files")

    @field_validator("canvas_path")
    @classmethod
    def validate_canvas_path(cls, v: str) -> str:
        """Validate that ``canvas_path`` is not empty."""
        if not v.strip():
            err = "canvas_path cannot be empty"
            raise ValueError(err)
        return v.strip()


class PreviewRequest(BaseModel):
    """Request model for the /api/preview endpoint."""

    canvas: str = Field(..., description="Canvas JSON text")
    archive: str = Field(default="", description="Current archive Markdown, if any")
    color: str = Field(default=CANVAS2KANBAN_ARCHIVE_COLOR, description="Card color to archive")


class ArchiveSuccessResponse(BaseModel):
    """Success response model for the /api/archive endpoint.

    Attributes
    ----------
    canvas_path : str
        The canvas that was archived.
    archive_path : str
        The Markdown archive cards were merged into.
    archived_count : int
        Number of cards archived.
    groups : dict[str, int]
        Cards archived per group.
    changed : bool
        Whether files were written.
    message : str
        User-facing notice.

    """

    canvas_path: str
    archive_path: str
    archived_count: int
    groups: dict[str, int] = Field(default_factory=dict)
    changed: bool
    message: str


class PreviewResponse(BaseModel):
    """Response model for the /api/preview endpoint."""

    archived_count: int
    groups: dict[str, list[str]] = Field(default_factory=dict, description="Card ids per group")
    archive: str = Field(..., description="Archive Markdown after the merge")
    canvas: str = Field(..., description="Canvas JSON with archived cards removed")


class ArchiveErrorResponse(BaseModel):
    """Error response model for the archive API.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    partial : bool
        True when the archive was written but the canvas was not.

    """

    error: str
    partial: bool = False


ArchiveResponse = Union[ArchiveSuccessResponse, ArchiveErrorResponse]
