"""Run archive and preview requests and shape their responses."""

from __future__ import annotations

from fastapi import status

from canvas2kanban.archive import archive_canvas, plan_archive
from canvas2kanban.canvas import dump_canvas
from canvas2kanban.exceptions import ArchiveWriteError, Canvas2KanbanError
from canvas2kanban.utils.logging_config import get_logger
from server.models import (
    ArchiveErrorResponse,
    ArchiveRequest,
    ArchiveResponse,
    ArchiveSuccessResponse,
    PreviewRequest,
    PreviewResponse,
)

# Initialize logger for this module
logger = get_logger(__name__)


async def process_archive(request: ArchiveRequest) -> tuple[int, ArchiveResponse]:
    """Archive a canvas and return the HTTP status with its response body.

    Parameters
    ----------
    request : ArchiveRequest
        Validated request body.

    Returns
    -------
    tuple[int, ArchiveResponse]
        200 with a success body, 400 for unusable input, 500 for write failures.

    """
    try:
        result = await archive_canvas(
            request.canvas_path,
            color=request.color,
            suffix=request.suffix,
            dry_run=request.dry_run,
        )
    except ArchiveWriteError as exc:
        _log_error(request.canvas_path, exc)
        return status.HTTP_500_INTERNAL_SERVER_ERROR, ArchiveErrorResponse(
            error=str(exc), partial=exc.partial
        )
    except Canvas2KanbanError as exc:
        _log_error(request.canvas_path, exc)
        return status.HTTP_400_BAD_REQUEST, ArchiveErrorResponse(error=str(exc))

    logger.info(
        "Archive request completed",
        extra={
            "canvas": request.canvas_path,
            "archived_count": result.archived_count,
            "dry_run": request.dry_run,
        },
    )
    return status.HTTP_200_OK, ArchiveSuccessResponse(
        canvas_path=str(result.canvas_path),
        archive_path=str(result.archive_path),
        archived_count=result.archived_count,
        groups=result.groups,
        changed=result.changed,
        message=result.message,
    )


def process_preview(request: PreviewRequest) -> PreviewResponse:
    """Compute the merge for in-memory canvas and archive text.

    Raises
    ------
    Canvas2KanbanError
        If the canvas text is malformed.

    """
    plan = plan_archive(request.canvas, request.archive, color=request.color)
    return PreviewResponse(
        archived_count=plan.archived_count,
        groups={name: [card.id for card in cards] for name, cards in plan.grouped.items()},
        archive=plan.markdown,
        canvas=dump_canvas(plan.canvas),
    )


def _log_error(canvas_path: str, exc: Exception) -> None:
    logger.error(
        "Archive request failed",
        extra={"canvas": canvas_path, "error": str(exc)},
    )
