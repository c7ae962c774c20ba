"""Archive endpoints for the API."""

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse

from canvas2kanban.config import CANVAS2KANBAN_ROOT
from canvas2kanban.exceptions import Canvas2KanbanError
from server.archive_processor import process_archive, process_preview
from server.models import (
    ArchiveErrorResponse,
    ArchiveRequest,
    ArchiveSuccessResponse,
    PreviewRequest,
    PreviewResponse,
)

router = APIRouter()

ARCHIVE_RESPONSES = {
    status.HTTP_200_OK: {"model": ArchiveSuccessResponse, "description": "Cards archived"},
    status.HTTP_400_BAD_REQUEST: {"model": ArchiveErrorResponse, "description": "Unusable canvas or location"},
    status.HTTP_403_FORBIDDEN: {"description": "Canvas path outside the configured root"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ArchiveErrorResponse, "description": "Write failure"},
}


@router.post("/api/archive", responses=ARCHIVE_RESPONSES)
async def api_archive(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    archive_request: ArchiveRequest,
) -> JSONResponse:
    """Archive colored cards from a canvas file into its Kanban archive.

    **This endpoint reads the canvas at ``canvas_path``, merges the selected cards**
    into ``<canvas stem><suffix>.md`` next to it and removes them from the canvas.

    **Parameters**

    - **archive_request** (`ArchiveRequest`): Pydantic model containing archive parameters

    **Returns**

    - **JSONResponse**: Success response with per-group counts or error response with appropriate HTTP status code

    **Raises**

    - **HTTPException**: **403** - ``canvas_path`` resolves outside ``CANVAS2KANBAN_ROOT``

    """
    # Relative paths are taken from the root; absolute ones must still land inside it
    canvas_path = (CANVAS2KANBAN_ROOT / archive_request.canvas_path).resolve()
    if not canvas_path.is_relative_to(CANVAS2KANBAN_ROOT):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Canvas path outside {CANVAS2KANBAN_ROOT}: {archive_request.canvas_path!r}",
        )

    archive_request = archive_request.model_copy(update={"canvas_path": str(canvas_path)})
    status_code, response = await process_archive(archive_request)
    return JSONResponse(status_code=status_code, content=response.model_dump())


@router.post("/api/preview", response_model=PreviewResponse)
async def api_preview(preview_request: PreviewRequest) -> PreviewResponse:
    """Preview an archive run on in-memory canvas and archive text.

    **Nothing is read from or written to disk.**

    **Raises**

    - **HTTPException**: **400** - the canvas text is malformed

    """
    try:
        return process_preview(preview_request)
    except Canvas2KanbanError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
