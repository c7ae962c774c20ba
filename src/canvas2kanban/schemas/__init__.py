"""Shared schemas for canvas2kanban."""

from canvas2kanban.schemas.archive import ArchiveResult
from canvas2kanban.schemas.canvas import CanvasData, CanvasNode

__all__ = ["ArchiveResult", "CanvasData", "CanvasNode"]
