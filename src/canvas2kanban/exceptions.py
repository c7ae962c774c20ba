"""Custom exceptions for canvas2kanban."""


class Canvas2KanbanError(Exception):
    """Base exception for canvas2kanban operations."""


class ParseError(Canvas2KanbanError):
    """Canvas content could not be parsed into nodes."""


class PreconditionError(Canvas2KanbanError):
    """A required location or input is missing before any write."""


class ArchiveWriteError(Canvas2KanbanError):
    """Error while persisting the archive or the canvas.

    Attributes:
        partial: True when the archive was written but the canvas was not,
            leaving archived cards on the canvas.
    """

    def __init__(self, message: str, *, partial: bool = False) -> None:
        super().__init__(message)
        self.partial = partial
