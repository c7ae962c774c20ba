"""canvas2kanban: archive canvas cards into Kanban Markdown."""

from canvas2kanban.archive import ArchivePlan, archive_canvas, plan_archive
from canvas2kanban.exceptions import (
    ArchiveWriteError,
    Canvas2KanbanError,
    ParseError,
    PreconditionError,
)
from canvas2kanban.grouping import find_node_group, group_cards, is_node_in_group
from canvas2kanban.kanban import format_card_line, merge_sections
from canvas2kanban.schemas import ArchiveResult, CanvasData, CanvasNode

__all__ = [
    "ArchivePlan",
    "ArchiveResult",
    "ArchiveWriteError",
    "Canvas2KanbanError",
    "CanvasData",
    "CanvasNode",
    "ParseError",
    "PreconditionError",
    "archive_canvas",
    "find_node_group",
    "format_card_line",
    "group_cards",
    "is_node_in_group",
    "merge_sections",
    "plan_archive",
]
