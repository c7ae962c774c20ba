"""Archive pipeline: canvas cards -> Kanban Markdown archive."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from canvas2kanban.canvas import (
    dump_canvas,
    parse_canvas,
    remove_cards,
    select_cards,
    select_groups,
)
from canvas2kanban.config import (
    CANVAS2KANBAN_ARCHIVE_COLOR,
    CANVAS2KANBAN_ARCHIVE_SUFFIX,
)
from canvas2kanban.exceptions import ArchiveWriteError, ParseError, PreconditionError
from canvas2kanban.file_utils import (
    archive_path_for,
    read_text_async,
    read_text_if_exists_async,
    write_text_async,
)
from canvas2kanban.grouping import group_cards
from canvas2kanban.kanban import merge_sections
from canvas2kanban.schemas import ArchiveResult, CanvasData, CanvasNode
from canvas2kanban.utils.logging_config import get_logger

logger = get_logger(__name__)

NO_CARDS_MESSAGE = "No cards found to archive"


@dataclass
class ArchivePlan:
    """Everything an archive run would write, computed without I/O.

    Attributes:
        grouped: Selected cards keyed by group name, in archive order.
        markdown: Archive text after the merge (the input text when there is
            nothing to archive).
        canvas: Canvas with the selected cards removed.
    """

    canvas: CanvasData
    markdown: str
    grouped: dict[str, list[CanvasNode]] = field(default_factory=dict)

    @property
    def archived_count(self) -> int:
        return sum(len(cards) for cards in self.grouped.values())

    @property
    def group_counts(self) -> dict[str, int]:
        return {name: len(cards) for name, cards in self.grouped.items()}

    @property
    def has_changes(self) -> bool:
        return bool(self.grouped)


def plan_archive(
    canvas_text: str, archive_text: str | None, *, color: str
) -> ArchivePlan:
    """Group the cards tagged with ``color`` and merge them into the archive text.

    Raises:
        ParseError: If the canvas is malformed or a card has no text.
    """
    canvas = parse_canvas(canvas_text)
    cards = select_cards(canvas.nodes, color)
    if not cards:
        return ArchivePlan(canvas=canvas, markdown=archive_text or "")

    grouped = group_cards(cards, select_groups(canvas.nodes))
    entries = {
        name: [card.text or "" for card in group_members]
        for name, group_members in grouped.items()
    }
    return ArchivePlan(
        canvas=remove_cards(canvas, color),
        markdown=merge_sections(archive_text or "", entries),
        grouped=grouped,
    )


async def archive_canvas(
    canvas_path: Path | str,
    *,
    color: str | None = None,
    suffix: str | None = None,
    dry_run: bool = False,
) -> ArchiveResult:
    """Move tagged cards from a canvas into its Kanban archive.

    Reads the canvas and the archive, computes the merge, then writes the
    archive before the canvas so a failure never drops cards.

    Args:
        canvas_path: Path to the ``.canvas`` file.
        color: Card color to archive. Defaults to ``CANVAS2KANBAN_ARCHIVE_COLOR``.
        suffix: Archive file name suffix. Defaults to
            ``CANVAS2KANBAN_ARCHIVE_SUFFIX``.
        dry_run: If True, compute the result without writing anything.

    Returns:
        ArchiveResult describing what was (or would be) archived.

    Raises:
        PreconditionError: If the canvas or its folder cannot be read.
        ParseError: If the canvas is malformed.
        ArchiveWriteError: If writing fails; ``partial`` is set when only the
            archive was written.
    """
    canvas_path = Path(canvas_path)
    color = color or CANVAS2KANBAN_ARCHIVE_COLOR
    suffix = CANVAS2KANBAN_ARCHIVE_SUFFIX if suffix is None else suffix
    archive_path = archive_path_for(canvas_path, suffix)

    try:
        canvas_text = await read_text_async(canvas_path)
        archive_text = await read_text_if_exists_async(archive_path)
    except UnicodeDecodeError as exc:
        raise ParseError(f"Cannot decode canvas inputs: {exc}") from exc
    except OSError as exc:
        raise PreconditionError(f"Cannot read canvas inputs: {exc}") from exc

    plan = plan_archive(canvas_text, archive_text, color=color)

    if not plan.has_changes:
        logger.info("No cards to archive", extra={"canvas": str(canvas_path), "color": color})
        return ArchiveResult(
            canvas_path=canvas_path,
            archive_path=archive_path,
            message=NO_CARDS_MESSAGE,
        )

    if dry_run:
        return ArchiveResult(
            canvas_path=canvas_path,
            archive_path=archive_path,
            archived_count=plan.archived_count,
            groups=plan.group_counts,
            message=f"Would archive {plan.archived_count} cards to {archive_path.name}",
        )

    try:
        await write_text_async(archive_path, plan.markdown)
    except OSError as exc:
        logger.error("Archive write failed", extra={"archive": str(archive_path), "error": str(exc)})
        raise ArchiveWriteError(f"Failed to write {archive_path}: {exc}") from exc

    try:
        await write_text_async(canvas_path, dump_canvas(plan.canvas))
    except OSError as exc:
        logger.error(
            "Canvas write failed after archive was updated",
            extra={"canvas": str(canvas_path), "archive": str(archive_path), "error": str(exc)},
        )
        raise ArchiveWriteError(
            f"Archived cards to {archive_path.name} but failed to update {canvas_path}: {exc}",
            partial=True,
        ) from exc

    logger.info(
        "Archived cards",
        extra={
            "canvas": str(canvas_path),
            "archive": str(archive_path),
            "archived_count": plan.archived_count,
            "groups": plan.group_counts,
        },
    )
    return ArchiveResult(
        canvas_path=canvas_path,
        archive_path=archive_path,
        archived_count=plan.archived_count,
        groups=plan.group_counts,
        changed=True,
        message=f"Archived {plan.archived_count} cards to {archive_path.name}",
    )
