"""Command-line entry point for archiving canvas cards."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from canvas2kanban.archive import archive_canvas
from canvas2kanban.config import (
    CANVAS2KANBAN_ARCHIVE_COLOR,
    CANVAS2KANBAN_ARCHIVE_SUFFIX,
    CANVAS2KANBAN_LOG_LEVEL,
)
from canvas2kanban.exceptions import ArchiveWriteError, Canvas2KanbanError
from canvas2kanban.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="canvas2kanban",
        description="Archive colored canvas cards into a Kanban Markdown file.",
    )
    parser.add_argument("canvas", type=Path, help="Path to the .canvas file")
    parser.add_argument(
        "--color",
        default=CANVAS2KANBAN_ARCHIVE_COLOR,
        help="Card color to archive (default: %(default)s)",
    )
    parser.add_argument(
        "--suffix",
        default=CANVAS2KANBAN_ARCHIVE_SUFFIX,
        help="Archive file name suffix (default: %(default)s)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Report without writing files")
    parser.add_argument(
        "--log-level",
        default=CANVAS2KANBAN_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        result = asyncio.run(
            archive_canvas(
                args.canvas,
                color=args.color,
                suffix=args.suffix,
                dry_run=args.dry_run,
            )
        )
    except Canvas2KanbanError as exc:
        partial = isinstance(exc, ArchiveWriteError) and exc.partial
        prefix = "Partial failure" if partial else "Error archiving cards"
        logger.error("Archive failed", extra={"canvas": str(args.canvas), "partial": partial, "error": str(exc)})
        print(f"{prefix}: {exc}", file=sys.stderr)
        return 1

    print(result.message)
    for name, count in result.groups.items():
        print(f"  {name}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
