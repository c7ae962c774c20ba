"""Local configuration for canvas2kanban."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_ARCHIVE_COLOR = "6"  # Obsidian's preset blue
DEFAULT_ARCHIVE_SUFFIX = "-archive"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ROOT_DIR = "."

KANBAN_HEADER = "---\n\nkanban-plugin: basic\n\n---\n\n"
UNCATEGORIZED_GROUP = "Uncategorized"
HEADING_MARKER = "## "
CARD_PREFIX = "- [ ] "
LINE_BREAK_MARKER = "<br>"
ARCHIVE_EXTENSION = ".md"

CANVAS2KANBAN_ARCHIVE_COLOR = os.getenv("CANVAS2KANBAN_ARCHIVE_COLOR", DEFAULT_ARCHIVE_COLOR)
CANVAS2KANBAN_ARCHIVE_SUFFIX = os.getenv("CANVAS2KANBAN_ARCHIVE_SUFFIX", DEFAULT_ARCHIVE_SUFFIX)
CANVAS2KANBAN_LOG_LEVEL = os.getenv("CANVAS2KANBAN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
# The API server only touches canvases under this directory.
CANVAS2KANBAN_ROOT = Path(os.getenv("CANVAS2KANBAN_ROOT", DEFAULT_ROOT_DIR)).expanduser().resolve()
