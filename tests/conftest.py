"""Test setup for canvas2kanban."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from canvas2kanban.schemas import CanvasNode  # noqa: E402

BLUE = "6"


@pytest.fixture
def make_node() -> Callable[..., CanvasNode]:
    """Factory for canvas nodes with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(
        type: str = "text",
        x: float = 0,
        y: float = 0,
        width: float = 10,
        height: float = 10,
        **extra: Any,
    ) -> CanvasNode:
        node_id = extra.pop("id", f"node{next(counter)}")
        return CanvasNode(id=node_id, type=type, x=x, y=y, width=width, height=height, **extra)

    return _make


@pytest.fixture
def backlog_canvas() -> dict[str, Any]:
    """One group with a blue card inside it and a blue card outside it."""
    return {
        "nodes": [
            {"id": "g1", "type": "group", "x": 0, "y": 0, "width": 100, "height": 100, "label": "Backlog"},
            {"id": "c1", "type": "text", "x": 10, "y": 10, "width": 5, "height": 5, "color": BLUE, "text": "first card"},
            {"id": "c2", "type": "text", "x": 200, "y": 200, "width": 5, "height": 5, "color": BLUE, "text": "stray\ncard"},
            {
                "id": "keep",
                "type": "text",
                "x": 20,
                "y": 20,
                "width": 5,
                "height": 5,
                "text": "not archived",
                "styleAttributes": {"border": "dashed"},
            },
        ],
        "edges": [{"id": "e1", "fromNode": "keep", "toNode": "g1", "fromSide": "top"}],
        "metadata": {"version": "1.0-1.0", "frontmatter": {}},
    }


@pytest.fixture
def write_canvas(tmp_path: Path) -> Callable[[dict[str, Any], str], Path]:
    """Write a canvas dict to ``tmp_path`` and return its path."""

    def _write(data: dict[str, Any], name: str = "board.canvas") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
