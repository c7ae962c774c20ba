"""Parse canvas JSON and select the nodes involved in archiving."""

from __future__ import annotations

from typing import Iterable

from pydantic import ValidationError

from canvas2kanban.exceptions import ParseError
from canvas2kanban.schemas import CanvasData, CanvasNode

GROUP_NODE_TYPE = "group"
TEXT_NODE_TYPE = "text"


def parse_canvas(text: str) -> CanvasData:
    """Parse canvas JSON text.

    Raises:
        ParseError: If the text is not JSON or does not describe a canvas.
    """
    try:
        return CanvasData.model_validate_json(text)
    except ValidationError as exc:
        raise ParseError(f"Invalid canvas data: {exc}") from exc


def dump_canvas(canvas: CanvasData) -> str:
    """Serialize a canvas, emitting only the keys the source carried."""
    return canvas.model_dump_json(exclude_unset=True)


def select_groups(nodes: Iterable[CanvasNode]) -> list[CanvasNode]:
    """Return labeled group nodes in canvas order."""
    return [
        node
        for node in nodes
        if node.type == GROUP_NODE_TYPE and node.label and node.label.strip()
    ]


def is_archive_card(node: CanvasNode, color: str) -> bool:
    return node.type == TEXT_NODE_TYPE and node.color == color


def select_cards(nodes: Iterable[CanvasNode], color: str) -> list[CanvasNode]:
    """Return text cards tagged with ``color`` in canvas order.

    Raises:
        ParseError: If a selected card carries no text.
    """
    cards = [node for node in nodes if is_archive_card(node, color)]
    for card in cards:
        if card.text is None:
            raise ParseError(f"Card {card.id!r} has no text")
    return cards


def remove_cards(canvas: CanvasData, color: str) -> CanvasData:
    """Return a copy of the canvas without the cards tagged with ``color``.

    Surviving nodes, edges, metadata and unknown keys are passed through as-is.
    """
    kept = [node for node in canvas.nodes if not is_archive_card(node, color)]
    return canvas.model_copy(update={"nodes": kept})
