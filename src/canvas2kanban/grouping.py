"""Assign cards to the group regions that contain them."""

from __future__ import annotations

from typing import Iterable, Sequence

from canvas2kanban.config import UNCATEGORIZED_GROUP
from canvas2kanban.schemas import CanvasNode


def is_node_in_group(node: CanvasNode, group: CanvasNode) -> bool:
    """Return True if ``node`` lies inside ``group``, edges included."""
    return (
        node.x >= group.x
        and node.x + node.width <= group.x + group.width
        and node.y >= group.y
        and node.y + node.height <= group.y + group.height
    )


def find_node_group(node: CanvasNode, groups: Sequence[CanvasNode]) -> str:
    """Name the innermost group containing ``node``.

    Nested groups are the common case, so the containing group with the
    smallest area wins. Equal areas resolve to the group listed first.
    Nodes outside every group land in ``UNCATEGORIZED_GROUP``.
    """
    containing = [group for group in groups if is_node_in_group(node, group)]
    if not containing:
        return UNCATEGORIZED_GROUP

    # min() keeps the first of equal keys
    smallest = min(containing, key=lambda group: group.area)
    return smallest.label or UNCATEGORIZED_GROUP


def group_cards(
    cards: Iterable[CanvasNode], groups: Sequence[CanvasNode]
) -> dict[str, list[CanvasNode]]:
    """Partition cards by group name.

    Keys appear in the order a group first receives a card; cards keep their
    input order within a group.
    """
    grouped: dict[str, list[CanvasNode]] = {}
    for card in cards:
        grouped.setdefault(find_node_group(card, groups), []).append(card)
    return grouped
