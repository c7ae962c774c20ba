"""Canvas node graph models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CanvasNode(BaseModel):
    """A single node on the canvas.

    Only the fields needed for grouping are named; everything else a canvas
    node carries (``styleAttributes``, ``file``, ``url`` ...) is kept as an
    extra and written back untouched. Coordinates keep their JSON type so an
    integer ``x`` is not re-emitted as ``10.0``.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    type: str
    x: int | float
    y: int | float
    width: int | float = Field(..., ge=0)
    height: int | float = Field(..., ge=0)
    label: str | None = None
    color: str | None = None
    text: str | None = None

    @property
    def area(self) -> int | float:
        return self.width * self.height


class CanvasData(BaseModel):
    """Canvas document: nodes plus opaque edges and metadata."""

    model_config = ConfigDict(extra="allow")

    nodes: list[CanvasNode]
    edges: list[Any] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
