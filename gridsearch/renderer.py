"""
Renderer: paints a Grid and the state of an AStarSearch onto a Canvas.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Tuple

from .config import (
    BACKGROUND_COLOR,
    STROKE_COLOR,
    ENDPOINT_STROKE_COLOR,
    CANDIDATE_COLOR,
    EVALUATED_COLOR,
    WALL_COLOR,
    PATH_COLOR,
    PATH_LINE_COLOR,
    PATH_LINE_WIDTH,
)
from .search import SearchState

if TYPE_CHECKING:
    from .canvas import Canvas, ColorValue
    from .grid import Grid, GridNode
    from .search import AStarSearch


class GridRenderer:
    """Draws grid cells as cell_width x cell_height pixel rectangles."""

    def __init__(
        self,
        canvas: Canvas,
        grid: Grid,
        cell_width: float,
        cell_height: float,
    ) -> None:
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError(
                f"Cell size must be positive, got {cell_width}x{cell_height}"
            )
        self.canvas = canvas
        self.grid = grid
        self.cell_width = cell_width
        self.cell_height = cell_height

    def node_rect(self, node: GridNode) -> Tuple[float, float, float, float]:
        """Pixel rectangle (x, y, width, height) covered by a node."""
        return (
            node.position.x * self.cell_width,
            node.position.y * self.cell_height,
            self.cell_width,
            self.cell_height,
        )

    def node_center(self, node: GridNode) -> Tuple[float, float]:
        x, y, w, h = self.node_rect(node)
        return (x + w / 2.0, y + h / 2.0)

    def draw_node(
        self,
        node: GridNode,
        search: AStarSearch,
        fill: Optional[ColorValue] = None,
    ) -> None:
        is_endpoint = node.position in (search.start, search.goal)
        stroke = ENDPOINT_STROKE_COLOR if is_endpoint else STROKE_COLOR
        x, y, w, h = self.node_rect(node)
        self.canvas.rect(x, y, w, h, fill=fill, stroke=stroke)

    def draw(self, search: AStarSearch) -> None:
        """Draw the grid with open, closed and path cells highlighted."""
        self.canvas.clear(BACKGROUND_COLOR)
        for node in self.grid:
            self.draw_node(node, search, fill=WALL_COLOR if node.is_wall else None)
        for node in search.frontier:
            self.draw_node(node, search, fill=CANDIDATE_COLOR)
        for node in search.closed_set:
            self.draw_node(node, search, fill=EVALUATED_COLOR)
        if search.state is SearchState.SUCCEEDED:
            self.draw_path(search)

    def draw_path(self, search: AStarSearch) -> None:
        nodes = [self.grid.node_at(pos) for pos in search.path]
        for node in nodes:
            self.draw_node(node, search, fill=PATH_COLOR)
        centers = [self.node_center(node) for node in nodes]
        for (x1, y1), (x2, y2) in zip(centers, centers[1:]):
            self.canvas.line(x1, y1, x2, y2, PATH_LINE_COLOR, PATH_LINE_WIDTH)
