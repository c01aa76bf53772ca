"""
Grid graph: owns every GridNode and the 4-directional adjacency between them.
"""

from __future__ import annotations
import json
import logging
import math
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .config import TILE_WALL
from .errors import InvalidDimensions, OutOfBounds
from .vector import Vector2

logger = logging.getLogger(__name__)

Position = Union[Vector2, Tuple[int, int]]


class GridNode:
    """A single cell of the search space."""

    def __init__(self, position: Vector2, is_wall: bool = False) -> None:
        self.position = position
        self.is_wall = is_wall
        # Best known cost from the start of the current search
        self.g_score: float = math.inf
        # g_score + heuristic estimate to the goal
        self.f_score: float = math.inf
        # Predecessor position on the best known path
        self.came_from: Optional[Vector2] = None
        # Positions of adjacent open cells (left, right, up, down); resolved
        # to nodes through the owning Grid
        self.neighbors: Tuple[Vector2, ...] = ()

    @property
    def cost(self) -> float:
        return self.f_score

    def clear_scores(self) -> None:
        self.g_score = math.inf
        self.f_score = math.inf
        self.came_from = None

    def __repr__(self) -> str:
        return (
            f"<GridNode x={self.position.x} y={self.position.y} "
            f"g={self.g_score} f={self.f_score}>"
        )


class Grid:
    """
    rows x cols nodes stored as nodes[row][col] (row = y, col = x).
    Walls are nodes that no other node links to.
    """

    def __init__(self, rows: int, cols: int, walls: Iterable[Position] = ()) -> None:
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(
                f"Grid dimensions must be positive, got {rows}x{cols}"
            )
        self.rows = rows
        self.cols = cols

        wall_cells = set()
        for wall in walls:
            pos = Vector2.of(wall)
            if not self.in_bounds(pos):
                raise OutOfBounds(f"Wall {pos} lies outside the {rows}x{cols} grid")
            wall_cells.add(pos)

        # Allocate every node before any adjacency is computed
        self.nodes: List[List[GridNode]] = [
            [
                GridNode(Vector2(col, row), is_wall=Vector2(col, row) in wall_cells)
                for col in range(cols)
            ]
            for row in range(rows)
        ]
        for node in self:
            node.neighbors = self._link(node)

    @classmethod
    def from_map(cls, map_grid: Sequence[Sequence[int]]) -> Grid:
        """
        Build a grid from rows of tile values: TILE_WALL marks a wall,
        anything else is open floor.
        """
        rows = len(map_grid)
        cols = len(map_grid[0]) if rows > 0 else 0
        if rows == 0 or cols == 0:
            raise InvalidDimensions("Map must contain at least one cell")
        if any(len(row) != cols for row in map_grid):
            raise InvalidDimensions("Map rows must all have the same length")
        walls = [
            (x, y)
            for y, row in enumerate(map_grid)
            for x, tile in enumerate(row)
            if tile == TILE_WALL
        ]
        return cls(rows, cols, walls=walls)

    def _link(self, node: GridNode) -> Tuple[Vector2, ...]:
        if node.is_wall:
            return ()
        x, y = node.position
        linked = []
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            pos = Vector2(nx, ny)
            if self.in_bounds(pos) and not self.nodes[ny][nx].is_wall:
                linked.append(pos)
        return tuple(linked)

    def in_bounds(self, position: Position) -> bool:
        """True only for whole-number cells inside the grid."""
        x, y = Vector2.of(position)
        if x != int(x) or y != int(y):
            return False
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_wall(self, position: Position) -> bool:
        """Return True for wall cells and for anything outside the grid."""
        if not self.in_bounds(position):
            return True
        return self.node_at(position).is_wall

    def node_at(self, position: Position) -> GridNode:
        pos = Vector2.of(position)
        if not self.in_bounds(pos):
            raise OutOfBounds(
                f"{pos} lies outside the {self.rows}x{self.cols} grid"
            )
        return self.nodes[int(pos.y)][int(pos.x)]

    def neighbors_of(self, position: Position) -> List[GridNode]:
        """Adjacent open nodes in left, right, up, down order."""
        node = self.node_at(position)
        return [self.nodes[int(p.y)][int(p.x)] for p in node.neighbors]

    def clear_scores(self) -> None:
        for node in self:
            node.clear_scores()

    def __iter__(self) -> Iterator[GridNode]:
        for row in self.nodes:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    def __repr__(self) -> str:
        return f"<Grid rows={self.rows} cols={self.cols}>"


def load_grid(path: str) -> Tuple[Grid, Vector2, Vector2]:
    """
    Load a grid definition from a JSON file:
        {"map": [[0, 1, ...], ...], "start": [x, y], "goal": [x, y]}
    start and goal are optional and default to the top-left and
    bottom-right cells. Returns (grid, start, goal).
    """
    try:
        with open(path, "r") as f:
            data = json.load(f)
        grid = Grid.from_map(data["map"])
        start = Vector2.of(data.get("start", (0, 0)))
        goal = Vector2.of(data.get("goal", (grid.cols - 1, grid.rows - 1)))
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error("Failed to load grid from %s: %s", path, e)
        raise RuntimeError(f"Failed to load grid from {path}: {e}")
    return grid, start, goal
