"""
Pathfinding: incremental A* search over a Grid.

One call to step() expands exactly one node, so a frame loop can animate the
frontier while a batch caller simply runs the search to completion.
"""

from __future__ import annotations
import enum
import logging
from typing import Dict, FrozenSet, List, Optional, Tuple

from .config import EDGE_COST
from .errors import InvalidStartOrGoal, NoPathExists, SearchInProgress
from .grid import Grid, GridNode, Position
from .vector import Vector2, manhattan_distance

logger = logging.getLogger(__name__)

# Manhattan distance is admissible and consistent for unit-cost
# 4-directional movement.
heuristic = manhattan_distance


class SearchState(enum.Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class AStarSearch:
    """
    A* search from start to goal on a grid.

    Ties between equal f-scores go to the node that entered the open set
    first.
    """

    def __init__(self, grid: Grid, start: Position, goal: Position) -> None:
        self.grid = grid
        self.start = self._endpoint(grid, start, "start")
        self.goal = self._endpoint(grid, goal, "goal")
        self.reset()

    @staticmethod
    def _endpoint(grid: Grid, position: Position, name: str) -> Vector2:
        try:
            pos = Vector2.of(position)
        except ValueError as e:
            raise InvalidStartOrGoal(f"Invalid {name} {position!r}: {e}")
        if not grid.in_bounds(pos):
            raise InvalidStartOrGoal(
                f"{name.capitalize()} {pos} lies outside the "
                f"{grid.rows}x{grid.cols} grid"
            )
        if grid.is_wall(pos):
            raise InvalidStartOrGoal(f"{name.capitalize()} {pos} is a wall")
        return Vector2(int(pos.x), int(pos.y))

    def reset(self) -> None:
        """Clear all node scores and seed the open set with the start node."""
        self.grid.clear_scores()
        start_node = self.grid.node_at(self.start)
        start_node.g_score = 0
        start_node.f_score = heuristic(self.start, self.goal)
        # dicts keep insertion order, which drives tie-breaking
        self._open: Dict[GridNode, None] = {start_node: None}
        self._closed: Dict[GridNode, None] = {}
        self.state = SearchState.RUNNING
        self.current: Optional[GridNode] = None
        self.expanded_count = 0

    @property
    def open_set(self) -> FrozenSet[GridNode]:
        return frozenset(self._open)

    @property
    def closed_set(self) -> FrozenSet[GridNode]:
        return frozenset(self._closed)

    @property
    def frontier(self) -> Tuple[GridNode, ...]:
        """Open nodes in the order they were discovered."""
        return tuple(self._open)

    @property
    def is_finished(self) -> bool:
        return self.state is not SearchState.RUNNING

    def step(self) -> SearchState:
        """Expand the cheapest open node. Does nothing once finished."""
        if self.is_finished:
            return self.state
        if not self._open:
            self.state = SearchState.FAILED
            logger.info(
                "No path from %s to %s after %d expansions",
                self.start, self.goal, self.expanded_count,
            )
            return self.state

        # min() keeps the first of several equal keys
        current = min(self._open, key=lambda node: node.f_score)
        del self._open[current]
        self._closed[current] = None
        self.current = current
        self.expanded_count += 1
        logger.debug("Expanding %r", current)

        if current.position == self.goal:
            self.state = SearchState.SUCCEEDED
            logger.info(
                "Found path from %s to %s of cost %s after %d expansions",
                self.start, self.goal, current.g_score, self.expanded_count,
            )
            return self.state

        for neighbor in self.grid.neighbors_of(current.position):
            if neighbor in self._closed:
                continue
            tentative_g = current.g_score + EDGE_COST
            if neighbor in self._open:
                if tentative_g >= neighbor.g_score:
                    continue
            else:
                self._open[neighbor] = None
            neighbor.g_score = tentative_g
            neighbor.came_from = current.position
            neighbor.f_score = tentative_g + heuristic(neighbor.position, self.goal)
        return self.state

    def run_to_completion(self) -> SearchState:
        while not self.is_finished:
            self.step()
        return self.state

    @property
    def path(self) -> List[Vector2]:
        """
        Positions from start to goal inclusive.
        Raises NoPathExists if the search failed and SearchInProgress while
        it is still running.
        """
        if self.state is SearchState.FAILED:
            raise NoPathExists(f"No path from {self.start} to {self.goal}")
        if self.state is SearchState.RUNNING:
            raise SearchInProgress("Search has not finished yet")
        position = self.goal
        path = [position]
        while position != self.start:
            position = self.grid.node_at(position).came_from
            path.append(position)
        path.reverse()
        return path

    def __repr__(self) -> str:
        return (
            f"<AStarSearch {self.start}->{self.goal} state={self.state.value} "
            f"open={len(self._open)} closed={len(self._closed)}>"
        )


def find_path(grid: Grid, start: Position, goal: Position) -> List[Vector2]:
    """
    Run a fresh search from start to goal.
    Returns the list of positions from start to goal inclusive, or an empty
    list if the goal is unreachable.
    """
    search = AStarSearch(grid, start, goal)
    if search.run_to_completion() is SearchState.FAILED:
        return []
    return search.path
