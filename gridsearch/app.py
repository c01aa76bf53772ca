"""
Visualizer: pygame window that animates an A* search one expansion per frame.
"""

from __future__ import annotations
import logging
import pygame
from typing import Optional

from .canvas import Canvas
from .config import (
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
    MAX_FPS,
    NUM_COLS,
    NUM_ROWS,
    WINDOW_TITLE,
)
from .grid import Grid, Position
from .input_handler import InputHandler
from .renderer import GridRenderer
from .search import AStarSearch, SearchState

logger = logging.getLogger(__name__)


def parse_max_fps(value) -> int:
    """
    Validate a frame rate cap. Accepts ints or numeric strings;
    0 means uncapped.
    """
    if isinstance(value, bool):
        raise ValueError(f"max_fps must be an integer, got {value!r}")
    try:
        fps = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"max_fps must be an integer, got {value!r}")
    if isinstance(value, float) and value != fps:
        raise ValueError(f"max_fps must be an integer, got {value!r}")
    if fps < 0:
        raise ValueError(f"max_fps must not be negative, got {fps}")
    return fps


class Visualizer:
    """Main visualizer class: owns the window, the search and the frame loop."""

    def __init__(
        self,
        rows: int = NUM_ROWS,
        cols: int = NUM_COLS,
        start: Optional[Position] = None,
        goal: Optional[Position] = None,
        max_fps=MAX_FPS,
        title: str = WINDOW_TITLE,
        grid: Optional[Grid] = None,
        clock: Optional[pygame.time.Clock] = None,
        paused: bool = False,
    ) -> None:
        self.max_fps = parse_max_fps(max_fps)
        # Grid and search are built before touching the display so that bad
        # parameters fail without opening a window
        self.grid = grid if grid is not None else Grid(rows, cols)
        if start is None:
            start = (0, 0)
        if goal is None:
            goal = (self.grid.cols - 1, self.grid.rows - 1)
        self.search = AStarSearch(self.grid, start, goal)

        pygame.init()
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        pygame.display.set_caption(title)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.canvas = Canvas(self.screen)
        self.renderer = GridRenderer(
            self.canvas,
            self.grid,
            CANVAS_WIDTH / self.grid.cols,
            CANVAS_HEIGHT / self.grid.rows,
        )
        self.input = InputHandler()
        self.paused = paused
        self.running = True
        # Set once the finished search has been reported
        self._reported = False

    def handle_events(self) -> None:
        """Process input via InputHandler: quit, pause, restart."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
        if self.input.pause_pressed():
            self.paused = not self.paused
            logger.debug("Paused" if self.paused else "Resumed")
        if self.input.restart_pressed():
            self.search.reset()
            self._reported = False

    def update(self) -> None:
        """Advance the search by one expansion unless paused."""
        if self.paused and not self.input.step_pressed():
            return
        self.search.step()
        if self.search.is_finished and not self._reported:
            self._reported = True
            if self.search.state is SearchState.SUCCEEDED:
                logger.info(
                    "Path of %d cells found in %d steps",
                    len(self.search.path),
                    self.search.expanded_count,
                )
            else:
                logger.info("No path exists")

    def render(self) -> None:
        self.renderer.draw(self.search)
        pygame.display.flip()

    def tick(self) -> None:
        """Run one frame: input, one search step, draw."""
        self.handle_events()
        self.update()
        self.render()

    def run(self) -> None:
        """Main loop until the window is closed."""
        while self.running:
            self.clock.tick(self.max_fps)
            self.tick()
        pygame.quit()
