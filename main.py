import sys
import argparse
import logging

from gridsearch.config import (
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_FPS,
    NUM_COLS,
    NUM_ROWS,
    WINDOW_TITLE,
)
from gridsearch.errors import PathfindingError
from gridsearch.grid import Grid, load_grid
from gridsearch.search import AStarSearch, SearchState


def build_parser():
    parser = argparse.ArgumentParser(
        description="Animate an A* search over a grid, one expansion per frame."
    )
    parser.add_argument("--rows", type=int, default=NUM_ROWS, help="grid rows")
    parser.add_argument("--cols", type=int, default=NUM_COLS, help="grid columns")
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        help="start cell (default: top-left)",
    )
    parser.add_argument(
        "--goal",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        help="goal cell (default: bottom-right)",
    )
    parser.add_argument("--map", help="JSON map file; overrides --rows/--cols")
    parser.add_argument(
        "--max-fps", type=int, default=MAX_FPS, help="frame rate cap, 0 for uncapped"
    )
    parser.add_argument("--title", default=WINDOW_TITLE, help="window title")
    parser.add_argument(
        "--paused",
        action="store_true",
        help="start paused (P resumes, Space steps once)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="run to completion without a window and print the path",
    )
    parser.add_argument("--verbose", action="store_true", help="log every expansion")
    return parser


def run_headless(grid, start, goal):
    """Run the search to completion and print the result. Returns the exit status."""
    search = AStarSearch(grid, start, goal)
    state = search.run_to_completion()
    print(f"Expanded {search.expanded_count} nodes")
    if state is SearchState.FAILED:
        print(f"No path from {search.start} to {search.goal}")
        return 1
    print(" -> ".join(f"({p.x},{p.y})" for p in search.path))
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL, format=LOG_FORMAT
    )

    try:
        if args.map:
            grid, start, goal = load_grid(args.map)
        else:
            grid = Grid(args.rows, args.cols)
            start, goal = (0, 0), (grid.cols - 1, grid.rows - 1)
        if args.start:
            start = tuple(args.start)
        if args.goal:
            goal = tuple(args.goal)
        if args.headless:
            return run_headless(grid, start, goal)
        # pygame is only needed for the window
        from gridsearch.app import Visualizer

        visualizer = Visualizer(
            start=start,
            goal=goal,
            max_fps=args.max_fps,
            title=args.title,
            grid=grid,
            paused=args.paused,
        )
    except (PathfindingError, RuntimeError, ValueError) as e:
        parser.error(str(e))
    visualizer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
