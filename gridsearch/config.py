import logging
import os

# Window settings
CANVAS_WIDTH = 500
CANVAS_HEIGHT = 500
# Frame rate cap for the animated search (0 disables the cap)
MAX_FPS = 60
WINDOW_TITLE = "A* Search"

# Grid settings
NUM_COLS = 20
NUM_ROWS = 20
# Cost of moving between two 4-adjacent cells
EDGE_COST = 1

# Tile values used by map files
TILE_EMPTY = 0
TILE_WALL = 1

# Colors (anything pygame.Color accepts)
BACKGROUND_COLOR = "white"
STROKE_COLOR = "black"
# Outline of the start and goal cells
ENDPOINT_STROKE_COLOR = "red"
# Open set (candidates for expansion)
CANDIDATE_COLOR = "#90afe0"
# Closed set (already evaluated)
EVALUATED_COLOR = "#9be090"
WALL_COLOR = "#404040"
PATH_COLOR = "#f0d060"
PATH_LINE_COLOR = "#c03030"
PATH_LINE_WIDTH = 3

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Bundled map files (located in gridsearch/maps directory)
MAPS_DIR = os.path.join(os.path.dirname(__file__), "maps")
DEFAULT_MAP_FILE = "maze.json"
