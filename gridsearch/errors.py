"""
Exceptions raised by grid construction and the A* search.
"""


class PathfindingError(Exception):
    """Base class for all grid and search errors."""


class InvalidDimensions(PathfindingError, ValueError):
    """Grid rows/cols are not positive, or a map is empty or ragged."""


class OutOfBounds(PathfindingError, IndexError):
    """A coordinate lies outside the grid."""


class InvalidStartOrGoal(PathfindingError, ValueError):
    """The start or goal of a search is outside the grid or on a wall."""


class NoPathExists(PathfindingError, LookupError):
    """The search exhausted its open set without reaching the goal."""


class SearchInProgress(PathfindingError, RuntimeError):
    """The result of a search was requested before it finished."""
