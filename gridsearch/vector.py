"""
Two-dimensional vector type used for grid coordinates, plus distance helpers.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, Tuple, Union


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D vector. On a grid, x is the column and y the row.
    Components must be finite numbers.
    """

    x: float = 0
    y: float = 0

    def __post_init__(self) -> None:
        for value in (self.x, self.y):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Vector2 components must be numbers, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"Vector2 components must be finite, got {value!r}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    @classmethod
    def of(cls, value: Union[Vector2, Tuple[float, float]]) -> Vector2:
        """Return value as a Vector2, accepting an (x, y) pair."""
        if isinstance(value, Vector2):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise ValueError(f"Expected an (x, y) pair, got {value!r}")
        return cls(x, y)

    @classmethod
    def from_angle(cls, angle_radians: float) -> Vector2:
        """Unit vector pointing along the given angle."""
        return cls(math.cos(angle_radians), math.sin(angle_radians))

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Angle of this vector in radians."""
        return math.atan2(self.y, self.x)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def scaled(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction. The zero vector has none."""
        length = self.length
        if length == 0:
            raise ValueError("Cannot normalize the zero vector")
        return self.scaled(1.0 / length)

    def rotated(self, angle_delta_radians: float) -> Vector2:
        cos_a = math.cos(angle_delta_radians)
        sin_a = math.sin(angle_delta_radians)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> float:
        return a.x * b.x + a.y * b.y


def are_equal(a: Vector2, b: Vector2) -> bool:
    """Exact component-wise equality."""
    return a.x == b.x and a.y == b.y


def manhattan_distance(a: Vector2, b: Vector2) -> float:
    """Manhattan distance; the admissible heuristic for 4-directional grids."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def euclidean_distance(a: Vector2, b: Vector2) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)
