"""
Drawing helper around a pygame Surface.
"""

from __future__ import annotations
import pygame
from typing import Optional, Tuple, Union

ColorValue = Union[str, Tuple[int, int, int], pygame.Color]


class Canvas:
    """
    Wraps a pygame Surface and provides simple shape drawing.
    Colors may be names ("white"), hex strings ("#90afe0") or RGB tuples.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def clear(self, color: ColorValue) -> None:
        """Fill the whole canvas with a solid color."""
        self.surface.fill(pygame.Color(color))

    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: Optional[ColorValue] = None,
        stroke: Optional[ColorValue] = None,
    ) -> None:
        """Draw a rectangle, filled and/or outlined."""
        area = pygame.Rect(int(x), int(y), int(width), int(height))
        if fill is not None:
            pygame.draw.rect(self.surface, pygame.Color(fill), area)
        if stroke is not None:
            pygame.draw.rect(self.surface, pygame.Color(stroke), area, 1)

    def circle(self, x: float, y: float, radius: float, color: ColorValue) -> None:
        pygame.draw.circle(
            self.surface, pygame.Color(color), (int(x), int(y)), int(radius)
        )

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: ColorValue,
        stroke_width: int = 1,
    ) -> None:
        pygame.draw.line(
            self.surface,
            pygame.Color(color),
            (int(x1), int(y1)),
            (int(x2), int(y2)),
            stroke_width,
        )
