"""
Input handling abstraction to decouple Pygame input from the visualizer.
"""

from __future__ import annotations
import pygame


class InputHandler:
    """
    Processes Pygame events once per frame and answers per-frame action
    queries: quit, pause toggle, single step and restart.
    """

    def __init__(self) -> None:
        self._quit = False
        self._pause = False
        self._step = False
        self._restart = False

    def process_events(self) -> None:
        """Poll Pygame events and update the per-frame action flags."""
        self._quit = False
        self._pause = False
        self._step = False
        self._restart = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_x, pygame.K_ESCAPE):
                    self._quit = True
                elif event.key == pygame.K_p:
                    self._pause = True
                elif event.key in (pygame.K_SPACE, pygame.K_RIGHT):
                    self._step = True
                elif event.key == pygame.K_r:
                    self._restart = True

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def pause_pressed(self) -> bool:
        """Return True if P was pressed this frame to toggle pause state."""
        return self._pause

    def step_pressed(self) -> bool:
        """Return True if a single step (Space or Right) was requested."""
        return self._step

    def restart_pressed(self) -> bool:
        return self._restart
