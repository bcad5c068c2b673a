"""Shared game state, screen geometry and the image texture used by every sprite."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pygame

SCREEN_WIDTH = 350
SCREEN_HEIGHT = 625
PIPE_SPACE = 160
TOTAL_PIPE = 4
PIPE_DISTANCE = 220
LAND_HEIGHT = 140
SHIBA_WIDTH = 50
SHIBA_HEIGHT = 35

COLOR_KEY = (0x00, 0xFF, 0xFF)


@dataclass
class Position:
    """A point on the screen, in pixels."""

    x: int = 0
    y: int = 0
    angle: int = 0
    state: int = 0

    def move_to(self, x: int, y: int) -> None:
        """Place the point at ``(x, y)``."""
        self.x = x
        self.y = y


@dataclass
class GameState:
    """State shared by every object of one running game."""

    quit: bool = False
    die: bool = True
    score: int = 0
    screen: pygame.Surface | None = None
    root: Path = field(default_factory=lambda: Path("."))
    pipes: list[Position] = field(default_factory=list)


class Texture:
    """An image loaded from disk that can be drawn onto the game screen."""

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.surface: pygame.Surface | None = None
        self.width = 0
        self.height = 0

    @property
    def loaded(self) -> bool:
        return self.surface is not None

    def load(self, path: str, scale: float = 1.0) -> bool:
        """Load the image at ``path`` (relative to the game root), scaled by ``scale``."""
        self.free()
        full_path = Path(self.state.root) / path
        if not full_path.is_file():
            raise FileNotFoundError(f"unable to load image {path}: no such file")
        try:
            image = pygame.image.load(str(full_path))
        except pygame.error as exc:
            raise OSError(f"unable to load image {path}: {exc}") from exc

        width = int(image.get_width() * scale)
        height = int(image.get_height() * scale)
        if (width, height) != image.get_size():
            image = pygame.transform.scale(image, (max(width, 0), max(height, 0)))
        image.set_colorkey(COLOR_KEY)

        self.surface = image
        self.width = width
        self.height = height
        return True

    def free(self) -> None:
        """Release the image, if any."""
        if self.surface is not None:
            self.surface = None
            self.width = 0
            self.height = 0

    def render(
        self,
        x: int,
        y: int,
        angle: float = 0,
        clip: pygame.Rect | tuple[int, int, int, int] | None = None,
    ) -> None:
        """Draw the image with its top-left corner at ``(x, y)``.

        ``angle`` turns it clockwise in degrees about its centre; ``clip``
        selects the part of the image to draw.
        """
        screen = self.state.screen
        if self.surface is None or screen is None:
            return
        image = self.surface
        if clip is not None:
            area = pygame.Rect(clip).clip(image.get_rect())
            image = image.subsurface(area)
        dest = image.get_rect(topleft=(x, y))
        if angle:
            image = pygame.transform.rotate(image, -angle)
            dest = image.get_rect(center=dest.center)
        screen.blit(image, dest)