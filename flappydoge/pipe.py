"""The row of pipes the doge flies through."""

from __future__ import annotations

import random

from flappydoge.texture import (
    LAND_HEIGHT,
    PIPE_DISTANCE,
    PIPE_SPACE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOTAL_PIPE,
    GameState,
    Position,
    Texture,
)

RAND_MIN = -373 + 30
RAND_MAX = SCREEN_HEIGHT - LAND_HEIGHT - 373 - PIPE_DISTANCE - 30
PIPE_IMAGE = "res/image/pipe.png"
SPEED = 3


class Pipes:
    """The pipes, whose positions live in the shared game state."""

    def __init__(self, state: GameState, rng: random.Random | None = None) -> None:
        self.state = state
        self.rng = rng if rng is not None else random.Random()
        self.texture = Texture(state)

    @property
    def width(self) -> int:
        return self.texture.width

    @property
    def height(self) -> int:
        return self.texture.height

    def _random_y(self) -> int:
        return self.rng.randint(RAND_MIN, RAND_MAX)

    def init(self) -> bool:
        """Lay out fresh pipes; return True if the image was loaded now."""
        self.state.pipes.clear()
        self.state.pipes.extend(
            Position(SCREEN_WIDTH + i * PIPE_DISTANCE + 350, self._random_y())
            for i in range(TOTAL_PIPE)
        )
        if not self.texture.loaded:
            return self.texture.load(PIPE_IMAGE, 1)
        return False

    def free(self) -> None:
        self.texture.free()

    def render(self) -> None:
        for pos in self.state.pipes:
            if -self.width < pos.x <= SCREEN_WIDTH:
                self.texture.render(pos.x, pos.y)
            self.texture.render(pos.x, pos.y + self.height + PIPE_SPACE, 180)

    def update(self) -> None:
        """Scroll the pipes left, recycling any that left the screen."""
        if self.state.die:
            return
        pipes = self.state.pipes
        for i, pos in enumerate(pipes):
            if pos.x < -self.width:
                pos.y = self._random_y()
                pos.x = pipes[i - 1].x + PIPE_DISTANCE
            else:
                pos.x -= SPEED