"""The scrolling ground strip."""

from __future__ import annotations

from flappydoge.texture import LAND_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH, GameState, Position, Texture

LAND_IMAGE = "res/image/land.png"
SPEED = 3


class Land:
    """Ground drawn twice side by side so it scrolls without a gap."""

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.texture = Texture(state)
        self.position = Position(0, SCREEN_HEIGHT - LAND_HEIGHT)

    def _reset(self) -> None:
        self.position.move_to(0, SCREEN_HEIGHT - LAND_HEIGHT)

    def init(self) -> bool:
        """Reset the ground; return True if the image was loaded now."""
        self._reset()
        if not self.texture.loaded:
            return self.texture.load(LAND_IMAGE, 1)
        return False

    def free(self) -> None:
        self.texture.free()

    def render(self) -> None:
        pos = self.position
        if pos.x > 0:
            self.texture.render(pos.x, pos.y)
        elif -SCREEN_WIDTH < pos.x <= 0:
            self.texture.render(pos.x, pos.y)
            self.texture.render(pos.x + SCREEN_WIDTH, pos.y)
        else:
            self._reset()
            self.texture.render(pos.x, pos.y)

    def update(self) -> None:
        self.position.x -= SPEED