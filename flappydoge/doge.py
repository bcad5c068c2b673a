"""The player's doge: flight physics, collision and scoring."""

from __future__ import annotations

from flappydoge.texture import (
    LAND_HEIGHT,
    PIPE_SPACE,
    SCREEN_HEIGHT,
    SHIBA_HEIGHT,
    TOTAL_PIPE,
    GameState,
    Position,
    Texture,
)

LIGHT_IMAGE = "res/image/shiba.png"
DARK_IMAGE = "res/image/shiba-dark.png"
GROUND_LIMIT = SCREEN_HEIGHT - LAND_HEIGHT - SHIBA_HEIGHT - 5
START_X = 75
START_Y = SCREEN_HEIGHT // 2 - 10


class Doge:
    """The flying doge."""

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.texture = Texture(state)
        self.position = Position()
        self.angle = 0
        self.time = 0
        self.x0 = 0
        self.ahead = 0
        self.saved_path = ""

    def init(self, is_dark: bool) -> bool:
        """Prepare the doge for the chosen theme; return True if an image was loaded."""
        path = DARK_IMAGE if is_dark else LIGHT_IMAGE
        if self.saved_path == path:
            self.position.move_to(START_X, START_Y)
            self.ahead = 0
            self.angle = 0
        if not self.texture.loaded or self.saved_path != path:
            self.saved_path = path
            return self.texture.load(path, 1)
        return False

    def free(self) -> None:
        self.texture.free()

    def render(self) -> None:
        self.texture.render(self.position.x, self.position.y, self.angle)

    def reset_time(self) -> None:
        """Start a new flap from the current height."""
        self.time = 0

    def _step(self) -> None:
        if self.time == 0:
            self.x0 = self.position.y
            self.angle = -25
        elif self.angle < 70 and self.time > 30:
            self.angle += 3

        if self.time >= 0:
            t = self.time
            self.position.y = int(self.x0 + t * t * 0.18 - 7.3 * t)
            self.time += 1

    def fall(self) -> None:
        """Drop a dead doge towards the ground."""
        if self.state.die and self.position.y < GROUND_LIMIT:
            self._step()

    def update(self, pipe_width: int, pipe_height: int) -> None:
        """Advance one frame of flight, checking pipes and screen bounds."""
        if self.state.die:
            return
        self._step()

        pos = self.position
        pipe = self.state.pipes[self.ahead]
        if (
            pos.x + self.texture.width > pipe.x + 5
            and pos.x + 5 < pipe.x + pipe_width
            and (
                pos.y + 5 < pipe.y + pipe_height
                or pos.y + self.texture.height > pipe.y + pipe_height + PIPE_SPACE + 5
            )
        ):
            self.state.die = True
        elif pos.x > pipe.x + pipe_width:
            self.ahead = (self.ahead + 1) % TOTAL_PIPE
            self.state.score += 1

        if pos.y > GROUND_LIMIT or pos.y < -10:
            self.state.die = True