"""The game window, its screens and the player's input."""

from __future__ import annotations

import random
import re
from enum import Enum, auto
from pathlib import Path

import pygame

from flappydoge.doge import Doge
from flappydoge.land import Land
from flappydoge.pipe import Pipes
from flappydoge.sound import Sound
from flappydoge.texture import SCREEN_HEIGHT, SCREEN_WIDTH, GameState, Texture

WINDOW_TITLE = "Flappy Doge"
WHITE = (0xFF, 0xFF, 0xFF)
SCALE_NUMBER_SMALL = 0.75
BEST_SCORE_FILE = "res/data/bestScore.txt"
DIGIT_SIZES = ("small", "large")

REPLAY_WIDTH = 100
REPLAY_HEIGHT = 60
REPLAY_Y = 380
NEXT_RIGHT_X = 149
NEXT_LEFT_X = 88
NEXT_Y = 322
NEXT_WIDTH = 13
NEXT_HEIGHT = 16

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class InputType(Enum):
    """What the player asked for during the last frame."""

    QUIT = auto()
    PLAY = auto()
    NONE = auto()
    PAUSE = auto()


def medal_path(score: int) -> str:
    """Image of the medal earned with ``score``."""
    if score > 50:
        return "res/medal/gold.png"
    if score > 20:
        return "res/medal/silver.png"
    return "res/medal/honor.png"


def digit_path(digit: int, size: str) -> str:
    """Image of one score digit; ``size`` is ``"small"`` or ``"large"``."""
    if size not in DIGIT_SIZES:
        raise ValueError(f"unknown digit size {size!r}")
    if not 1 <= digit <= 9:
        digit = 0
    return f"res/number/{size}/{digit}.png"


class Game:
    """Owns the window, the sprites and every screen drawn around them."""

    def __init__(self, root: str | Path = ".", rng: random.Random | None = None) -> None:
        self.state = GameState(root=Path(root))
        self.user_input = InputType.NONE
        self.best_score = 0
        self._textures: dict[tuple[str, float], Texture] = {}

        pygame.init()
        try:
            self.state.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            self.state.screen.fill(WHITE)

            self.shiba = Doge(self.state)
            self.pipe = Pipes(self.state, rng)
            self.land = Land(self.state)
            self.sound = Sound(self.state)

            self.pipe.init()
            self.land.init()
            self.sound.init()
        except BaseException:
            pygame.quit()
            raise

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def is_quit(self) -> bool:
        return self.state.quit

    @property
    def is_die(self) -> bool:
        return self.state.die

    @property
    def pipe_width(self) -> int:
        return self.pipe.width

    @property
    def pipe_height(self) -> int:
        return self.pipe.height

    def _image(self, path: str, scale: float = 1.0) -> Texture:
        key = (path, scale)
        texture = self._textures.get(key)
        if texture is None:
            texture = Texture(self.state)
            texture.load(path, scale)
            self._textures[key] = texture
        return texture

    def take_input(self) -> None:
        """Read pending events into ``user_input``."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.user_input = InputType.QUIT
                self.state.quit = True
            elif event.type == pygame.MOUSEBUTTONDOWN or (
                event.type == pygame.KEYDOWN and event.key in (pygame.K_SPACE, pygame.K_UP)
            ):
                self.user_input = InputType.PLAY
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.user_input = InputType.PAUSE

    def display(self) -> None:
        """Show the finished frame and clear the screen for the next one."""
        pygame.display.flip()
        if self.state.screen is not None:
            self.state.screen.fill(WHITE)

    def close(self) -> None:
        """Release every resource and shut the window."""
        self.shiba.free()
        self.pipe.free()
        self.land.free()
        self.sound.free()
        for texture in self._textures.values():
            texture.free()
        self._textures.clear()
        self.state.screen = None
        pygame.quit()

    def _render_small_number(self, value: int, y: int) -> None:
        for k, ch in enumerate(reversed(str(value))):
            image = self._image(digit_path(int(ch), "small"), SCALE_NUMBER_SMALL)
            image.render(int(260 - image.width * k * 0.75 - 5 * k), y)

    def render_score_small(self) -> None:
        self._render_small_number(self.state.score, 268)

    def render_score_large(self) -> None:
        digits = str(self.state.score)
        count = len(digits)
        for i, ch in enumerate(digits):
            image = self._image(digit_path(int(ch), "large"), 1.0)
            left = (SCREEN_WIDTH - (image.width * count + (count - 1) * 10)) // 2
            image.render(left + (i + 30) * i, 100)

    def _read_best_score(self, path: Path) -> None:
        try:
            match = _LEADING_INT.match(path.read_text())
        except OSError:
            return
        if match:
            self.best_score = int(match.group(1))

    def render_best_score(self) -> None:
        """Update the stored best score and draw it."""
        path = self.state.root / BEST_SCORE_FILE
        self._read_best_score(path)
        self.best_score = max(self.best_score, self.state.score)
        self._render_small_number(self.best_score, 315)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(str(self.best_score))

    def _render_centred(self, path: str, y: int) -> None:
        image = self._image(path)
        image.render((SCREEN_WIDTH - image.width) // 2, y)

    def render_message(self) -> None:
        self._render_centred("res/image/message.png", 180)

    def render_background(self) -> None:
        self._image("res/image/background.png").render(0, 0)

    def render_background_night(self) -> None:
        self._image("res/image/background-night.png").render(0, 0)

    def render_land(self) -> None:
        image = self._image("res/image/land.png")
        image.render((SCREEN_WIDTH - image.width) // 2, SCREEN_HEIGHT - image.height)

    def resume(self) -> None:
        self._image("res/image/resume.png").render(SCREEN_WIDTH - 50, 20)

    def pause(self) -> None:
        self._image("res/image/pause.png").render(SCREEN_WIDTH - 50, 20)

    def render_pause_tab(self) -> None:
        self._render_centred("res/image/pauseTab.png", 230)

    def light_theme(self) -> None:
        self._image("res/image/shiba.png", 0.8).render(105, 315)

    def dark_theme(self) -> None:
        self._image("res/image/shiba-dark.png", 0.8).render(105, 315)

    def next_button(self) -> None:
        self._image("res/image/nextRight.png").render(NEXT_RIGHT_X, NEXT_Y)
        self._image("res/image/nextLeft.png").render(NEXT_LEFT_X, NEXT_Y)

    def change_theme(self, mouse_pos: tuple[int, int]) -> bool:
        """Whether ``mouse_pos`` is on one of the theme arrows."""
        x, y = mouse_pos
        on_arrow = (
            NEXT_RIGHT_X < x < NEXT_RIGHT_X + NEXT_WIDTH
            or NEXT_LEFT_X < x < NEXT_LEFT_X + NEXT_WIDTH
        )
        return on_arrow and NEXT_Y < y < NEXT_Y + NEXT_HEIGHT

    def render_game_over(self) -> None:
        self._render_centred("res/image/gameOver.png", 150)

    def render_medal(self) -> None:
        self._image(medal_path(self.state.score), SCALE_NUMBER_SMALL).render(82, 275)

    def replay(self) -> None:
        self._render_centred("res/image/replay.png", REPLAY_Y)

    def check_replay(self, mouse_pos: tuple[int, int]) -> bool:
        """Whether ``mouse_pos`` is on the replay button."""
        x, y = mouse_pos
        return (
            (SCREEN_WIDTH - REPLAY_WIDTH) // 2 < x < (SCREEN_WIDTH + REPLAY_WIDTH) // 2
            and REPLAY_Y < y < REPLAY_Y + REPLAY_HEIGHT
        )

    def restart(self) -> None:
        """Start a new round."""
        self.state.die = False
        self.state.score = 0
        self.shiba.reset_time()