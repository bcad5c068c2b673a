"""Sound effects and the on-screen sound toggle."""

from __future__ import annotations

import pygame

from flappydoge.texture import GameState, Texture

BREATH_SOUND = "res/sound/sfx_breath.wav"
HIT_SOUND = "res/sound/sfx_bonk.wav"
SOUND_IMAGE = "res/image/sound.png"


class Sound:
    """Plays the flap and hit effects and draws the mute button."""

    POS_X = 107
    POS_Y = 267

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.texture = Texture(state)
        self.is_playing = False
        self.breath: pygame.mixer.Sound | None = None
        self.hit: pygame.mixer.Sound | None = None
        self.active = pygame.Rect(0, 0, 0, 0)
        self.mute = pygame.Rect(0, 0, 0, 0)

    def _load_effect(self, path: str) -> pygame.mixer.Sound | None:
        try:
            return pygame.mixer.Sound(str(self.state.root / path))
        except (pygame.error, FileNotFoundError):
            return None

    def init(self) -> bool:
        """Open audio, load the effects and the button image.

        Returns False when audio or an effect could not be set up; the
        button still works then.
        """
        success = True
        try:
            pygame.mixer.init(22050, -16, 2, 2048)
            mixer_ready = True
        except pygame.error:
            mixer_ready = False
            success = False

        if mixer_ready:
            self.breath = self._load_effect(BREATH_SOUND)
            self.hit = self._load_effect(HIT_SOUND)
        if self.breath is None or self.hit is None:
            success = False

        self.texture.load(SOUND_IMAGE, 1)
        half = self.texture.height // 2
        self.active = pygame.Rect(0, 0, self.texture.width, half)
        self.mute = pygame.Rect(0, half, self.texture.width, half)
        self.is_playing = True
        return success

    def free(self) -> None:
        self.texture.free()
        self.breath = None
        self.hit = None
        pygame.mixer.quit()

    def play_breath(self) -> None:
        if self.is_playing and self.breath is not None:
            self.breath.play()

    def play_hit(self) -> None:
        if self.is_playing and self.hit is not None:
            self.hit.play()

    def render(self) -> None:
        clip = self.active if self.is_playing else self.mute
        self.texture.render(self.POS_X, self.POS_Y, 0, clip)

    def check_sound(self, mouse_pos: tuple[int, int]) -> bool:
        """Toggle sound if ``mouse_pos`` is on the button; return whether it was."""
        x, y = mouse_pos
        if (
            self.POS_X < x < self.POS_X + self.texture.width
            and self.POS_Y < y < self.POS_Y + self.texture.height
        ):
            self.is_playing = not self.is_playing
            return True
        return False