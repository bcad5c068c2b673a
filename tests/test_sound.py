import pygame
import pytest

from flappydoge.sound import SOUND_IMAGE, Sound
from flappydoge.texture import SCREEN_HEIGHT, SCREEN_WIDTH, GameState

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _write_button(path, size=(40, 60)):
    path.parent.mkdir(parents=True, exist_ok=True)
    w, h = size
    surface = pygame.Surface(size)
    surface.fill((255, 0, 0))
    surface.fill((0, 0, 255), pygame.Rect(0, h // 2, w, h - h // 2))
    pygame.image.save(surface, str(path))


@pytest.fixture
def state(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    _write_button(tmp_path / SOUND_IMAGE)
    return GameState(root=tmp_path, screen=pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT)))


@pytest.fixture
def sound(state):
    s = Sound(state)
    s.init()
    yield s
    s.free()


def test_init_without_effects_reports_failure(state):
    s = Sound(state)
    try:
        assert s.init() is False
        assert s.is_playing is True
    finally:
        s.free()


def test_init_splits_button_into_halves(sound):
    assert sound.active == pygame.Rect(0, 0, 40, 30)
    assert sound.mute == pygame.Rect(0, 30, 40, 30)


def test_init_missing_image_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    s = Sound(GameState(root=tmp_path))
    try:
        with pytest.raises(FileNotFoundError):
            s.init()
    finally:
        s.free()


def test_check_sound_inside_toggles(sound):
    assert sound.check_sound((Sound.POS_X + 1, Sound.POS_Y + 1)) is True
    assert sound.is_playing is False
    assert sound.check_sound((Sound.POS_X + 1, Sound.POS_Y + 1)) is True
    assert sound.is_playing is True


def test_check_sound_edge_is_outside(sound):
    assert sound.check_sound((Sound.POS_X, Sound.POS_Y + 1)) is False
    assert sound.is_playing is True


def test_check_sound_far_away(sound):
    assert sound.check_sound((0, 0)) is False
    assert sound.is_playing is True


def test_render_shows_active_half(sound, state):
    sound.render()
    assert state.screen.get_at((Sound.POS_X, Sound.POS_Y)) == RED


def test_render_shows_mute_half(sound, state):
    sound.check_sound((Sound.POS_X + 1, Sound.POS_Y + 1))
    sound.render()
    assert state.screen.get_at((Sound.POS_X, Sound.POS_Y)) == BLUE