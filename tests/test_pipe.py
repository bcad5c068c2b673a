import random

import pygame
import pytest

from flappydoge.pipe import RAND_MAX, RAND_MIN, Pipes
from flappydoge.texture import (
    PIPE_DISTANCE,
    PIPE_SPACE,
    SCREEN_WIDTH,
    TOTAL_PIPE,
    GameState,
    Position,
)

GREEN = (0, 200, 0, 255)
BLACK = (0, 0, 0, 255)


def _write_png(path, size, color=(0, 200, 0)):
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


@pytest.fixture
def state(tmp_path):
    _write_png(tmp_path / "res/image/pipe.png", (52, 320))
    return GameState(root=tmp_path, screen=pygame.Surface((350, 625)))


@pytest.mark.parametrize("seed", range(20))
def test_random_heights_stay_in_geometry_range(state, seed):
    assert RAND_MIN == -343
    pipes = Pipes(state, random.Random(seed))
    pipes.init()
    assert len(state.pipes) == TOTAL_PIPE
    assert all(RAND_MIN <= p.y <= RAND_MAX for p in state.pipes)


def test_init_lays_out_pipes(state):
    pipes = Pipes(state, random.Random(3))
    assert pipes.init() is True
    assert len(state.pipes) == TOTAL_PIPE
    assert state.pipes[0].x == SCREEN_WIDTH + 350
    xs = [p.x for p in state.pipes]
    assert all(b - a == PIPE_DISTANCE for a, b in zip(xs, xs[1:]))
    assert all(RAND_MIN <= p.y <= RAND_MAX for p in state.pipes)
    assert (pipes.width, pipes.height) == (52, 320)


def test_init_loads_image_once(state):
    pipes = Pipes(state, random.Random(3))
    pipes.init()
    assert pipes.init() is False
    assert len(state.pipes) == TOTAL_PIPE


def test_same_seed_same_layout(state, tmp_path):
    first = Pipes(state, random.Random(11))
    first.init()
    ys_first = [p.y for p in state.pipes]
    second = Pipes(state, random.Random(11))
    second.init()
    assert [p.y for p in state.pipes] == ys_first


def test_update_scrolls_left(state):
    pipes = Pipes(state, random.Random(1))
    pipes.init()
    before = [p.x for p in state.pipes]
    state.die = False
    pipes.update()
    assert [p.x for p in state.pipes] == [x - 3 for x in before]


def test_update_frozen_when_dead(state):
    pipes = Pipes(state, random.Random(1))
    pipes.init()
    before = [(p.x, p.y) for p in state.pipes]
    pipes.update()
    assert [(p.x, p.y) for p in state.pipes] == before


def test_update_recycles_offscreen_pipe(state):
    pipes = Pipes(state, random.Random(1))
    pipes.init()
    state.die = False
    state.pipes[0].x = -pipes.width - 1
    last_x = state.pipes[-1].x
    pipes.update()
    assert state.pipes[0].x == last_x + PIPE_DISTANCE
    assert RAND_MIN <= state.pipes[0].y <= RAND_MAX


def test_render_draws_top_and_bottom(state):
    pipes = Pipes(state, random.Random(1))
    pipes.init()
    state.pipes[:] = [Position(10, -100)] + [Position(2000, -100) for _ in range(3)]
    pipes.render()
    bottom_top = -100 + pipes.height + PIPE_SPACE
    assert state.screen.get_at((10, 0)) == GREEN
    assert state.screen.get_at((10, bottom_top)) == GREEN
    assert state.screen.get_at((10, bottom_top - 1)) == BLACK