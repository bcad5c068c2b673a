"""Command that runs the game window."""

from __future__ import annotations

import argparse

import pygame

from flappydoge.game import Game, InputType

FPS = 60
FRAME_DELAY = 1000 // FPS


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappydoge", description="Play Flappy Doge.")
    parser.add_argument(
        "--root",
        default=".",
        help="directory holding the game's res/ folder (default: current directory)",
    )
    return parser.parse_args(argv)


def _draw_background(game: Game, is_dark: bool) -> None:
    if is_dark:
        game.render_background_night()
    else:
        game.render_background()


def _run(game: Game) -> None:
    state = game.state
    is_menu = False
    is_pause = False
    is_sound = True
    is_dark = False

    while not state.quit:
        frame_start = pygame.time.get_ticks()

        if state.die:
            if is_menu:
                game.sound.play_hit()
                game.shiba.render()
            game.user_input = InputType.NONE
            while state.die and not state.quit:
                game.take_input()
                if is_menu and game.user_input is InputType.PLAY:
                    if game.check_replay(pygame.mouse.get_pos()):
                        is_menu = False
                    game.user_input = InputType.NONE
                _draw_background(game, is_dark)
                game.pipe.render()
                game.land.render()
                if is_menu:
                    game.shiba.render()
                    game.shiba.fall()
                    game.render_game_over()
                    game.render_medal()
                    game.render_score_small()
                    game.render_best_score()
                    game.replay()
                else:
                    game.pipe.init()
                    game.shiba.init(is_dark)
                    game.shiba.render()
                    game.render_message()
                    if game.user_input is InputType.PLAY:
                        game.restart()
                        is_menu = True
                        game.user_input = InputType.NONE
                    game.land.update()
                game.display()
            game.pipe.init()
        else:
            game.take_input()

            if game.user_input is InputType.PAUSE:
                is_pause = not is_pause
                game.user_input = InputType.NONE

            if not is_pause and game.user_input is InputType.PLAY:
                if is_sound:
                    game.sound.play_breath()
                game.shiba.reset_time()
                game.user_input = InputType.NONE

            _draw_background(game, is_dark)
            game.pipe.render()
            game.land.render()
            game.shiba.render()
            game.render_score_large()

            if not is_pause:
                game.shiba.update(game.pipe_width, game.pipe_height)
                game.pipe.update()
                game.land.update()
                game.pause()
            else:
                game.resume()
                game.render_pause_tab()
                game.render_score_small()
                game.render_best_score()
                game.replay()
                game.sound.render()
                if is_dark:
                    game.dark_theme()
                else:
                    game.light_theme()
                game.next_button()
                if game.user_input is InputType.PLAY:
                    mouse_pos = pygame.mouse.get_pos()
                    if game.check_replay(mouse_pos):
                        is_pause = False
                    elif game.sound.check_sound(mouse_pos):
                        is_sound = not is_sound
                    elif game.change_theme(mouse_pos):
                        is_dark = not is_dark
                        game.shiba.init(is_dark)
                    game.user_input = InputType.NONE
            game.display()

        elapsed = pygame.time.get_ticks() - frame_start
        if FRAME_DELAY > elapsed:
            pygame.time.delay(FRAME_DELAY - elapsed)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    args = _parse_args(argv)
    with Game(args.root) as game:
        _run(game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())