# flappydoge

A Flappy Bird style arcade game with a Shiba Inu in the pilot's seat.
Tap to flap, slip through the gaps between the pipes, and try to beat
your best score.

## Installing

```
pip install .
```

pygame is installed with the package.

## Playing

Start the game from the directory that holds the `res/` folder of
images, sounds and the best-score file:

```
flappydoge
```

or point it at that directory:

```
flappydoge --root path/to/game
```

The window is 350 by 625 pixels and runs at up to 60 frames a second.

Controls:

- **Mouse click**, **Space** or **Up arrow**: flap (or start a round
  from the title screen).
- **Escape**: pause and resume.

While paused, the pause panel shows your score and best score and lets you:

- click **replay** to carry on,
- click the speaker icon to switch sound on or off,
- click the arrows beside the doge to switch between the light and dark
  themes.

When the doge hits a pipe, the ground or flies off the top of the
screen, the game-over panel shows your score, your best score and a
medal: honour up to 20 points, silver from 21 to 50 and gold above 50.
Click **replay** to return to the title screen.

The best score is read from and written back to `res/data/bestScore.txt`
under the root directory; if the file is missing it is created.

## Resources

The game reads its assets from paths relative to the root directory:

- `res/image/` — `background.png`, `background-night.png`, `land.png`,
  `pipe.png`, `shiba.png`, `shiba-dark.png`, `message.png`,
  `gameOver.png`, `pause.png`, `resume.png`, `pauseTab.png`,
  `replay.png`, `nextLeft.png`, `nextRight.png`, `sound.png`
- `res/number/small/` and `res/number/large/` — digit images `0.png` to `9.png`
- `res/medal/` — `honor.png`, `silver.png`, `gold.png`
- `res/sound/` — `sfx_breath.wav`, `sfx_bonk.wav`
- `res/data/bestScore.txt` — the stored best score

Pixels of colour `(0, 255, 255)` in the images are drawn as transparent.

## What the package does not include

The package holds only the game code; it does not ship the `res/`
folder. A missing image stops the game with `FileNotFoundError`. Missing
sound effects, or no audio device, only leave the game silent.

## Using it from Python

- `flappydoge.main.main(argv=None)` runs the game, as the command does.
- `flappydoge.game.Game(root=".", rng=None)` opens the window and sets up
  the sprites; use it as a context manager, or call `close()`, to shut
  the window. `rng` is a `random.Random` used to place the pipes.
- `flappydoge.game.medal_path(score)` and
  `flappydoge.game.digit_path(digit, size)` give the image paths for a
  medal and a score digit (`size` is `"small"` or `"large"`).
- `flappydoge.game.InputType` lists the inputs read each frame:
  `QUIT`, `PLAY`, `NONE`, `PAUSE`.
- The sprites live in `flappydoge.doge.Doge`, `flappydoge.pipe.Pipes`,
  `flappydoge.land.Land` and `flappydoge.sound.Sound`; they share a
  `flappydoge.texture.GameState` and draw through
  `flappydoge.texture.Texture`.

## Running the tests

```
pip install .[test]
pytest
```