# dorga

A small one-button arcade game. Your rocket spins on the spot; hold the
button to fire the engine and thrust in the direction it is facing. Fly
through an endless, procedurally generated field of space, pick up stars
and keep clear of the asteroids, which grow more common the further you
travel from where you started.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window, input, drawing and
sound.

## Playing

```
dorga
```

The game opens a window at the size of the screen.

- **Space** or the **left mouse button**: start a run from the menu.
- Hold **Space** or the **left mouse button**: fire the engine. Let go and
  the rocket turns instead.
- Touching an asteroid ends the run. After one second, press again to go
  back to the menu; the colour palette changes for the next run.
- **Escape** or closing the window quits.

While playing, the screen shows the stars collected in the current run.
After a crash it shows the run's stars, your highscore and the total of
stars collected across all runs. A frame-rate counter is shown as well.

### Sound

```
dorga --sounds path/to/sounds
```

`--sounds` names the directory holding `Coin_000.mp3`, `Coin_001.mp3`,
`Coin_002.mp3` and `Music_001.mp3` (default: `Sounds` in the current
directory). The music plays during a run and stops on a crash; the coin
sounds take turns as stars are picked up. Any file that is missing, or a
sound device that cannot be opened, just means silence. Coin sounds play
at their recorded pitch.

## What it does not do

The game draws everything with simple pygame shapes: the rocket, stars and
asteroids are polygons and circles, not images. There is no settings
screen, and scores are not saved: the highscore and total last only until
the window is closed.

## The world

The world is split into square chunks that are generated on demand around
the rocket from a random seed picked for each run, so every run has a new
layout, and the same seed always gives the same layout. Stars you have
collected stay collected for the rest of the run, even when their chunk
is unloaded and loaded again. The chunk you start in is always empty of
stars and asteroids.

## Using the pieces

The game logic is free of any drawing code and can be driven directly:

```python
from dorga.game import GameManager
from dorga.state import GameState

game = GameManager()
game.update(800, 600, 1 / 60, pressed=True, held=False)  # start a run
assert game.state is GameState.PLAYING
```

`GameManager` also accepts a `random.Random` for reproducible seeds and an
optional audio object with `play_music()`, `stop_music()` and
`play_coin(index, pitch)` methods.

- `dorga.world.World` produces the chunked world; `World.update` returns an
  `UpdateResult` saying whether a star was collected or an asteroid hit.
- `dorga.objects` holds `WorldObject` (background stars), `Coin` and
  `Obstacle`, with the `Collision` outcomes.
- `dorga.player.Player` holds the rocket's flight model.
- `dorga.camera.CameraManager` follows the rocket.
- `dorga.colors.ColorManager` holds the colour palettes.
- `dorga.geometry.Vec2` and `circles_collide` are the vector helpers.
- `dorga.app.Renderer` draws a `GameManager` onto a pygame surface, and
  `dorga.app.hud_lines` gives the score texts and their positions.

## Running the tests

```
pip install .[test]
pytest
```