# nattojump

A small 2D arcade game built on pygame. The game screen is made of four
stages, each a set of game objects:

1. **Scramble** (`GameScene.SCRAMBLE`) – a vortex (`Scramble`) turns to
   face the player (`Player`) while a ten-second `Timer` counts down
   600 frames.
2. **Fall** (`GameScene.FALL`) – the player (`Fall`) jumps off a wall
   along an arc.
3. **Bungee jump** (`GameScene.BUNGEE_JUMP`) – the player (`Bungee`)
   falls and springs back up when Space is tapped low enough on screen.
4. **Shot string** (`GameScene.GAME_TEST`) – a `ShootStringManager`
   runs a scrolling background, a swinging player, a wall layout and a
   string fired at the mouse cursor.

`GameFramework.transition_scene` moves forward through these stages:
from scramble to fall when the timer runs out, from fall to bungee when
the jump arc ends, and from bungee to shot string when the player drops
below the bottom of the screen.

Around the game screen sit a title screen, a result screen and a
game-over screen, with fades between them (`SceneManager`, `Fade`).

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
nattojump
```

Options:

- `--scale FACTOR` – window size relative to 1920×1080 (default `1.0`,
  must be positive). The game always renders at 1920×1080 and is scaled
  to the window.
- `--frames N` – stop after `N` frames.

The game steps at 60 frames per second and opens on the title screen,
faded in from black. Textures are looked up by name under
`data/TEXTURE/` relative to the directory you start the game from (for
example `data/TEXTURE/title.png`, `data/TEXTURE/player.png`,
`data/TEXTURE/Vortex.png`). A texture file that is missing or cannot be
read is not an error: its quads are drawn as flat coloured shapes.

### Controls

| Key / button      | Action                                                                 |
|-------------------|------------------------------------------------------------------------|
| Enter             | Title → game, game → result, result → title                            |
| Space             | Jump (fall, bungee and shot-string stages)                             |
| A / D             | Walk left / right and scroll the background in the shot-string stage  |
| Arrow keys        | Move the player in the scramble stage                                  |
| Left mouse button | Fire the string towards the cursor; in the scramble stage, move the player to the cursor |
| Esc               | Quit                                                                   |

Game pads are read as well (up to four), but no stage reacts to them.

## Using the pieces

The game logic does not depend on a window. Every game object reads its
input from an `InputState`, loads textures through a `TextureRegistry`
and draws onto a `Canvas`; the three are bundled in a `GameContext`.
The default canvas is a `RecordingCanvas`, which keeps each drawn quad
as `(texture, vertices)` in `draws` instead of painting it:

```python
from nattojump.constants import GameScene
from nattojump.framework import GameFramework
from nattojump.game_object import GameContext
from nattojump.input import Key

context = GameContext()
game = GameFramework(context)
game.initialize()
game.scene = GameScene.BUNGEE_JUMP

context.input.update(keys_down=[Key.SPACE])
game.update()
game.draw()

print(game.bungee.pos_y)
print(context.canvas.draws)
```

Modules:

- `nattojump.constants` – screen size, `GameScene`, `Vec2`, `Color`.
- `nattojump.input` – `InputState` with press, trigger, repeat and
  release tracking; `Key`, `MouseButton`, `PadButton`, `read_pad`.
- `nattojump.texture` – `TextureRegistry`, `TextureError`.
- `nattojump.sprite` – quad builders (`sprite_quad`, `left_top_quad`,
  `rotated_quad`), `Canvas`, `RecordingCanvas`.
- `nattojump.game_object` – `GameContext`, `GameObject`.
- Stage objects: `player`, `scramble`, `timer`, `fall`, `bungee`,
  `ss_background`, `ss_player`, `ss_shot_string`, `ss_wall`,
  `ss_communication`, `ss_manager`, `props`.
- `nattojump.framework` – `GameFramework`, which updates and draws only
  the objects of the current stage.
- `nattojump.fade` and `nattojump.scenes` – screen fades and
  `SceneManager`.
- `nattojump.app` – `PygameCanvas`, `App` and the `main` command.

## What it does not do

- The game screen starts in the shot-string stage
  (`GameFramework.scene` is `GameScene.GAME_TEST`), and stages only move
  forward, so the scramble, fall and bungee stages are not reached in
  normal play; they run only if `scene` is set to them.
- Nothing leads to the game-over screen; it exists but no screen
  switches to it.
- `Target`, `Throw` and `Natto` take part in the life cycle but do
  nothing yet.
- There is no sound, scoring or saved state.