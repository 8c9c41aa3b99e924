# cubraycast

A small first-person raycaster. It reads a scene described in a `.cub`
file, checks that the map is closed, and opens a 1920×1080 window in which
you can walk around a textured maze.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
cubraycast path/to/scene.cub
```

The program takes exactly one argument, a file whose name ends in `.cub`.
If the arguments are wrong, the file cannot be opened, or the scene is
malformed, it prints `Error: ` followed by the reason to standard error
and exits with status 1. If a wall texture cannot be loaded it prints
`error : failed to load textures`, and if the window cannot be opened
`error : failed to initialize display`, also exiting with status 1.

### Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe sideways     |
| Left / Right | turn                |
| Esc          | quit                |

Every key press and every key release performs one small step of the
action; holding a key down does not repeat it. Movement is blocked by
walls, each axis checked separately, so the player slides along them.
Closing the window also quits.

## The `.cub` format

A scene starts with six elements, in any order, separated by any number of
empty lines; leading and trailing whitespace on each line is ignored:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE`, `EA` give the image file for each wall face. Any
  format Pillow can open (XPM, PNG, ...) is accepted.
- `F` and `C` give the floor and ceiling colours as three integers from
  0 to 255, separated by commas.
- Each element may appear only once; any other non-empty line before the
  map is an error.

The map follows, as the last part of the file. It begins at the first
line whose trimmed text starts with `1`:

```
111111
100101
101001
1100N1
111111
```

- `1` is a wall, `0` is open floor, a space is outside the map.
- Exactly one of `N`, `S`, `E`, `W` marks where the player starts and
  which way they face.
- The map must have at least three rows and be enclosed by walls; every
  floor cell must be surrounded by floor, walls or the player.
- No empty line may appear inside the map or after it.

## Using it as a library

```python
from cubraycast.cubfile import load_scene
from cubraycast.camera import camera_for, Action
from cubraycast.raycast import cast_frame

scene = load_scene("maze.cub")
camera = camera_for(scene.player.orientation, scene.player.x, scene.player.y)
camera.apply(Action.FORWARD, scene.grid)
hits = cast_frame(camera, scene.grid, 640)
```

- `cubraycast.cubfile`: `parse_scene` parses a scene from a string,
  `load_scene` from a file, `parse_color` parses an `R,G,B` string into a
  packed `0xRRGGBB` integer. Problems raise `SceneError`.
- `cubraycast.mapcheck`: `check_map` validates a list of map rows on its
  own and returns the grid (with the player cell turned into floor) and a
  `PlayerStart`. Problems raise `MapError`.
- `cubraycast.camera`: `Camera`, `Vec`, `Action` and `camera_for`.
- `cubraycast.raycast`: `cast_ray`, `cast_frame` and the `RayHit` they
  return, plus the helpers `wall_span`, `hit_direction` and `texture_y`.
- `cubraycast.render`: `Texture`, `load_texture`, `texture_x`,
  `draw_column` and `render_frame`, which draws a full view into a NumPy
  array of packed colours.
- `cubraycast.app`: `Game` ties a scene and its textures together;
  `Game.step(actions)` applies actions and returns the new frame without
  opening a window, `Game.run()` opens the window and plays. `check_args`
  and `main` back the `cubraycast` command.

## What it does not do

There are no enemies, sprites, doors, sound or mouse look, and the window
size is fixed at 1920×1080. The game is only a walkable, textured view of
the map.