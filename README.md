# wolfcast

wolfcast reads `.cub` scene files and checks that the map is enclosed by
walls. It loads the four XPM wall textures and renders frames with a grid
raycaster. It is written in pure Python and has no dependencies.

## Scene files

A scene file starts with six settings and ends with the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE` and `EA` give the paths of the wall textures. A texture line is only accepted if it contains `.xpm`. Paths are opened as written, so relative paths are resolved from the current directory.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each part must have one to three digits and be in the range 0–255.
- In the map, `1` is a wall and `0` is floor. Exactly one of `N`, `S`, `W` or `E` must appear. It marks the start cell and the direction the player faces.
- Every floor cell that can be reached from the start must be surrounded by map cells. None of its neighbours may be a space, a tab or the end of a line. The map must also not be split by an empty line.

If the extension is wrong, the file is missing or empty, a setting is missing or invalid, the map is invalid, or a texture cannot be read, `wolfcast.scene.SceneError` is raised.

## Command line

```
wolfcast path/to/scene.cub
wolfcast path/to/scene.cub -o view.ppm --width 800 --height 600
```

The command loads the scene and its textures, then renders the view from the start position.

- Without `-o`/`--output`, it prints the start cell and the direction the player faces.
- With `-o`, it writes the finished frame (walls, ceiling and floor) as a binary PPM image.
- `--width` and `--height` set the frame size. The default is 800×600.

On any error it prints `Error` and a message to standard error, then exits with status 1. The textures must be square, and their side length must be a power of two. That length is taken from the width of the north texture.

## Library use

```python
from wolfcast.config import Direction
from wolfcast.player import Player
from wolfcast.raycast import Renderer
from wolfcast.scene import load_scene

scene = load_scene("maps/level.cub")
renderer = Renderer(
    {d: image.pixels for d, image in scene.textures.items()},
    texture_size=scene.textures[Direction.NORTH].width,
)
player = Player.from_start(scene.start_row, scene.start_col, scene.start_direction)
player.move_forward(scene.grid)
player.turn_left()

frame = renderer.render(player, scene.grid)
image = renderer.compose(frame, scene.config.ceiling, scene.config.floor)
```

### `wolfcast.scene`

- `load_scene(path)` reads a scene and loads its textures.
- `parse_scene(text)` parses the text of a scene without loading any textures.
- A `Scene` holds:
  - the header settings (`config`);
  - the map lines (`rows`);
  - a wall grid of 1s and 0s (`grid`);
  - the start cell and direction;
  - the decoded textures.
- `find_start` and `to_int_map` are lower-level helpers.

### `wolfcast.player`

`Player.from_start(row, col, direction)` places a player in the middle of a cell, facing `direction`.

- `move_forward(grid)` moves the player by up to 0.1 units.
- `move_backward(grid)` moves the player by `move_speed`, which defaults to 0.2.
- Each axis is checked against the grid separately, so the player slides along walls.
- `turn_left()` and `turn_right()` rotate the view and the camera plane by `rot_speed` radians, which defaults to 0.1.

### `wolfcast.raycast`

- `cast_ray(player, grid, x, width, height)` traces the ray for one screen column. It returns a `Ray`, and `Ray.face()` tells which side of the wall was hit.
- `Renderer.render(player, grid)` returns a frame as a list of rows. Walls are textured, north and south faces are drawn darker, and pixels with no wall are 0.
- `Renderer.compose(frame, ceiling, floor)` fills the empty pixels: the ceiling colour above the middle row and the floor colour below it. On the bottom row, pixels with no wall stay 0.

### `wolfcast.config`

- `fill_map_config(text)` reads the header settings.
- `check_map(config, lines)` validates the map characters and the start marker.
- `parse_rgb(text)` converts an `R,G,B` colour.
- `read_source(path)` reads a file up to its first NUL byte.
- Errors raise `ConfigError`.

### `wolfcast.solver`

`resolve_map(grid, start_row, start_col)` and `MapSolver` check that the floor reachable from the start cell is closed in.

### `wolfcast.xpm`

- `read_xpm_file(path)`, `parse_xpm_text(text)` and `parse_xpm(lines)` decode XPM images into `XpmImage` objects. `XpmImage.pixel(x, y)` reads one pixel.
- C comments are skipped.
- The `None` colour becomes the `TRANSPARENT` pixel value.
- Errors raise `XpmError`.

### `wolfcast.colors`

`lookup_color(name, suffix)` resolves an XPM colour:

- `#rrggbb` hex values;
- X11 colour names, matched without regard to case;
- `none` gives -1;
- an unknown name gives 0.

## What it does not do

There is no window, no keyboard input and no game loop. The command renders a single still frame from the start position. For interactive movement, drive `Player` and `Renderer` from your own display code.

## Tests

```
pip install -e .[test]
pytest
```