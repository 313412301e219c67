# fdfview

An interactive wireframe viewer for FdF height maps. It reads a grid of
altitudes from a text file, projects it either flat or isometrically, and
draws the mesh into a 1920×1080 pygame window, colouring each line by
altitude. A legend of the controls is shown in the top-left corner.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Map files

A map is a plain text file. Each line is one row of the grid. Each row holds
integer altitudes separated by spaces, optionally negative:

```
0  0  0  0  0
0 10 10 10  0
0 10 20 10  0
0 10 10 10  0
0  0  0  0  0
```

Rules:

- Only digits, spaces and `-` are allowed; tabs or any other character make
  the file invalid.
- Every row must have the same number of values, and the first row must
  hold at least one.
- An empty file is invalid.
- A `0` ends a number, so `05` is read as two values, `0` and `5`; such a
  row then has more points than fields and is rejected.
- Altitudes wrap around as 32-bit signed integers.

## Usage

```
fdfview path/to/map.fdf
```

The program takes exactly one argument; with any other number of arguments
it does nothing and exits with status 0. If the map is malformed it prints
`Error: Invalid file.` and exits with status 254. If the file cannot be
read it exits with status 1.

## Controls

| Action          | Key          |
|-----------------|--------------|
| Move up         | ↑            |
| Move down       | ↓            |
| Move left       | ←            |
| Move right      | →            |
| Zoom in         | `z`          |
| Zoom out        | `e`          |
| Increase height | keypad `+`   |
| Decrease height | keypad `-`   |
| Change view     | `i`          |
| Center view     | `p`          |
| Reset view      | `r`          |
| Exit            | `esc`        |

`i` switches between the flat top-down view and the isometric projection and
recentres the map. `r` rescales and recentres the map to fit the window.
Zooming out stops once the zoom factor is 0.2 or less. Releasing `esc` or
closing the window exits.

## Colours

Each line takes the colour of its starting point's projected altitude (the
map altitude times the current height factor):

| Altitude                | Colour               |
|-------------------------|----------------------|
| above −10, up to 0      | light blue `0x3366FF`|
| −20 to below −10        | blue `0x0000FF`      |
| −30 to below −20        | darker blue `0x0000CC`|
| −40 to below −30        | navy `0x000099`      |
| below −40               | deep navy `0x000066` |
| above 0, up to 15       | green                |
| 15 to 60                | yellow               |
| 60 to 90                | red                  |
| anything else           | white                |

Values on a gap between bands, such as exactly −10, −20, −30 or −40, and
anything above 90, come out white.

## Library use

The pieces behind the viewer can be used on their own:

- `fdfview.parsing`: `load_map(path)` reads a map file into a grid (a list of
  rows of `Point(x, y, z)`), raising `MapFileError` (a `ValueError`) on a
  malformed map; `parse_map(lines)` does the same from an iterable of lines.
  `parse_line`, `count_columns`, `line_is_valid` and `copy_grid` are the
  helpers it is built from.
- `fdfview.view`: `ViewState` holds zoom, depth, offsets, rotation and the
  `center`, `scale` and `iso` flags, with one method per control
  (`move_left`, `zoom_in`, `switch_iso`, `center_scale`, `reset`, …).
  `project(grid, state)` returns a new grid of screen coordinates, leaving
  the input grid untouched and updating `state` with the bounds, zoom, depth
  and offsets it computes. `measure_bounds(grid)` gives a grid's extent as a
  `Bounds`.
- `fdfview.raster`: `Image` is a 1920×1080 buffer of `0xRRGGBB` pixels with
  `put_pixel`, `get` and `clear`; pixels under the legend area (x < 255 and
  y < 210) are never written. `bresenham(image, start, end)` draws one line
  and `draw_wireframe(image, grid)` joins each point of a projected grid to
  its right and lower neighbours.
- `fdfview.colors`: `pick_color(z)` gives the colour for an altitude.
- `fdfview.app`: `Viewer(grid)` ties a grid, a `ViewState` and an `Image`
  together; `handle_key(name)` applies a control by key name (`"left"`,
  `"z"`, `"+"`, `"i"`, …) and redraws, and `render()` redraws without a key.
  `run(path)` opens the window; `main(argv)` is the command-line entry point.