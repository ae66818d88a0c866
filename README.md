# ledcube

This package holds the logic for a 3D LED cube. The cube has 46 vertical strings of
10 LEDs each, which makes 460 LEDs. The strings stand on a hexagonal grid inside a
100 × 100 × 100 cm volume. Seven pixel strips drive the LEDs, on pins 2 to 8. A
four-digit seven-segment clock shows the elapsed animation time.

The strips and the clock are modelled in memory. You can run animations and
inspect what they drew without any hardware attached.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

### `ledcube.config`

- The frozen dataclasses `Coordinate`, `Colour` and `PixelId`. `Coordinate` orders
  by x, then y, then z.
- The cube constants, such as `LED_COUNT`, `NUM_STRIPS`, `STEPSIZE`, `TIMESTEP`,
  `PINK` and `CYAN`.

### `ledcube.led`

- `PixelStrip` is an in-memory strip.
  - Colours are packed integers built with `PixelStrip.color(r, g, b)`.
  - `show()` latches the buffer into `frame` and counts the call in `show_count`.
- `SevenSegment` is an in-memory clock display.
  - `write_display()` latches the digits and the colon into `displayed`.
- `generate_grid(rows, distance)` returns a list of `(Coordinate, PixelId)` pairs.
- `get_pin_id(y)` maps a row height to its strip pin. It raises `ValueError` for an
  unknown height.
- `check_volume(led, coor, radius)` returns a value from 0 to 1 that tells how far
  `led` lies inside a sphere.
- `cycle_colour(current_time)` returns the `Colour` for a time in milliseconds.
- `LEDSystem(strips=None, clock=None, sleep=time.sleep)` ties the strips and the
  clock together.
  - It creates seven strips and a clock when none are given.
  - Drawing methods: `set_pixel`, `set_volume`, `draw_combined`, `light_all`,
    `red_flash` and `assembly`.
  - Output methods: `clear` and `show`.
  - Clock methods: `reset_clock` and `update_clock`.
  - Map methods: `map_lines`, a generator, and `print_map(file=None)`.

### `ledcube.animations`

- `run_track`, `run_ball`, `run_noise` and `run_tau`.
  - Each takes an `LEDSystem`, an optional `random.Random` and a `sleep` function
    that is called with seconds.
- `track_endpoints(face, startx, starty, endx, endy, brightness)` gives the start and
  end points of a track.

## Example

```python
import itertools
import random

from ledcube.config import Coordinate
from ledcube.led import LEDSystem, PixelStrip, SevenSegment
from ledcube.animations import run_ball

strips = [PixelStrip() for _ in range(7)]
clock = SevenSegment()
cube = LEDSystem(strips, clock, sleep=lambda seconds: None)

# Light a sphere of radius 20 around the centre of the cube.
cube.set_volume(Coordinate(50, 50, 50), 20)
cube.show()

# Run a complete animation with a seeded random source and no real delays.
run_ball(cube, random.Random(1), sleep=lambda seconds: None)

for line in itertools.islice(cube.map_lines(), 3):
    print(line)
```

## Behaviour to know

**Colour.** `LEDSystem.set_volume` ignores the colour arguments passed to it. It
takes its colour from the elapsed clock time instead. Over six seconds the colour
moves through red, yellow, green, cyan, blue and magenta, then back to red. After
six seconds it is white.

**Pixels that are already lit.** `set_pixel` leaves a pixel alone if it is already
lit. The pixel keeps its colour until the next `clear()`.

**Strip numbers.** `set_pixel` takes the strip's pin number, from 2 to 8. It
ignores any other value.

## What it does not do

- No command-line program.
- No main loop that picks animations.
- No handling of the push buttons whose pins `ledcube.config` lists.
- No hardware driver. Strips and clock exist only as the in-memory `PixelStrip` and
  `SevenSegment` objects.