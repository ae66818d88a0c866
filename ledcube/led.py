"""The LED cube: strip and clock devices, geometry mapping and drawing."""

from __future__ import annotations

import logging
import math
import sys
import time
from collections.abc import Callable, Iterable, Iterator

from .config import LED_COUNT, NUM_STRIPS, PINK, Colour, Coordinate, PixelId

log = logging.getLogger(__name__)

_PIN_IDS = {8: 2, 22: 3, 36: 4, 50: 5, 63: 6, 77: 7, 91: 8}


class PixelStrip:
    """An addressable LED strip held in memory."""

    def __init__(self, num_leds: int = LED_COUNT) -> None:
        self.num_leds = num_leds
        self.pixels = [0] * num_leds
        self.brightness = 255
        self.begun = False
        self.show_count = 0
        self.frame: tuple[int, ...] = tuple(self.pixels)

    def begin(self) -> None:
        self.begun = True

    def show(self) -> None:
        """Latch the current pixel buffer as the displayed frame."""
        self.show_count += 1
        self.frame = tuple(self.pixels)

    def set_brightness(self, brightness: int) -> None:
        self.brightness = brightness & 0xFF

    def set_pixel_color(self, pixel: int, color: int) -> None:
        """Store a packed colour; indices outside the strip are ignored."""
        if 0 <= pixel < self.num_leds:
            self.pixels[pixel] = color & 0xFFFFFFFF

    def get_pixel_color(self, pixel: int) -> int:
        """Return the packed colour of a pixel, 0 outside the strip."""
        if 0 <= pixel < self.num_leds:
            return self.pixels[pixel]
        return 0

    def get_pixel_rgb(self, pixel: int) -> tuple[int, int, int]:
        c = self.get_pixel_color(pixel)
        return (c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF

    @staticmethod
    def color(r: int, g: int, b: int) -> int:
        """Pack three 8-bit channels into one colour value."""
        return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


class SevenSegment:
    """A four-digit seven-segment clock display held in memory."""

    def __init__(self) -> None:
        self.digits: dict[int, tuple[int, bool]] = {}
        self.colon = False
        self.displayed: tuple[dict[int, tuple[int, bool]], bool] = ({}, False)
        self.write_count = 0

    def clear(self) -> None:
        self.digits = {}
        self.colon = False

    def write_digit_num(self, position: int, digit: int, dot: bool = False) -> None:
        self.digits[position] = (digit, dot)

    def draw_colon(self, on: bool) -> None:
        self.colon = on

    def write_display(self) -> None:
        """Latch the buffered digits and colon onto the display."""
        self.displayed = (dict(self.digits), self.colon)
        self.write_count += 1


def get_pin_id(y: int) -> int:
    """Return the strip pin serving the row at height ``y``."""
    try:
        return _PIN_IDS[y]
    except KeyError:
        raise ValueError(f"no strip serves row y={y}") from None


def generate_grid(rows: int, distance: float) -> list[tuple[Coordinate, PixelId]]:
    """Map every LED of the hexagonal column grid to its coordinate and pixel."""
    grid = []
    y_offset = (100.0 - (6.0 * distance * math.sqrt(3) / 2.0)) / 2.0
    for row in range(rows):
        num_points = 7 if row % 2 == 0 else 6
        top = row % 2 == 0
        ledcnt = 99
        for col in range(num_points):
            x = col * distance
            y = row * distance * math.sqrt(3) / 2
            if row % 2 == 1:
                x += distance / 2
            x += 2
            y += y_offset
            strip_id = get_pin_id(int(y))
            for lay in range(10):
                ledid = ledcnt - 9 + lay if top else ledcnt - lay
                z = lay * 10 + 5
                grid.append((Coordinate(int(x), int(y), int(z)), PixelId(strip_id, ledid)))
            top = not top
            ledcnt -= 13
    return grid


def check_volume(led: Coordinate, coor: Coordinate, radius: int) -> float:
    """Return how strongly ``led`` lies inside the sphere at ``coor``: 0 to 1."""
    xdiff = abs(led.x - coor.x)
    ydiff = abs(led.y - coor.y)
    zdiff = abs(led.z - coor.z)
    if xdiff < radius and ydiff < radius and zdiff < radius:
        dist = math.sqrt(xdiff**2 + ydiff**2 + zdiff**2)
        return max(0.0, 1 - dist / radius)
    return 0.0


def cycle_colour(current_time: int) -> Colour:
    """Return the colour of the rainbow cycle at ``current_time`` milliseconds."""
    t1, t2, t3, t4, t5, t6 = 1000.0, 2000.0, 3000.0, 4000.0, 5000.0, 6000.0
    t = current_time
    r = g = b = 255
    if t < t1:
        r, g, b = 255, int(t / t1 * 255), 0
    if t1 <= t <= t2:
        r, g, b = int(255 - (t - t1) / (t2 - t1) * 255), 255, 0
    if t2 <= t <= t3:
        r, g, b = 0, 255, int((t - t2) / (t3 - t2) * 255)
    if t3 <= t <= t4:
        r, g, b = 0, int(255 - (t - t3) / (t4 - t3) * 255), 255
    if t4 <= t <= t5:
        r, g, b = int((t - t4) / (t5 - t4) * 255), 0, 255
    if t5 <= t <= t6:
        r, g, b = 255, 0, int(255 - (t - t5) / (t6 - t5) * 255)
    if t > t6:
        r, g, b = 255, 255, 255
    return Colour(r, g, b)


class LEDSystem:
    """The cube's strips, clock and LED geometry, with drawing primitives."""

    def __init__(
        self,
        strips: Iterable[PixelStrip] | None = None,
        clock: SevenSegment | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.strips = list(strips) if strips is not None else [PixelStrip() for _ in range(NUM_STRIPS)]
        self.clock = clock if clock is not None else SevenSegment()
        self.sleep = sleep
        self.current_time = 0
        for strip in self.strips:
            strip.begin()
            strip.show()
            strip.set_brightness(100)
        self.clear()
        self.clock.clear()
        for position in range(5):
            self.clock.write_digit_num(position, 0, False)
        self.clock.draw_colon(True)
        self.clock.write_display()
        self.grid = generate_grid(7, 16.0)
        log.debug("Geometry Generated")

    def clear(self) -> None:
        black = PixelStrip.color(0, 0, 0)
        for strip in self.strips:
            for pixel in range(LED_COUNT):
                strip.set_pixel_color(pixel, black)
            strip.show()

    def show(self) -> None:
        for strip in self.strips:
            strip.show()

    def map_lines(self) -> Iterator[str]:
        """Yield one line per LED describing its coordinate and pixel."""
        for point, pin in self.grid:
            yield (
                f"Coordinate: {point.x}, {point.y}, {point.z} "
                f"-> Pixel ID: {pin.strip}, {pin.pixel}"
            )

    def print_map(self, file=None) -> None:
        out = file if file is not None else sys.stdout
        print("print map", file=out)
        for line in self.map_lines():
            print(line, file=out)

    def set_pixel(self, strip: int, pixel: int, r: int, g: int, b: int) -> None:
        """Light a pixel of the strip on pin ``strip`` unless it is already lit."""
        r, g, b = (min(255, max(0, v)) for v in (r, g, b))
        if strip < 2 or strip - 2 >= NUM_STRIPS:
            return
        target = self.strips[strip - 2]
        if target.get_pixel_rgb(pixel) == (0, 0, 0):
            target.set_pixel_color(pixel, PixelStrip.color(r, g, b))

    def set_volume(self, coor: Coordinate, radius: int, r: int = 255, g: int = 255, b: int = 255) -> None:
        """Draw a sphere; its colour is superseded by the clock-driven cycle."""
        colour = cycle_colour(self.current_time)
        for point, pin in self.grid:
            scale = check_volume(point, coor, radius)
            if scale > 0:
                self.set_pixel(
                    pin.strip,
                    pin.pixel,
                    int(scale * colour.r),
                    int(scale * colour.g),
                    int(scale * colour.b),
                )

    def check_volume(self, led: Coordinate, coor: Coordinate, radius: int) -> float:
        return check_volume(led, coor, radius)

    def draw_combined(
        self, p1: Coordinate, r1: int, c1: Colour, p2: Coordinate, r2: int, c2: Colour
    ) -> None:
        """Draw two spheres whose colours add where they overlap."""
        for point, pin in self.grid:
            s1 = check_volume(point, p1, r1)
            s2 = check_volume(point, p2, r2)
            if s1 > 0 or s2 > 0:
                self.set_pixel(
                    pin.strip,
                    pin.pixel,
                    int(s1 * c1.r + s2 * c2.r),
                    int(s1 * c1.g + s2 * c2.g),
                    int(s1 * c1.b + s2 * c2.b),
                )

    def red_flash(self) -> None:
        for strip in self.strips:
            for pixel in range(LED_COUNT):
                strip.set_pixel_color(pixel, PINK)
            strip.show()
        self.sleep(0.5)
        self.clear()

    def assembly(self, strip: int, step: int) -> None:
        """Light the ``step``-th pixel of strip pin ``strip`` for assembly guidance."""
        self.clear()
        pixels = [pin.pixel for _, pin in self.grid if pin.strip == strip]
        pixel_list = sorted(pixels + [999] * (100 - len(pixels)))
        if not 0 <= step < len(pixel_list):
            raise IndexError(f"step {step} out of range")
        px = pixel_list[step]
        top = 89 < px < 100 or 63 < px < 74 or 37 < px < 48 or 11 < px < 22
        if strip % 2 != 0:
            top = not top
        if top:
            self.set_pixel(strip - 2, px, 255, 0, 0)
        else:
            self.set_pixel(strip - 2, px, 0, 0, 255)
        self.show()

    def light_all(self) -> None:
        for _, pin in self.grid:
            self.set_pixel(pin.strip, pin.pixel, 50, 50, 50)
        self.show()

    def reset_clock(self) -> None:
        self.current_time = 0
        self.update_clock(0)

    def update_clock(self, timestep: int) -> None:
        """Advance the animation clock by ``timestep`` ms and display it."""
        self.clock.clear()
        self.current_time += timestep
        t = self.current_time
        self.clock.write_digit_num(0, t // 1000, False)
        self.clock.write_digit_num(1, (t // 100) % 10, False)
        self.clock.write_digit_num(3, (t // 10) % 10, False)
        self.clock.write_digit_num(4, t % 10, False)
        self.clock.draw_colon(False)
        self.clock.write_display()