"""Animations played on the cube: tracks, balls, noise and tau decays."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable

from .config import STEPSIZE, TIMESTEP, Colour, Coordinate
from .led import LEDSystem

Sleep = Callable[[float], None]


def _step_toward(target: int, current: int) -> int:
    return current + (STEPSIZE if target > current else -STEPSIZE)


def track_endpoints(
    face: int, startx: int, starty: int, endx: int, endy: int, brightness: int
) -> tuple[Coordinate, Coordinate]:
    """Return start and end points of a track entering through ``face``.

    Faces: 0 bottom, 1 left, 2 back, 3 right, 4 front, 5 top.
    """
    low, high = -brightness, 100 + brightness
    if face == 0:
        return Coordinate(startx, starty, low), Coordinate(endx, endy, high)
    if face == 1:
        return Coordinate(low, startx, starty), Coordinate(high, endx, endy)
    if face == 2:
        return Coordinate(startx, low, starty), Coordinate(endx, high, endy)
    if face == 3:
        return Coordinate(high, startx, starty), Coordinate(low, endx, endy)
    if face == 4:
        return Coordinate(startx, high, starty), Coordinate(endx, low, endy)
    if face == 5:
        return Coordinate(startx, starty, high), Coordinate(endx, endy, low)
    raise ValueError(f"unknown face {face}")


def _frame(led_control: LEDSystem, sleep: Sleep) -> None:
    led_control.show()
    led_control.update_clock(TIMESTEP)
    sleep(TIMESTEP / 1000)


def run_track(led_control: LEDSystem, rng: random.Random | None = None, sleep: Sleep = time.sleep) -> None:
    """Fly a glowing point straight through the cube from one face to the opposite."""
    rng = rng or random.Random()
    brightness = rng.randrange(10, 25)
    face = rng.randrange(0, 6)
    startx = rng.randrange(0, 100)
    starty = rng.randrange(0, 100)
    endx = rng.randrange(0, 100)
    endy = rng.randrange(0, 100)
    start, end = track_endpoints(face, startx, starty, endx, endy, brightness)

    distance = math.dist((end.x, end.y, end.z), (start.x, start.y, start.z))
    current = start
    led_control.reset_clock()
    while distance > -2 * brightness:
        current = Coordinate(
            _step_toward(end.x, current.x),
            _step_toward(end.y, current.y),
            _step_toward(end.z, current.z),
        )
        distance -= math.sqrt(3) * STEPSIZE
        led_control.set_volume(current, brightness)
        _frame(led_control, sleep)

    sleep(2.0)
    led_control.clear()


def run_ball(led_control: LEDSystem, rng: random.Random | None = None, sleep: Sleep = time.sleep) -> None:
    """Grow a sphere from a random point inside the cube."""
    rng = rng or random.Random()
    start = Coordinate(rng.randrange(20, 80), rng.randrange(20, 80), rng.randrange(20, 80))
    size = rng.randrange(15, 40)
    led_control.reset_clock()
    for radius in range(0, size, STEPSIZE):
        led_control.set_volume(start, radius)
        _frame(led_control, sleep)

    sleep(2.0)
    led_control.clear()


def run_noise(led_control: LEDSystem, rng: random.Random | None = None, sleep: Sleep = time.sleep) -> None:
    """Flash five frames of randomly coloured random pixels."""
    rng = rng or random.Random()
    for _ in range(5):
        for strip in range(7):
            for _ in range(rng.randrange(10, 30)):
                pixel = rng.randrange(0, 100)
                r = rng.randrange(50, 255)
                g = rng.randrange(50, 255)
                b = rng.randrange(50, 255)
                led_control.set_pixel(strip, pixel, r, g, b)
        led_control.show()
        sleep(0.1)
        led_control.clear()


def run_tau(led_control: LEDSystem, rng: random.Random | None = None, sleep: Sleep = time.sleep) -> None:
    """Grow a red sphere, then a second sphere nearby once the first has travelled."""
    rng = rng or random.Random()
    startx = rng.randrange(30, 70)
    starty = rng.randrange(30, 70)
    startz = rng.randrange(30, 70)
    offx = rng.randrange(-30, 30)
    offy = rng.randrange(-30, 30)
    offz = rng.randrange(-30, 30)

    start = Coordinate(startx, starty, startz)
    tau = Coordinate(startx + offx, starty + offy, startz + offz)
    distance = int(math.sqrt(offx**2 + offy**2 + offz**2))

    ball1 = rng.randrange(15, 20)
    ball2 = rng.randrange(15, 30)
    radius1 = radius2 = 0
    c1 = Colour(255, 63, 52)
    c2 = Colour(52, 244, 255)

    led_control.reset_clock()
    elapsed = 0
    both = False
    while radius1 < ball1 or radius2 < ball2:
        if both:
            led_control.draw_combined(start, radius1, c1, tau, radius2, c2)
        else:
            led_control.set_volume(start, radius1, 255, 0, 0)
            if elapsed > distance // TIMESTEP:
                both = True
        _frame(led_control, sleep)
        elapsed += TIMESTEP
        if radius1 < ball1:
            radius1 += STEPSIZE
        if radius2 < ball2:
            radius2 += STEPSIZE

    sleep(2.0)
    led_control.clear()