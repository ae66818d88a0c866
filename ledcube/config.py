"""Cube geometry, animation timing and the small value types shared by the package."""

from dataclasses import dataclass

BLUE_BUTTON_PIN = 13
YELLOW_BUTTON_PIN = 12
WHITE_BUTTON_PIN = 11

LED_COUNT = 100
NUM_STRIPS = 7

STEPSIZE = 1
LINERADIUS = 15
TIMESTEP = 50

# Packed as g<<16 | b<<8 | r to suit the strips' wiring order.
PINK = 4142335
CYAN = 3470591


@dataclass(frozen=True)
class Colour:
    """An RGB colour with integer channels."""

    r: int
    g: int
    b: int


@dataclass(frozen=True, order=True)
class Coordinate:
    """A point in the cube, in centimetres; orders by x, then y, then z."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class PixelId:
    """The strip (by pin number) and the pixel index of one LED."""

    strip: int
    pixel: int