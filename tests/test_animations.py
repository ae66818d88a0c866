import random

import pytest

from ledcube.animations import run_ball, run_noise, run_tau, run_track, track_endpoints
from ledcube.config import TIMESTEP, Coordinate
from ledcube.led import LEDSystem


def lit(led, strips=None):
    chosen = led.strips if strips is None else [led.strips[i] for i in strips]
    return sum(1 for s in chosen for p in range(s.num_leds) if s.get_pixel_color(p))


class Recorder:
    def __init__(self, led):
        self.led = led
        self.calls = []
        self.lit_counts = []

    def __call__(self, seconds):
        self.calls.append(seconds)
        self.lit_counts.append(lit(self.led))

    @property
    def frames(self):
        return [c for c in self.calls if c == TIMESTEP / 1000]


def setup():
    led = LEDSystem(sleep=lambda s: None)
    return led, Recorder(led)


@pytest.mark.parametrize(
    "face, start, end",
    [
        (0, Coordinate(1, 2, -10), Coordinate(3, 4, 110)),
        (1, Coordinate(-10, 1, 2), Coordinate(110, 3, 4)),
        (2, Coordinate(1, -10, 2), Coordinate(3, 110, 4)),
        (3, Coordinate(110, 1, 2), Coordinate(-10, 3, 4)),
        (4, Coordinate(1, 110, 2), Coordinate(3, -10, 4)),
        (5, Coordinate(1, 2, 110), Coordinate(3, 4, -10)),
    ],
)
def test_track_endpoints(face, start, end):
    assert track_endpoints(face, 1, 2, 3, 4, 10) == (start, end)


def test_track_endpoints_bad_face():
    with pytest.raises(ValueError):
        track_endpoints(6, 0, 0, 0, 0, 10)


@pytest.mark.parametrize("seed", [0, 1, 7])
def test_run_ball(seed):
    led, rec = setup()
    run_ball(led, random.Random(seed), rec)
    assert rec.calls[-1] == 2.0
    frames = len(rec.frames)
    assert 15 <= frames <= 39
    assert len(rec.calls) == frames + 1
    assert led.current_time == frames * TIMESTEP
    counts = rec.lit_counts[:-1]
    assert counts == sorted(counts)
    assert counts[-1] > 0
    assert lit(led) == 0


@pytest.mark.parametrize("seed", [0, 3])
def test_run_track(seed):
    led, rec = setup()
    run_track(led, random.Random(seed), rec)
    assert rec.calls[-1] == 2.0
    frames = len(rec.frames)
    assert frames > 0
    assert len(rec.calls) == frames + 1
    assert led.current_time == frames * TIMESTEP
    counts = rec.lit_counts[:-1]
    assert counts == sorted(counts)
    assert lit(led) == 0


def test_run_track_is_deterministic_for_a_seed():
    led_a, rec_a = setup()
    led_b, rec_b = setup()
    run_track(led_a, random.Random(42), rec_a)
    run_track(led_b, random.Random(42), rec_b)
    assert rec_a.calls == rec_b.calls
    assert rec_a.lit_counts == rec_b.lit_counts


def test_run_noise():
    led = LEDSystem(sleep=lambda s: None)
    seen = []

    def sleep(seconds):
        seen.append((seconds, lit(led, [0, 1, 2, 3, 4]), lit(led, [5, 6])))

    run_noise(led, random.Random(5), sleep)
    assert [s for s, _, _ in seen] == [0.1] * 5
    assert all(0 < low <= 5 * 29 for _, low, _ in seen)
    assert all(high == 0 for _, _, high in seen)
    assert lit(led) == 0


@pytest.mark.parametrize("seed", [2, 11])
def test_run_tau(seed):
    led, rec = setup()
    run_tau(led, random.Random(seed), rec)
    assert rec.calls[-1] == 2.0
    frames = len(rec.frames)
    assert 15 <= frames <= 29
    assert led.current_time == frames * TIMESTEP
    counts = rec.lit_counts[:-1]
    assert counts == sorted(counts)
    assert counts[-1] > 0
    assert lit(led) == 0