import numpy as np
import pytest

from boids import Flock, populate
from config import boids as config


def test_populate_respects_bounds_and_ranges():
    flock = Flock(rng=0)
    populate(flock, 200, 64, 48, np.random.default_rng(3))

    assert len(flock) == 200
    for boid in flock:
        x, y = boid.position
        assert 0 <= x < 64 and 0 <= y < 48
        assert x == int(x) and y == int(y)
        assert config.BOIDS["min_radius"] <= boid.radius < config.BOIDS["max_radius"]
        assert all(0 <= channel < config.BOIDS["max_channel"] for channel in boid.color)
        np.testing.assert_array_equal(boid.velocity, [0.0, 0.0])


def test_populate_appends_in_order():
    flock = Flock(rng=0)
    first = flock.add_boid(1, 1, 2)
    populate(flock, 3, 10, 10, np.random.default_rng(0))

    assert len(flock) == 4
    assert flock.boids[0] is first


def test_populate_is_reproducible():
    a, b = Flock(rng=0), Flock(rng=0)
    populate(a, 25, 300, 200, np.random.default_rng(17))
    populate(b, 25, 300, 200, np.random.default_rng(17))

    assert [(tuple(p), r, c) for p, r, c in a.draw_stream()] == \
        [(tuple(p), r, c) for p, r, c in b.draw_stream()]


def test_populate_zero_is_allowed():
    flock = populate(Flock(rng=0), 0, 10, 10, np.random.default_rng(0))
    assert len(flock) == 0


@pytest.mark.parametrize("count, width, height", [(-1, 10, 10), (5, 0, 10), (5, 10, -3)])
def test_populate_rejects_invalid_arguments(count, width, height):
    with pytest.raises(ValueError):
        populate(Flock(rng=0), count, width, height, np.random.default_rng(0))
