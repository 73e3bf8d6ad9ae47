import numpy as np
import pytest

from boids import Boid


def test_new_boid_is_at_rest():
    boid = Boid(10, 10, 3, (1, 2, 3))

    np.testing.assert_array_equal(boid.position, [10.0, 10.0])
    np.testing.assert_array_equal(boid.velocity, [0.0, 0.0])
    assert boid.radius == 3.0
    assert boid.color == (1, 2, 3)


def test_move_adds_velocity_to_position():
    boid = Boid(1.5, -2.0, 4)
    boid.velocity = (0.5, 1.0)

    boid.move()
    np.testing.assert_allclose(boid.position, [2.0, -1.0])

    boid.move()
    np.testing.assert_allclose(boid.position, [2.5, 0.0])


def test_position_is_read_only():
    boid = Boid(0, 0, 2)

    with pytest.raises(ValueError):
        boid.position[0] = 5.0
    with pytest.raises(AttributeError):
        boid.position = (1, 1)
    with pytest.raises(AttributeError):
        boid.radius = 9


def test_velocity_is_mutable_in_place():
    boid = Boid(0, 0, 2)
    boid.velocity[1] = -3.0

    boid.move()
    np.testing.assert_allclose(boid.position, [0.0, -3.0])
