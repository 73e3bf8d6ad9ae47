import numpy as np
import pytest

from boids import KeyPressed, PointerMoved, Simulation, WindowClosed


def positions(sim):
    return np.array([boid.position for boid in sim.flock])


def test_initial_population():
    sim = Simulation(width=320, height=240, flock_size=30, seed=1)

    assert len(sim.flock) == 30
    assert sim.running
    pos = positions(sim)
    assert np.all(pos[:, 0] < 320) and np.all(pos[:, 1] < 240)


def test_pointer_sets_destination():
    sim = Simulation(width=100, height=100, flock_size=5, seed=1)

    assert sim.handle([PointerMoved(12, 34), PointerMoved(56, 78)])
    np.testing.assert_array_equal(sim.flock.destination, [56.0, 78.0])


def test_reset_key_respawns_and_keeps_destination():
    sim = Simulation(width=100, height=100, flock_size=8, seed=2)
    before = positions(sim)

    sim.handle([PointerMoved(10, 20), KeyPressed("r")])

    assert len(sim.flock) == 8
    assert not np.array_equal(before, positions(sim))
    np.testing.assert_array_equal(sim.flock.destination, [10.0, 20.0])
    for boid in sim.flock:
        np.testing.assert_array_equal(boid.velocity, [0.0, 0.0])


def test_other_keys_are_ignored():
    sim = Simulation(width=100, height=100, flock_size=4, seed=2)
    before = positions(sim)

    assert sim.handle([KeyPressed("x"), KeyPressed("space")])
    np.testing.assert_array_equal(before, positions(sim))


@pytest.mark.parametrize("event", [WindowClosed(), KeyPressed("escape")])
def test_close_stops_the_loop_without_stepping(event):
    sim = Simulation(width=100, height=100, flock_size=4, seed=2)
    before = positions(sim)

    assert not sim.frame([event])
    assert not sim.running
    assert sim.frame_count == 0
    np.testing.assert_array_equal(before, positions(sim))


def test_frame_steps_once():
    sim = Simulation(width=100, height=100, flock_size=4, seed=2)
    before = positions(sim)

    assert sim.frame([])
    assert sim.frame_count == 1
    assert not np.array_equal(before, positions(sim))


def test_seed_and_events_reproduce_run():
    script = [
        [PointerMoved(50, 50)],
        [],
        [PointerMoved(150, 20)],
        [KeyPressed("r")],
        [],
        [PointerMoved(5, 190)],
    ]

    def run(seed):
        sim = Simulation(width=200, height=200, flock_size=25, seed=seed)
        frames = []
        for events in script:
            sim.frame(events)
            frames.append(positions(sim))
        return np.array(frames)

    np.testing.assert_array_equal(run(123), run(123))
    assert not np.array_equal(run(123), run(124))


def test_empty_simulation_runs():
    sim = Simulation(width=100, height=100, flock_size=0, seed=0)

    assert sim.frame([PointerMoved(1, 1), KeyPressed("r")])
    assert len(sim.flock) == 0


def test_negative_flock_size_is_rejected():
    with pytest.raises(ValueError):
        Simulation(flock_size=-5)


def test_strategy_is_forwarded():
    sim = Simulation(width=50, height=50, flock_size=3, seed=0, strategy="two_phase", neighborless="skip")

    assert sim.flock.strategy.value == "two_phase"
    assert sim.flock.neighborless.value == "skip"
