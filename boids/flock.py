"""Flock management - brute-force neighbor scan and steering with Numba JIT."""

import math
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

import numpy as np
from numba import njit, prange

from config import boids as config
from .boid import Boid, Color


# Order of the packed steering parameter array handed to the kernels
AVOID, RANGE, CENTERING, MATCHING, MAX_SPEED, MIN_SPEED, BIAS, NOISE, EPSILON = range(9)


class UpdateStrategy(str, Enum):
    """How a step orders velocity computation and movement."""

    # Each boid moves before the next one is steered, so later boids see
    # this frame's state for earlier ones.
    SEQUENTIAL = "sequential"
    # All velocities computed from the frame-start state, then committed.
    TWO_PHASE = "two_phase"


class NeighborlessPolicy(str, Enum):
    """What alignment and cohesion do for a boid with no neighbors."""

    # Averages stay at zero, pulling velocity toward (0, 0) and the boid
    # toward the world origin.
    ORIGIN_PULL = "origin_pull"
    SKIP = "skip"


# ============================================================================
# NUMBA JIT-COMPILED STEERING FUNCTIONS
# ============================================================================

@njit(cache=True)
def surface_gap(px: float, py: float, r: float, qx: float, qy: float, r2: float) -> float:
    """Signed surface-to-surface distance between two circles (negative on overlap)."""
    return math.hypot(qx - px, qy - py) - (r + r2)


@njit(cache=True)
def pair_separation(px: float, py: float, r: float, qx: float, qy: float, r2: float):
    """
    Repulsion felt by the circle at p from the circle at q.

    Points away from q and is weighted by 1 / (|q - p| * 2^gap), so
    overlapping circles push much harder than distant ones. Coincident
    centers contribute nothing.
    """
    dx = qx - px
    dy = qy - py
    length = math.hypot(dx, dy)
    if length == 0.0:
        return 0.0, 0.0
    weight = length * 2.0 ** (length - (r + r2))
    return -dx / weight, -dy / weight


@njit(cache=True)
def steer_boid(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    radii: np.ndarray,
    destination: np.ndarray,
    jitter: np.ndarray,
    params: np.ndarray,
    skip_neighborless: bool
):
    """Compute the next velocity of boid i from the current arrays."""
    visual_range = params[RANGE]
    max_speed = params[MAX_SPEED]
    min_speed = params[MIN_SPEED]
    bias = params[BIAS]

    px = positions[i, 0]
    py = positions[i, 1]
    r = radii[i]
    vx = velocities[i, 0]
    vy = velocities[i, 1]

    sep_x, sep_y = 0.0, 0.0
    vel_x, vel_y = 0.0, 0.0
    pos_x, pos_y = 0.0, 0.0
    count = 0

    for j in range(positions.shape[0]):
        if j == i:
            continue

        qx = positions[j, 0]
        qy = positions[j, 1]
        if surface_gap(px, py, r, qx, qy, radii[j]) < visual_range:
            sx, sy = pair_separation(px, py, r, qx, qy, radii[j])
            sep_x += sx
            sep_y += sy
            vel_x += velocities[j, 0]
            vel_y += velocities[j, 1]
            pos_x += qx
            pos_y += qy
            count += 1

    if count > 0:
        vel_x /= count
        vel_y /= count
        pos_x /= count
        pos_y /= count

    # Destination direction scaled to max speed
    to_x = destination[0] - px
    to_y = destination[1] - py
    to_len = math.hypot(to_x, to_y)
    if to_len > 0.0:
        to_x = to_x / to_len * max_speed
        to_y = to_y / to_len * max_speed
    else:
        to_x, to_y = 0.0, 0.0

    # Separation
    vx += sep_x * params[AVOID]
    vy += sep_y * params[AVOID]

    if count > 0 or not skip_neighborless:
        # Alignment
        vx += params[MATCHING] * (vel_x - vx)
        vy += params[MATCHING] * (vel_y - vy)
        # Cohesion
        vx += params[CENTERING] * (pos_x - px)
        vy += params[CENTERING] * (pos_y - py)

    # Destination
    vx = (1.0 - bias) * vx + bias * to_x
    vy = (1.0 - bias) * vy + bias * to_y

    vx += jitter[i, 0] * params[NOISE]
    vy += jitter[i, 1] * params[NOISE]

    speed = math.hypot(vx, vy)
    if speed > max_speed:
        scale = max_speed / (speed + params[EPSILON])
        vx *= scale
        vy *= scale
    elif speed < min_speed:
        scale = min_speed / (speed + params[EPSILON])
        vx *= scale
        vy *= scale

    return vx, vy


@njit(cache=True)
def sweep_sequential(
    positions: np.ndarray,
    velocities: np.ndarray,
    radii: np.ndarray,
    destination: np.ndarray,
    jitter: np.ndarray,
    params: np.ndarray,
    skip_neighborless: bool
):
    """Steer and move each boid in turn, in place."""
    for i in range(positions.shape[0]):
        vx, vy = steer_boid(
            i, positions, velocities, radii, destination, jitter, params, skip_neighborless
        )
        velocities[i, 0] = vx
        velocities[i, 1] = vy
        positions[i, 0] += vx
        positions[i, 1] += vy


@njit(parallel=True, cache=True)
def sweep_two_phase(
    positions: np.ndarray,
    velocities: np.ndarray,
    radii: np.ndarray,
    destination: np.ndarray,
    jitter: np.ndarray,
    params: np.ndarray,
    skip_neighborless: bool,
    new_velocities: np.ndarray
):
    """Steer every boid from the frame-start snapshot, then commit and move."""
    n = positions.shape[0]
    for i in prange(n):
        vx, vy = steer_boid(
            i, positions, velocities, radii, destination, jitter, params, skip_neighborless
        )
        new_velocities[i, 0] = vx
        new_velocities[i, 1] = vy

    for i in range(n):
        velocities[i, 0] = new_velocities[i, 0]
        velocities[i, 1] = new_velocities[i, 1]
        positions[i, 0] += new_velocities[i, 0]
        positions[i, 1] += new_velocities[i, 1]


# ============================================================================
# FLOCK CLASS
# ============================================================================

class Flock:
    """
    A set of boids moving in unison toward a shared destination.

    Args:
        rng: Seed or numpy Generator for the per-step jitter
        strategy: UpdateStrategy (or its value) used by update()
        neighborless: NeighborlessPolicy (or its value) for isolated boids
    """

    def __init__(
        self,
        rng=None,
        strategy=UpdateStrategy.SEQUENTIAL,
        neighborless=NeighborlessPolicy.ORIGIN_PULL
    ):
        self.boids: List[Boid] = []
        self.destination = np.zeros(2, dtype=np.float64)
        self.rng = np.random.default_rng(rng)
        self.strategy = UpdateStrategy(strategy)
        self.neighborless = NeighborlessPolicy(neighborless)

        steering = config.STEERING
        self.avoid_factor = float(steering["avoid_factor"])
        self.visual_range = float(steering["visual_range"])
        self.centering_factor = float(steering["centering_factor"])
        self.matching_factor = float(steering["matching_factor"])
        self.max_speed = float(steering["max_speed"])
        self.min_speed = float(steering["min_speed"])
        self.bias_val = float(steering["bias_val"])
        self.noise_strength = float(steering["noise_strength"])
        self.speed_epsilon = float(steering["speed_epsilon"])

    def __len__(self):
        return len(self.boids)

    def __iter__(self) -> Iterator[Boid]:
        return iter(self.boids)

    def _params(self) -> np.ndarray:
        return np.array([
            self.avoid_factor,
            self.visual_range,
            self.centering_factor,
            self.matching_factor,
            self.max_speed,
            self.min_speed,
            self.bias_val,
            self.noise_strength,
            self.speed_epsilon,
        ], dtype=np.float64)

    def _pack(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        positions = np.array([boid.position for boid in self.boids], dtype=np.float64)
        velocities = np.array([boid.velocity for boid in self.boids], dtype=np.float64)
        radii = np.array([boid.radius for boid in self.boids], dtype=np.float64)
        return positions, velocities, radii

    def warmup(self):
        """Pre-compile the Numba kernels on a throwaway pair of boids."""
        pos = np.array([[0.0, 0.0], [5.0, 0.0]])
        vel = np.zeros((2, 2))
        radii = np.array([2.0, 2.0])
        dest = np.zeros(2)
        jitter = np.zeros((2, 2))
        params = self._params()

        sweep_sequential(pos.copy(), vel.copy(), radii, dest, jitter, params, False)
        sweep_two_phase(pos.copy(), vel.copy(), radii, dest, jitter, params, False, np.zeros((2, 2)))

    def update(self):
        """Update velocities and positions of all boids in the flock."""
        n = len(self.boids)
        if n == 0:
            return

        positions, velocities, radii = self._pack()
        # x then y for each boid, in flock order
        jitter = self.rng.uniform(-1.0, 1.0, size=(n, 2))
        params = self._params()
        skip = self.neighborless is NeighborlessPolicy.SKIP

        if self.strategy is UpdateStrategy.SEQUENTIAL:
            sweep_sequential(positions, velocities, radii, self.destination, jitter, params, skip)
        else:
            sweep_two_phase(
                positions, velocities, radii, self.destination, jitter, params, skip,
                np.empty_like(velocities)
            )

        for boid, position, velocity in zip(self.boids, positions, velocities):
            boid._store(position, velocity)

    def add_boid(self, x: float, y: float, radius: float,
                 color: Color = config.BOIDS["default_color"]) -> Boid:
        """
        Add a boid to the flock.

        Args:
            x: Initial X coordinate
            y: Initial Y coordinate
            radius: Circle radius
            color: RGB tuple (0-255)

        Returns:
            The new boid, at rest
        """
        boid = Boid(x, y, radius, color)
        self.boids.append(boid)
        return boid

    def set_dest(self, point: Sequence[float]):
        """Set the destination all boids move towards, effective next update."""
        self.destination = np.array(point, dtype=np.float64).reshape(2)

    def clear(self):
        """Remove all boids. The destination is kept."""
        self.boids.clear()

    def neighbors(self, index: int) -> List[int]:
        """Indices of the boids that boid `index` currently counts as neighbors."""
        positions, _, radii = self._pack()
        deltas = positions - positions[index]
        gaps = np.hypot(deltas[:, 0], deltas[:, 1]) - (radii + radii[index])
        mask = gaps < self.visual_range
        mask[index] = False
        return np.flatnonzero(mask).tolist()

    def draw_stream(self) -> Iterator[Tuple[np.ndarray, float, Color]]:
        """Yield (position, radius, color) for each boid, in flock order."""
        for boid in self.boids:
            yield boid.position.copy(), boid.radius, boid.color

    def draw(self, renderer):
        """Hand the current boids to a renderer as packed arrays."""
        if not self.boids:
            return

        positions, _, radii = self._pack()
        colors = np.array([boid.color for boid in self.boids], dtype=np.float64)
        renderer.draw(positions, radii, colors)
