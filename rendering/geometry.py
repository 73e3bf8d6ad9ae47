"""Triangle geometry for filled circles."""

import math
import numpy as np
from numba import njit, prange


@njit(parallel=True, cache=True)
def _fill_circle_vertices(
    positions: np.ndarray,
    radii: np.ndarray,
    colors: np.ndarray,
    cos_table: np.ndarray,
    sin_table: np.ndarray,
    vertices: np.ndarray,
    vert_colors: np.ndarray,
    segments: int,
    num_circles: int
):
    """Numba JIT-compiled fan triangulation, 3 vertices per segment."""
    for i in prange(num_circles):
        cx, cy = positions[i, 0], positions[i, 1]
        r = radii[i]
        cr = colors[i, 0] / 255.0
        cg = colors[i, 1] / 255.0
        cb = colors[i, 2] / 255.0

        base = i * segments * 3
        for s in range(segments):
            k = (s + 1) % segments
            v = base + s * 3

            vertices[v, 0] = cx
            vertices[v, 1] = cy
            vertices[v + 1, 0] = cx + r * cos_table[s]
            vertices[v + 1, 1] = cy + r * sin_table[s]
            vertices[v + 2, 0] = cx + r * cos_table[k]
            vertices[v + 2, 1] = cy + r * sin_table[k]

            for t in range(3):
                vert_colors[v + t, 0] = cr
                vert_colors[v + t, 1] = cg
                vert_colors[v + t, 2] = cb


def build_circle_vertices(positions: np.ndarray, radii: np.ndarray, colors: np.ndarray,
                          segments: int = 12):
    """
    Triangulate circles for GL_TRIANGLES.

    Args:
        positions: (n, 2) circle centers
        radii: (n,) circle radii
        colors: (n, 3) RGB channels in 0-255
        segments: Triangles per circle (at least 3)

    Returns:
        (vertices, colors) as float32 arrays of shape (n * segments * 3, 2)
        and (n * segments * 3, 3), colors scaled to 0-1
    """
    if segments < 3:
        raise ValueError(f"A circle needs at least 3 segments, got {segments}")

    n = len(positions)
    angles = np.linspace(0.0, 2.0 * math.pi, segments, endpoint=False)
    vertices = np.zeros((n * segments * 3, 2), dtype=np.float32)
    vert_colors = np.zeros((n * segments * 3, 3), dtype=np.float32)

    if n == 0:
        return vertices, vert_colors

    _fill_circle_vertices(
        np.ascontiguousarray(positions, dtype=np.float64),
        np.ascontiguousarray(radii, dtype=np.float64),
        np.ascontiguousarray(colors, dtype=np.float64),
        np.cos(angles),
        np.sin(angles),
        vertices,
        vert_colors,
        segments,
        n
    )
    return vertices, vert_colors
