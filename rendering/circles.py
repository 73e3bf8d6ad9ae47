"""Filled-circle rendering for the flock using VBOs."""

import numpy as np
from OpenGL.GL import *
from OpenGL.arrays import vbo

from config import boids as config
from .geometry import build_circle_vertices


class CircleRenderer:
    """Draws one filled, colored circle per boid."""

    def __init__(self, segments: int = config.RENDER["circle_segments"]):
        self.segments = segments
        self._vbo_vertices = None
        self._vbo_colors = None
        self._vbos_initialized = False
        self._vbos_failed = False

    def _init_vbos(self, vertices: np.ndarray, vert_colors: np.ndarray):
        """Initialize VBOs for fast GPU rendering."""
        try:
            self._vbo_vertices = vbo.VBO(vertices, usage=GL_DYNAMIC_DRAW)
            self._vbo_colors = vbo.VBO(vert_colors, usage=GL_DYNAMIC_DRAW)
            self._vbos_initialized = True
        except Exception as e:
            print(f"[Render] VBO init failed, using client arrays: {e}")
            self._vbos_failed = True

    def draw(self, positions: np.ndarray, radii: np.ndarray, colors: np.ndarray):
        """
        Render circles.

        Args:
            positions: (n, 2) centers in window coordinates
            radii: (n,) radii in pixels
            colors: (n, 3) RGB channels in 0-255
        """
        if len(positions) == 0:
            return

        vertices, vert_colors = build_circle_vertices(positions, radii, colors, self.segments)
        total_verts = len(vertices)

        if not self._vbos_initialized and not self._vbos_failed:
            self._init_vbos(vertices, vert_colors)

        if self._vbos_initialized:
            self._vbo_vertices.set_array(vertices)
            self._vbo_colors.set_array(vert_colors)

            self._vbo_vertices.bind()
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, None)

            self._vbo_colors.bind()
            glEnableClientState(GL_COLOR_ARRAY)
            glColorPointer(3, GL_FLOAT, 0, None)

            glDrawArrays(GL_TRIANGLES, 0, total_verts)

            self._vbo_vertices.unbind()
            self._vbo_colors.unbind()
        else:
            glEnableClientState(GL_VERTEX_ARRAY)
            glEnableClientState(GL_COLOR_ARRAY)

            glVertexPointer(2, GL_FLOAT, 0, vertices)
            glColorPointer(3, GL_FLOAT, 0, vert_colors)
            glDrawArrays(GL_TRIANGLES, 0, total_verts)

        glDisableClientState(GL_VERTEX_ARRAY)
        glDisableClientState(GL_COLOR_ARRAY)
