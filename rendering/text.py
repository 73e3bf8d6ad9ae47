"""HUD text overlay."""

from typing import Sequence, Tuple

import pygame
from OpenGL.GL import *

from config import boids as config


class HudRenderer:
    """Renders lines of text in the top-left corner using pygame fonts."""

    def __init__(self, font_name: str = "monospace", font_size: int = 18, line_spacing: int = 25):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.line_spacing = line_spacing
        self.color = config.COLORS["text"]

    def draw_lines(self, lines: Sequence[str], screen_size: Tuple[int, int], x: int = 10, y: int = 10):
        """
        Draw each line below the previous one.

        Assumes the 2D projection set up by the application, where y grows
        downward, so the raster position is the bottom-left of each bitmap.
        """
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

        for row, text in enumerate(lines):
            surface = self.font.render(text, True, self.color)
            data = pygame.image.tostring(surface, "RGBA", True)
            w, h = surface.get_size()
            top = y + row * self.line_spacing
            if top + h > screen_size[1]:
                break
            glRasterPos2f(x, top + h)
            glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)

        glDisable(GL_BLEND)
