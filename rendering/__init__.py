"""Rendering components for the 2D flocking demo.

Import `rendering.circles` / `rendering.text` directly; they need an OpenGL
library, `rendering.geometry` does not.
"""
