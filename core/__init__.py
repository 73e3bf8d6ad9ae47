"""Core application components.

`core.application` needs an OpenGL library and is imported directly by
main.py; only the window-independent pieces are exported here.
"""

from .input_handler import InputHandler

__all__ = ["InputHandler"]
