"""Translation of pygame events into simulation input events."""

from typing import List, Optional

import pygame
from pygame.locals import *

from boids.events import Event, KeyPressed, PointerMoved, WindowClosed


class InputHandler:
    """Turns the pygame event queue into WindowClosed / PointerMoved / KeyPressed."""

    def translate(self, event: pygame.event.Event) -> Optional[Event]:
        """
        Convert a single pygame event.
        Returns None for events the simulation does not consume.
        """
        if event.type == QUIT:
            return WindowClosed()
        elif event.type == MOUSEMOTION:
            x, y = event.pos
            return PointerMoved(float(x), float(y))
        elif event.type == KEYDOWN:
            return KeyPressed(pygame.key.name(event.key).lower())
        return None

    def poll(self) -> List[Event]:
        """Drain pending pygame events, keeping their order."""
        events = []
        for event in pygame.event.get():
            translated = self.translate(event)
            if translated is not None:
                events.append(translated)
        return events
