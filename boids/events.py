"""Input events consumed by the simulation, independent of any window library."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class WindowClosed:
    pass


@dataclass(frozen=True)
class PointerMoved:
    x: float
    y: float


@dataclass(frozen=True)
class KeyPressed:
    """A key press, identified by its lower-case key name (e.g. "r", "escape")."""
    code: str


Event = Union[WindowClosed, PointerMoved, KeyPressed]
