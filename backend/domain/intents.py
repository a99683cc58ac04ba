"""
Intent vocabulary crossing the InputSource -> simulation boundary.

Physical key bindings (arrows, WASD, space) belong to the presentation layer;
only these intents reach the engine.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import DIRECTION_NAMES


class Intent:
    """Base class for every discrete player intent."""


@dataclass(frozen=True)
class Start(Intent):
    pass


@dataclass(frozen=True)
class TogglePause(Intent):
    pass


@dataclass(frozen=True)
class Reset(Intent):
    pass


@dataclass(frozen=True)
class Direction(Intent):
    """A steering request, named UP, DOWN, LEFT or RIGHT."""

    name: str

    def __post_init__(self):
        if self.name not in DIRECTION_NAMES:
            raise ValueError(f"Unknown direction {self.name!r}.")

    @property
    def vector(self) -> Tuple[int, int]:
        return DIRECTION_NAMES[self.name]
