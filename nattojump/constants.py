"""Screen geometry, scene identifiers and small value types shared by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

CLASS_NAME = "GameWindow"
WINDOW_CAPTION = "HEW プロトタイプ"

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
SCREEN_WIDTH_HALF = SCREEN_WIDTH // 2
SCREEN_HEIGHT_HALF = SCREEN_HEIGHT // 2

PI = math.pi
RADIAN = PI / 180.0


class GameScene(IntEnum):
    """Stages inside the game screen; objects only run while their stage is active."""

    NONE = 0
    SCRAMBLE = 1
    FALL = 2
    BUNGEE_JUMP = 3
    GAME_TEST = 4


@dataclass
class Vec2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance between this point and ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def copy(self) -> Vec2:
        """Return an independent copy of this vector."""
        return Vec2(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class Color:
    """An RGBA colour with components in the range 0..1."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b
        yield self.a