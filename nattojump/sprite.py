"""Textured quad construction and the drawing surface game objects render to."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from nattojump.constants import Color


@dataclass(frozen=True)
class Vertex:
    """A screen-space corner with texture coordinates and colour."""

    x: float
    y: float
    u: float
    v: float
    color: Color


Quad = tuple[Vertex, Vertex, Vertex, Vertex]


def _tex_coords(u: float, v: float, uw: float, vh: float):
    return ((u, v), (u + uw, v), (u, v + vh), (u + uw, v + vh))


def _build(positions, u, v, uw, vh, color) -> Quad:
    return tuple(
        Vertex(px, py, tu, tv, color)
        for (px, py), (tu, tv) in zip(positions, _tex_coords(u, v, uw, vh))
    )


def sprite_quad(x, y, width, height, u, v, uw, vh, color) -> Quad:
    """Quad centred on (x, y); corners ordered top-left, top-right, bottom-left, bottom-right."""
    hw = width * 0.5
    hh = height * 0.5
    positions = (
        (x - hw, y - hh),
        (x + hw, y - hh),
        (x - hw, y + hh),
        (x + hw, y + hh),
    )
    return _build(positions, u, v, uw, vh, color)


def left_top_quad(x, y, width, height, u, v, uw, vh, color) -> Quad:
    """Quad whose top-left corner is (x, y)."""
    positions = (
        (x, y),
        (x + width, y),
        (x, y + height),
        (x + width, y + height),
    )
    return _build(positions, u, v, uw, vh, color)


def rotated_quad(x, y, width, height, u, v, uw, vh, color, rotation) -> Quad:
    """Quad centred on (x, y) and rotated by ``rotation`` radians."""
    hw = width * 0.5
    hh = height * 0.5
    base = math.atan2(hh, hw)
    radius = math.hypot(hw, hh)
    plus = base + rotation
    minus = base - rotation
    positions = (
        (x - math.cos(plus) * radius, y - math.sin(plus) * radius),
        (x + math.cos(minus) * radius, y - math.sin(minus) * radius),
        (x - math.cos(minus) * radius, y + math.sin(minus) * radius),
        (x + math.cos(plus) * radius, y + math.sin(plus) * radius),
    )
    return _build(positions, u, v, uw, vh, color)


class Canvas(ABC):
    """A surface that renders textured quads; subclasses supply ``draw_quad``."""

    @abstractmethod
    def draw_quad(self, texture: Any, vertices: Quad) -> None:
        """Render one quad with the given texture index."""

    def draw_sprite(self, texture, x, y, width, height, u, v, uw, vh) -> None:
        self.draw_quad(texture, sprite_quad(x, y, width, height, u, v, uw, vh, Color()))

    def draw_sprite_left_top(self, texture, x, y, width, height, u, v, uw, vh) -> None:
        self.draw_quad(texture, left_top_quad(x, y, width, height, u, v, uw, vh, Color()))

    def draw_sprite_color(self, texture, x, y, width, height, u, v, uw, vh, color) -> None:
        self.draw_quad(texture, sprite_quad(x, y, width, height, u, v, uw, vh, color))

    def draw_sprite_color_rotate(
        self, texture, x, y, width, height, u, v, uw, vh, color, rotation
    ) -> None:
        self.draw_quad(
            texture, rotated_quad(x, y, width, height, u, v, uw, vh, color, rotation)
        )


class RecordingCanvas(Canvas):
    """Canvas that keeps every drawn quad in ``draws`` as ``(texture, vertices)``."""

    def __init__(self) -> None:
        self.draws: list[tuple[Any, Quad]] = []

    def draw_quad(self, texture: Any, vertices: Quad) -> None:
        self.draws.append((texture, tuple(vertices)))

    def clear(self) -> None:
        """Forget everything drawn so far."""
        self.draws.clear()