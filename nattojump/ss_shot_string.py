"""The string the player shoots toward the mouse cursor."""

from __future__ import annotations

import math

from nattojump.constants import Color, GameScene, Vec2
from nattojump.game_object import GameContext, GameObject
from nattojump.input import MouseButton

_GROWTH = 20.0


class ShotString(GameObject):
    """A rotating strand anchored at ``pos`` that extends toward the cursor."""

    game_scene = GameScene.GAME_TEST
    TEXTURE_NAME = "data/TEXTURE/String1.png"

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None
        self.pos = Vec2()
        self.size = Vec2()
        self.angle = 0.0
        self.cursor = Vec2()
        self.is_click = False

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.TEXTURE_NAME)
        self.size = Vec2(0.0, 5.0)
        self.pos = Vec2(0.0, 0.0)
        self.angle = 0.0

    def update(self) -> None:
        mouse = self.context.input
        if mouse.is_mouse_pressed(MouseButton.LEFT):
            self.cursor = Vec2(float(mouse.mouse_x), float(mouse.mouse_y))
            self.angle = math.atan2(self.pos.y - self.cursor.y, self.pos.x - self.cursor.x)

        if mouse.is_mouse_triggered(MouseButton.LEFT):
            self.is_click = True
            self.size.x = 0.0

        # The string never grows past the cursor.
        reach = self.pos.distance_to(self.cursor) * 2.0
        if reach <= self.size.x:
            self.size.x = reach
        else:
            self.size.x += _GROWTH

    def draw(self) -> None:
        self.context.canvas.draw_sprite_color_rotate(
            self.texture,
            self.pos.x,
            self.pos.y,
            self.size.x,
            self.size.y,
            0.0,
            0.0,
            0.9,
            0.9,
            Color(1.0, 1.0, 1.0, 1.0),
            self.angle,
        )