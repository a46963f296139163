"""Horizontally scrolling town background for the string-shooting stage."""

from __future__ import annotations

from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH, GameScene, Vec2
from nattojump.game_object import GameContext, GameObject
from nattojump.input import Key


class ScrollingBackground(GameObject):
    """Full-screen background whose texture offset ``u`` scrolls with A and D."""

    game_scene = GameScene.BUNGEE_JUMP
    TEXTURE_NAME = "data/TEXTURE/mati.png"
    UV_SCROLL = 0.001

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None
        self.pos = Vec2()
        self.size = Vec2()
        self.u = 0.0

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.TEXTURE_NAME)
        self.pos = Vec2(0.0, 0.0)
        self.size = Vec2(float(SCREEN_WIDTH), float(SCREEN_HEIGHT))
        self.u = 0.5

    def update(self) -> None:
        keys = self.context.input
        if keys.is_key_pressed(Key.D):
            self.add_u(self.UV_SCROLL)
        if keys.is_key_pressed(Key.A):
            self.sub_u(self.UV_SCROLL)

    def draw(self) -> None:
        self.context.canvas.draw_sprite_left_top(
            self.texture,
            self.pos.x,
            self.pos.y,
            self.size.x,
            self.size.y,
            self.u,
            1.0,
            0.5,
            1.0,
        )

    def add_u(self, amount: float) -> None:
        """Scroll the texture forward by ``amount``."""
        self.u += amount

    def sub_u(self, amount: float) -> None:
        """Scroll the texture back by ``amount``."""
        self.u -= amount