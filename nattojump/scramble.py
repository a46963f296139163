"""The natto-stirring vortex and the link that turns it toward the player."""

from __future__ import annotations

import math

from nattojump.constants import (
    SCREEN_HEIGHT_HALF,
    SCREEN_WIDTH_HALF,
    Color,
    GameScene,
    Vec2,
)
from nattojump.game_object import GameContext, GameObject
from nattojump.player import Player


class Scramble(GameObject):
    """A large rotating vortex drawn in the middle of the screen."""

    game_scene = GameScene.SCRAMBLE
    TEXTURE_NAME = "data/TEXTURE/Vortex.png"

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None
        self.pos = Vec2()
        self.vel = Vec2()
        self.size = Vec2()
        self.color = Color()
        self.frame = 0
        self.angle = 0.0

    def initialize(self) -> None:
        self.pos = Vec2(float(SCREEN_WIDTH_HALF), float(SCREEN_HEIGHT_HALF))
        self.vel = Vec2(0.0, 0.0)
        self.color = Color(1.0, 1.0, 1.0, 1.0)
        self.frame = 0
        self.angle = 0.0
        self.size = Vec2(500.0, 500.0)
        self.texture = self.context.textures.load(self.TEXTURE_NAME)

    def draw(self) -> None:
        self.context.canvas.draw_sprite_color_rotate(
            self.texture,
            self.pos.x,
            self.pos.y,
            self.size.x,
            self.size.y,
            0.0,
            0.0,
            1.0,
            1.0,
            self.color,
            self.angle,
        )


class ScrambleRotation(GameObject):
    """Each frame, points the vortex at the player."""

    game_scene = GameScene.SCRAMBLE

    def __init__(
        self,
        context: GameContext | None = None,
        player: Player | None = None,
        vortex: Scramble | None = None,
    ) -> None:
        super().__init__(context)
        self.player = player
        self.vortex = vortex

    def update(self) -> None:
        if self.player is None or self.vortex is None:
            raise RuntimeError("scramble rotation needs both a player and a vortex")
        dx = self.player.pos.x - self.vortex.pos.x
        dy = self.player.pos.y - self.vortex.pos.y
        self.vortex.angle = math.atan2(dx, dy)