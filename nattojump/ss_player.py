"""The player of the string-shooting stage, who falls, jumps and swings."""

from __future__ import annotations

import math

from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH, GameScene, Vec2
from nattojump.game_object import GameContext, GameObject
from nattojump.input import Key

_WALK_STEP = 4.0


class SwingPlayer(GameObject):
    """Falls under gravity, walks with A and D, and swings around a quarter of the screen."""

    game_scene = GameScene.GAME_TEST
    TEXTURE_NAME = "data/TEXTURE/fall1.png"

    JUMP = -15.0
    GRAVITY_ACCELERATION = 0.3
    DEFAULT_GRAVITY = 1.0

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None
        self.pos = Vec2()
        self.size = Vec2()
        self.delay = 0.0
        self.gravity = self.DEFAULT_GRAVITY
        self.is_jump = False

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.TEXTURE_NAME)
        self.pos = Vec2(SCREEN_WIDTH / 4, -100.0)
        self.size = Vec2(200.0, 200.0)
        self.delay = 1.0
        self.gravity = self.DEFAULT_GRAVITY
        self.is_jump = False

    def update(self) -> None:
        keys = self.context.input
        if keys.is_key_triggered(Key.SPACE) and self.pos.y >= SCREEN_HEIGHT / 4:
            self.is_jump = True
            self.gravity = self.DEFAULT_GRAVITY * self.JUMP
        if keys.is_key_pressed(Key.A):
            self.pos.x -= _WALK_STEP
        if keys.is_key_pressed(Key.D):
            self.pos.x += _WALK_STEP
        self.gravity += self.GRAVITY_ACCELERATION
        self.pos.y += self.gravity

    def draw(self) -> None:
        self.context.canvas.draw_sprite(
            self.texture,
            self.pos.x,
            self.pos.y,
            self.size.x,
            self.size.y,
            1.0,
            1.0,
            1.0,
            1.0,
        )

    def reset_gravity(self) -> None:
        """Put the fall speed back to its resting value."""
        self.gravity = self.DEFAULT_GRAVITY

    def _swing(self, angle: float, direction: float) -> None:
        centre_offset = SCREEN_WIDTH / 4.0 - self.pos.x
        lift = (self.pos.y / 5.0) * math.sin(angle)
        shift = (centre_offset / 10.0) * math.cos(angle)
        self.pos.y -= lift
        self.pos.x += direction * shift

    def wave_plus(self, angle: float) -> None:
        """Swing step that pulls the player toward the anchor column."""
        self._swing(angle, 1.0)

    def wave_minus(self, angle: float) -> None:
        """Swing step that pushes the player away from the anchor column."""
        self._swing(angle, -1.0)