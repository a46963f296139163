"""The bungee-jump stage: the player falls and bounces back up on a key press."""

from __future__ import annotations

from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH, GameScene, Vec2
from nattojump.game_object import GameContext, GameObject
from nattojump.input import Key


class Bungee(GameObject):
    """A falling player that springs upward when Space is tapped low enough on screen."""

    game_scene = GameScene.BUNGEE_JUMP
    TEXTURE_NAME = "data/TEXTURE/fall1.png"

    JUMP = -15.0
    GRAVITY_ACCELERATION = 0.3
    DEFAULT_GRAVITY = 1.0

    def __init__(self, context: GameContext | None = None) -> None:
        super().__init__(context)
        self.texture: int | None = None
        self.pos = Vec2()
        self.size = Vec2()
        self.gravity = self.DEFAULT_GRAVITY

    @property
    def pos_y(self) -> float:
        """Vertical position of the player."""
        return self.pos.y

    def initialize(self) -> None:
        self.texture = self.context.textures.load(self.TEXTURE_NAME)
        self.pos = Vec2(SCREEN_WIDTH / 4, -100.0)
        self.size = Vec2(200.0, 200.0)
        self.gravity = self.DEFAULT_GRAVITY

    def update(self) -> None:
        keys = self.context.input
        if keys.is_key_triggered(Key.SPACE) and self.pos.y >= SCREEN_HEIGHT / 4:
            self.gravity = self.DEFAULT_GRAVITY * self.JUMP
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